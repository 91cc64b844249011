"""Linux kernel version via `uname -v`."""

import logging
from typing import Callable, List

from collectors.sources import CommandResult, run_command
from probe.attributes import AttributeStore

logger = logging.getLogger(__name__)


class KernelCollector:
    """Records `linuxVersion`, or the command's failure sentinel"""

    def __init__(
        self,
        attributes: AttributeStore,
        runner: Callable[[List[str]], CommandResult] = run_command,
    ):
        self.attributes = attributes
        self.runner = runner

    def collect(self):
        try:
            self.attributes.set("linuxVersion", self.runner(["uname", "-v"]).text.strip())
        except Exception as e:
            logger.error(f"Kernel version collection failed: {e}", exc_info=True)
