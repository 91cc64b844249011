"""
FaaS Inspector: one instance per function invocation.

Collects facts about the container, CPU, kernel and hosting platform into a
flat attribute record and times the invocation. Every collector degrades on
its own; the record handed back by finish() may be partial but always exists.
"""

import logging
import time
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

from collectors.container import ContainerCollector, DEFAULT_MARKER_FILE
from collectors.cpu import CPUCollector, DEFAULT_CPUINFO_FILE
from collectors.faas_platform import PlatformCollector
from collectors.kernel import KernelCollector
from collectors.sources import CommandResult, DEFAULT_STAT_FILE, run_command
from probe.attributes import AttributeStore, AttributeValue

logger = logging.getLogger(__name__)


class Inspector:
    """Collects and times one invocation's runtime attributes."""

    def __init__(
        self,
        marker_file: Union[str, Path] = DEFAULT_MARKER_FILE,
        cpuinfo_file: Union[str, Path] = DEFAULT_CPUINFO_FILE,
        stat_file: Union[str, Path] = DEFAULT_STAT_FILE,
        runner: Callable[[List[str]], CommandResult] = run_command,
        include_memory: bool = False,
    ):
        # Wall-clock start for reference; elapsed times use the monotonic clock.
        self.start_time = int(time.time() * 1000)
        self._start_monotonic = time.monotonic()

        self.attributes = AttributeStore()
        self.include_memory = include_memory

        self._cpu = CPUCollector(self.attributes, cpuinfo_file, stat_file)
        self._container = ContainerCollector(self.attributes, marker_file, stat_file)
        self._kernel = KernelCollector(self.attributes, runner)
        self._platform = PlatformCollector(self.attributes, runner)

    @classmethod
    def from_config(cls, config: dict, **kwargs) -> "Inspector":
        paths = config.get("paths", {})
        collectors = config.get("collectors", {})
        return cls(
            marker_file=paths.get("marker_file", DEFAULT_MARKER_FILE),
            cpuinfo_file=paths.get("cpuinfo", DEFAULT_CPUINFO_FILE),
            stat_file=paths.get("stat", DEFAULT_STAT_FILE),
            include_memory=bool(collectors.get("memory", False)),
            **kwargs,
        )

    # -------------------------------------------------
    # Collectors
    # -------------------------------------------------
    def inspect_container(self):
        """uuid, newcontainer, vmuptime"""
        self._container.collect()

    def inspect_cpu(self):
        """cpuType, cpuModel and the cpu time counters (cpuUsr ... vmcpusteal)"""
        self._cpu.collect()

    def inspect_platform(self):
        """platform (plus function metadata on AWS Lambda)"""
        self._platform.collect()

    def inspect_linux(self):
        """linuxVersion"""
        self._kernel.collect()

    def inspect_memory(self):
        """totalMemory, freeMemory"""
        try:
            from collectors.memory import MemoryCollector
        except ImportError as e:
            logger.warning(f"Memory collector disabled: {e}")
            return
        MemoryCollector(self.attributes).collect()

    def inspect_all(self):
        """Run every collector, then stamp frameworkRuntime."""
        self.inspect_cpu()
        self.inspect_container()
        self.inspect_linux()
        self.inspect_platform()
        if self.include_memory:
            self.inspect_memory()
        self.add_timestamp("frameworkRuntime")
        logger.info(f"Inspection pass done in {self.attributes.get('frameworkRuntime')}ms")

    # -------------------------------------------------
    # Attributes & timing
    # -------------------------------------------------
    def add_attribute(self, key: str, value: AttributeValue):
        self.attributes.set(key, value)

    def get_attribute(self, key: str) -> Optional[AttributeValue]:
        return self.attributes.get(key)

    def elapsed_ms(self) -> int:
        return int((time.monotonic() - self._start_monotonic) * 1000)

    def add_timestamp(self, key: str):
        """Record milliseconds since construction under key (last write wins)."""
        self.attributes.set(key, self.elapsed_ms())

    def finish(self) -> Dict[str, AttributeValue]:
        """Set total runtime and return the record."""
        self.attributes.set("runtime", self.elapsed_ms())
        return self.attributes.as_dict()
