"""
Best-effort access to the probe's raw sources: external commands and text files.
Neither helper raises; failures come back as values the caller can record or skip.
"""

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

logger = logging.getLogger(__name__)

COMMAND_FAILED = "ERROR"
DEFAULT_STAT_FILE = "/proc/stat"


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one external command run"""
    ok: bool
    stdout: str = ""
    error: Optional[str] = None
    returncode: Optional[int] = None

    @property
    def text(self) -> str:
        """Captured stdout on success, otherwise the failure sentinel."""
        if self.ok:
            return self.stdout
        return self.error or COMMAND_FAILED


def run_command(cmd: List[str]) -> CommandResult:
    """Run cmd to completion and capture stdout. No timeout is applied."""
    try:
        p = subprocess.run(
            cmd, stdout=subprocess.PIPE, stderr=subprocess.DEVNULL,
            text=True, errors="replace", check=False,
        )
    except (OSError, ValueError) as e:
        logger.warning(f"Could not run {cmd!r}: {e}")
        return CommandResult(ok=False, error=f"IO Exception {type(e).__name__}: {e}")

    if p.returncode != 0:
        logger.warning(f"{cmd!r} exited with status {p.returncode}")
        return CommandResult(
            ok=False, stdout=p.stdout or "", error=COMMAND_FAILED, returncode=p.returncode
        )

    return CommandResult(ok=True, stdout=p.stdout or "", returncode=p.returncode)


def read_text(path: Union[str, Path], joiner: str = "") -> str:
    """Return the file's lines joined by joiner, or "" when it is missing or unreadable."""
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8", errors="replace") as f:
            return joiner.join(line.rstrip("\r\n") for line in f)
    except FileNotFoundError:
        return ""
    except OSError as e:
        logger.warning(f"Error reading file={path}: {e}")
        return ""
