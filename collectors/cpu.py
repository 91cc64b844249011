"""
CPU identity and aggregate CPU time counters.
Parses /proc/cpuinfo and the first line of /proc/stat directly.
"""

import logging
from pathlib import Path
from typing import Dict, Union

from collectors.sources import DEFAULT_STAT_FILE, read_text
from probe.attributes import AttributeStore

logger = logging.getLogger(__name__)

DEFAULT_CPUINFO_FILE = "/proc/cpuinfo"

# cpuinfo label -> attribute key
CPU_IDENTITY_FIELDS = {
    "model name": "cpuType",
    "model": "cpuModel",
}

# Order of the counters on the aggregate `cpu` line, in clock ticks
CPU_COUNTER_FIELDS = (
    "cpuUsr",
    "cpuNice",
    "cpuKrn",
    "cpuIdle",
    "cpuIowait",
    "cpuIrq",
    "cpuSoftIrq",
    "vmcpusteal",
)


def parse_cpuinfo(text: str) -> Dict[str, str]:
    """Map `model name` / `model` to cpuType / cpuModel, first occurrence wins."""
    found: Dict[str, str] = {}
    for line in text.splitlines():
        if ":" not in line:
            continue
        label, value = line.split(":", 1)
        key = CPU_IDENTITY_FIELDS.get(label.strip())
        if key and key not in found:
            found[key] = value.strip()
        if len(found) == len(CPU_IDENTITY_FIELDS):
            break
    return found


def parse_cpu_counters(text: str) -> Dict[str, int]:
    """Read whichever counters are present on the first (`cpu`) line."""
    lines = text.splitlines()
    if not lines:
        return {}

    fields = lines[0].split()
    if not fields or fields[0] != "cpu":
        return {}

    counters: Dict[str, int] = {}
    for name, raw in zip(CPU_COUNTER_FIELDS, fields[1:]):
        try:
            value = int(raw)
        except ValueError:
            continue
        if value >= 0:
            counters[name] = value
    return counters


class CPUCollector:
    """Collects CPU model strings and time counters"""

    def __init__(
        self,
        attributes: AttributeStore,
        cpuinfo_file: Union[str, Path] = DEFAULT_CPUINFO_FILE,
        stat_file: Union[str, Path] = DEFAULT_STAT_FILE,
    ):
        self.attributes = attributes
        self.cpuinfo_file = cpuinfo_file
        self.stat_file = stat_file

    def collect(self):
        try:
            for key, value in parse_cpuinfo(read_text(self.cpuinfo_file, joiner="\n")).items():
                self.attributes.set(key, value)
        except Exception as e:
            logger.error(f"CPU identity collection failed: {e}", exc_info=True)

        try:
            counters = parse_cpu_counters(read_text(self.stat_file, joiner="\n"))
            for key, value in counters.items():
                self.attributes.set(key, value)
            if len(counters) < len(CPU_COUNTER_FIELDS):
                logger.warning(
                    f"Read {len(counters)}/{len(CPU_COUNTER_FIELDS)} CPU counters from {self.stat_file}"
                )
        except Exception as e:
            logger.error(f"CPU counter collection failed: {e}", exc_info=True)
