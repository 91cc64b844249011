# dashboard/cli.py

"""
Terminal rendering of one inspection record.

Prints the attribute record as a Rich table, grouped by collector, with
value types shown so degraded (sentinel) values stand out.
"""

import logging
from datetime import datetime
from typing import Dict, Optional

try:
    from rich.console import Console, Group
    from rich.panel import Panel
    from rich.table import Table
    from rich.text import Text
except ImportError as e:
    raise ImportError("Rich not installed. Install via: pip install rich") from e

from collectors.sources import COMMAND_FAILED

logger = logging.getLogger(__name__)

# Display groups, in the order collectors run
ATTRIBUTE_GROUPS = {
    "Schema": ["version", "lang"],
    "CPU": [
        "cpuType", "cpuModel", "cpuUsr", "cpuNice", "cpuKrn", "cpuIdle",
        "cpuIowait", "cpuIrq", "cpuSoftIrq", "vmcpusteal",
    ],
    "Container": ["uuid", "newcontainer", "vmuptime"],
    "Kernel": ["linuxVersion"],
    "Platform": ["platform", "functionName", "functionMemory", "functionRegion", "logStreamName"],
    "Memory": ["totalMemory", "freeMemory"],
    "Timing": ["frameworkRuntime", "runtime"],
}

# Attributes every full pass is expected to produce
CORE_ATTRIBUTES = [
    key
    for group in ("Schema", "CPU", "Container", "Kernel", "Timing")
    for key in ATTRIBUTE_GROUPS[group]
] + ["platform"]


class AttributeDisplay:
    """Formatting rules for attribute values"""

    @staticmethod
    def get_color(key: str, value) -> str:
        if isinstance(value, str) and (value == COMMAND_FAILED or value.startswith("IO Exception")):
            return "bright_red"
        if key == "newcontainer":
            return "bright_yellow" if value == 1 else "green"
        if isinstance(value, (int, float)):
            return "bright_cyan"
        return "white"

    @staticmethod
    def format_value(key: str, value) -> str:
        if key in ("frameworkRuntime", "runtime"):
            return f"{value} ms"
        if key == "vmuptime" and isinstance(value, int):
            booted = datetime.fromtimestamp(value).strftime("%Y-%m-%d %H:%M:%S")
            return f"{value} ({booted})"
        if key in ("totalMemory", "freeMemory"):
            return f"{value} kB"
        if key == "newcontainer":
            return "cold start" if value == 1 else "warm"
        return str(value)


class RecordDashboard:
    """Renders a finished attribute record"""

    def __init__(self, record: Dict, console: Optional[Console] = None):
        self.record = record
        self.console = console or Console()

    # ---------- HEADER ----------

    def _create_header(self) -> Panel:
        header_text = Text()
        header_text.append("FaaS Inspector", style="bold bright_cyan")
        header_text.append(f" | {self.record.get('platform', 'platform n/a')}", style="dim white")
        header_text.append(f" | {len(self.record)} attributes", style="dim yellow")
        return Panel(header_text, style="bright_cyan", padding=(0, 1))

    # ---------- ATTRIBUTE TABLE ----------

    def _create_attribute_table(self) -> Table:
        table = Table(
            title="Runtime Attributes",
            show_header=True,
            header_style="bold cyan",
            expand=True,
        )
        table.add_column("Group", style="dim white", no_wrap=True)
        table.add_column("Attribute", style="cyan", no_wrap=True)
        table.add_column("Value", overflow="fold")
        table.add_column("Type", style="dim white", no_wrap=True)

        shown = set()
        for group, keys in ATTRIBUTE_GROUPS.items():
            for key in keys:
                if key not in self.record:
                    continue
                self._add_row(table, group, key)
                shown.add(key)

        for key in sorted(k for k in self.record if k not in shown):
            self._add_row(table, "Custom", key)

        return table

    def _add_row(self, table: Table, group: str, key: str):
        value = self.record[key]
        color = AttributeDisplay.get_color(key, value)
        table.add_row(
            group,
            key,
            Text(AttributeDisplay.format_value(key, value), style=color),
            type(value).__name__,
        )

    # ---------- FOOTER ----------

    def _create_footer(self) -> Text:
        missing = [key for key in CORE_ATTRIBUTES if key not in self.record]
        footer = Text()
        if missing:
            footer.append("Unavailable: ", style="bold yellow")
            footer.append(", ".join(missing), style="yellow")
        else:
            footer.append("All core attributes collected", style="green")
        return footer

    def render(self) -> Group:
        return Group(self._create_header(), self._create_attribute_table(), self._create_footer())

    def show(self):
        logger.debug("Rendering inspection record")
        self.console.print(self.render())
