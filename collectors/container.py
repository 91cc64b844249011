"""
Container identity stamping and VM boot time.

The first invocation in a fresh container writes a random UUID to a marker
file; later invocations in the same (warm) container read it back.
"""

import logging
import uuid
from pathlib import Path
from typing import Optional, Tuple, Union

from collectors.sources import DEFAULT_STAT_FILE, read_text
from probe.attributes import AttributeStore

logger = logging.getLogger(__name__)

DEFAULT_MARKER_FILE = "/tmp/container-id"


def stamp_container(marker_file: Union[str, Path]) -> Tuple[str, int]:
    """Return (uuid, newcontainer) and create the marker file if needed.

    The existence check and the exclusive create are not atomic together.
    Two concurrent first invocations may both generate an id; the loser's
    create fails and it reports its own id for this call only.
    """
    marker = Path(marker_file)

    try:
        exists = marker.exists()
    except OSError as e:
        logger.warning(f"Could not check container marker {marker}: {e}")
        exists = False

    if exists:
        lines = read_text(marker, joiner="\n").splitlines()
        container_id = lines[0].strip() if lines else ""
        return container_id, 0

    container_id = str(uuid.uuid4())
    try:
        with marker.open("x", encoding="ascii") as f:
            f.write(container_id)
    except OSError as e:
        # Not persisted: the next invocation will stamp a different id.
        logger.warning(f"Could not persist container id to {marker}: {e}")

    return container_id, 1


def parse_boot_time(stat_text: str) -> Optional[int]:
    """Boot time in epoch seconds from the `btime <seconds>` line of /proc/stat."""
    for line in stat_text.splitlines():
        fields = line.split()
        if fields and fields[0] == "btime":
            if len(fields) < 2:
                return None
            try:
                return int(fields[1])
            except ValueError:
                return None
    return None


class ContainerCollector:
    """Stamps uuid/newcontainer and records vmuptime"""

    def __init__(
        self,
        attributes: AttributeStore,
        marker_file: Union[str, Path] = DEFAULT_MARKER_FILE,
        stat_file: Union[str, Path] = DEFAULT_STAT_FILE,
    ):
        self.attributes = attributes
        self.marker_file = marker_file
        self.stat_file = stat_file

    def collect(self):
        try:
            container_id, new_container = stamp_container(self.marker_file)
            self.attributes.set("uuid", container_id)
            self.attributes.set("newcontainer", new_container)
            logger.debug(f"Container {container_id} (new={new_container})")
        except Exception as e:
            logger.error(f"Container stamping failed: {e}", exc_info=True)

        try:
            boot_time = parse_boot_time(read_text(self.stat_file, joiner="\n"))
            if boot_time is not None:
                self.attributes.set("vmuptime", boot_time)
        except Exception as e:
            logger.error(f"Boot time collection failed: {e}", exc_info=True)
