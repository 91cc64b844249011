"""Memory totals (kB) from psutil's virtual memory snapshot"""

import logging

try:
    import psutil
except ImportError:
    raise ImportError("psutil not installed")

from probe.attributes import AttributeStore

logger = logging.getLogger(__name__)


class MemoryCollector:
    """Records totalMemory and freeMemory"""

    def __init__(self, attributes: AttributeStore):
        self.attributes = attributes

    def collect(self):
        try:
            vmem = psutil.virtual_memory()
            self.attributes.set("totalMemory", vmem.total // 1024)
            self.attributes.set("freeMemory", vmem.free // 1024)
        except Exception as e:
            logger.error(f"Error collecting memory metrics: {e}")
