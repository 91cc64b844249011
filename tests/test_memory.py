from collections import namedtuple

import collectors.memory as memory
from collectors.memory import MemoryCollector
from probe.attributes import AttributeStore

VMem = namedtuple("VMem", "total available free percent used")


def test_memory_in_kilobytes(monkeypatch):
    monkeypatch.setattr(
        memory.psutil, "virtual_memory",
        lambda: VMem(total=2048 * 1024, available=1024 * 1024, free=512 * 1024, percent=50.0, used=0),
    )
    store = AttributeStore()
    MemoryCollector(store).collect()
    assert store.get("totalMemory") == 2048
    assert store.get("freeMemory") == 512


def test_memory_failure_omits_keys(monkeypatch):
    def unavailable():
        raise PermissionError("no /proc/meminfo")

    monkeypatch.setattr(memory.psutil, "virtual_memory", unavailable)
    store = AttributeStore()
    MemoryCollector(store).collect()
    assert "totalMemory" not in store
    assert "freeMemory" not in store

