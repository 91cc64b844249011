"""
Flat attribute record shared by every collector.
Keys are unique; values are scalars (str, int or float).
"""

from typing import Dict, Optional, Union

AttributeValue = Union[str, int, float]

SCHEMA_VERSION = 0.2
LANG = "python"


class AttributeStore:
    """Key -> scalar mapping owned by one Inspector for one invocation."""

    def __init__(self):
        self._attributes: Dict[str, AttributeValue] = {
            "version": SCHEMA_VERSION,
            "lang": LANG,
        }

    def set(self, key: str, value: AttributeValue):
        self._attributes[key] = value

    def get(self, key: str) -> Optional[AttributeValue]:
        return self._attributes.get(key)

    def __contains__(self, key: str) -> bool:
        return key in self._attributes

    def __len__(self) -> int:
        return len(self._attributes)

    def as_dict(self) -> Dict[str, AttributeValue]:
        """Copy of the record (JSON-serializable)"""
        return dict(self._attributes)
