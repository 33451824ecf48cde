"""Per-field memory of the raw value supplied before formatting."""

import logging
from typing import Dict, Iterator

logger = logging.getLogger(__name__)


class OriginalValueStore:
    """
    Mapping from field name to the last raw value supplied for that field.

    Each formatter owns its own store, so independent formatters (for example
    one per locale) never see each other's values.
    """

    def __init__(self) -> None:
        self._values: Dict[str, str] = {}

    def record(self, key: str, value: str) -> None:
        """Remember ``value`` as the original input for ``key``."""
        self._values[key] = value
        logger.debug(f"Recorded original value for {key!r} ({len(value)} chars)")

    def get(self, key: str) -> str:
        """Original value for ``key``, or an empty string when unknown."""
        return self._values.get(key) or ""

    def keys(self) -> Iterator[str]:
        return iter(self._values.keys())

    def clear(self) -> None:
        self._values.clear()

    def to_dict(self) -> Dict[str, str]:
        return dict(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"OriginalValueStore(keys={sorted(self._values)!r})"
