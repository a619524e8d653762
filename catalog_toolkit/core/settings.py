"""Key/value settings container for reader front-ends."""

from typing import Any, Dict, Mapping, Optional

__all__ = ["Settings"]


class Settings:
    """Plain in-memory settings store.

    The initial mapping is shallow-copied. Nothing is persisted here.
    """

    def __init__(self, settings: Optional[Mapping[str, Any]] = None) -> None:
        self._settings: Dict[str, Any] = dict(settings) if settings else {}

    def get(self, name: str, default: Any = None) -> Any:
        """Return the value stored under *name*, even if falsy, else *default*."""
        if name in self._settings:
            return self._settings[name]
        return default

    def set(self, name: str, value: Any) -> Any:
        self._settings[name] = value
        return value
