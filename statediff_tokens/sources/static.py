from __future__ import annotations

from typing import Iterable

from ..models import StorageChange


class StaticChangeSource:
    """In-memory source; empty unless changes are handed in."""

    def __init__(self, changes: Iterable[StorageChange] | None = None) -> None:
        self._changes = list(changes or [])

    def fetch_changes(self) -> list[StorageChange]:
        return list(self._changes)
