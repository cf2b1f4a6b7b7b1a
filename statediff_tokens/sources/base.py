from __future__ import annotations

from typing import Protocol

from ..models import StorageChange


class StorageChangeFormatError(ValueError):
    pass


class StorageChangeSource(Protocol):
    def fetch_changes(self) -> list[StorageChange]:
        ...
