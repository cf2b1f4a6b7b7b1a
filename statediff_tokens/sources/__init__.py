from .base import StorageChangeFormatError, StorageChangeSource
from .jsonl import JsonLinesChangeSource
from .static import StaticChangeSource

__all__ = ["JsonLinesChangeSource", "StaticChangeSource", "StorageChangeFormatError", "StorageChangeSource"]
