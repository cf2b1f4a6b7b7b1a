from .models import NameSymbolPair, StorageChange, decode_text, parse_hex_bytes
from .predicates import MAX_NAME_LENGTH, MAX_SYMBOL_LENGTH, is_symbol, is_typical_string
from .scanner import NameSymbolScanner, find_name_symbol_pair
from .sources import JsonLinesChangeSource, StaticChangeSource, StorageChangeFormatError, StorageChangeSource

__all__ = [
    "JsonLinesChangeSource",
    "MAX_NAME_LENGTH",
    "MAX_SYMBOL_LENGTH",
    "NameSymbolPair",
    "NameSymbolScanner",
    "StaticChangeSource",
    "StorageChange",
    "StorageChangeFormatError",
    "StorageChangeSource",
    "decode_text",
    "find_name_symbol_pair",
    "is_symbol",
    "is_typical_string",
    "parse_hex_bytes",
]
