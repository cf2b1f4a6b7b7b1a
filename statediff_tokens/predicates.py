from __future__ import annotations

MAX_NAME_LENGTH = 64
MAX_SYMBOL_LENGTH = 11
SYMBOL_PUNCTUATION = frozenset("$.-_+")


def is_typical_string(text: str) -> bool:
    """Loose check that decoded storage text reads like a token name."""
    if not text or len(text) > MAX_NAME_LENGTH:
        return False
    if text != text.strip():
        return False
    if not text.isprintable():
        return False
    return any(ch.isalnum() for ch in text)


def is_symbol(text: str) -> bool:
    """Loose check that decoded storage text reads like a ticker symbol."""
    if not text or len(text) > MAX_SYMBOL_LENGTH:
        return False
    for ch in text:
        if not (ch.isalnum() or ch in SYMBOL_PUNCTUATION):
            return False
    return any(ch.isalpha() for ch in text)
