from __future__ import annotations

import binascii
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class StorageChange:
    new_value: bytes
    slot: str = ""
    old_value: bytes = b""
    address: str = ""
    block_number: int | None = None
    tx_hash: str | None = None


@dataclass(frozen=True)
class NameSymbolPair:
    name: str
    symbol: str

    def __iter__(self) -> Iterator[str]:
        yield self.name
        yield self.symbol


def decode_text(raw: bytes) -> str | None:
    try:
        return bytes(raw).decode("utf-8")
    except UnicodeDecodeError:
        return None


def parse_hex_bytes(value: str) -> bytes:
    text = value.strip()
    if text[:2].lower() == "0x":
        text = text[2:]
    if len(text) % 2:
        raise ValueError(f"hex payload has odd length: {value!r}")
    try:
        return binascii.unhexlify(text)
    except ValueError as exc:
        raise ValueError(f"hex payload is not valid hex: {value!r}") from exc
