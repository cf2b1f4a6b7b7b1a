from __future__ import annotations

import pytest

from statediff_tokens import MAX_NAME_LENGTH, MAX_SYMBOL_LENGTH, decode_text, is_symbol, is_typical_string, parse_hex_bytes


@pytest.mark.parametrize("text", ["Towel Token", "Wrapped Ether", "USD Coin (PoS)", "Ünïcödé Tökén", "1inch"])
def test_typical_strings(text: str) -> None:
    assert is_typical_string(text)


@pytest.mark.parametrize(
    "text",
    ["", "   ", " Towel", "Towel\n", "Tow\x00el", "\x00\x00\x00\x01", "---", "x" * (MAX_NAME_LENGTH + 1)],
)
def test_not_typical_strings(text: str) -> None:
    assert not is_typical_string(text)


@pytest.mark.parametrize("text", ["TOWEL", "$TOWEL", "WETH.e", "USDC-1", "ÜNI", "1INCH"])
def test_symbols(text: str) -> None:
    assert is_symbol(text)


@pytest.mark.parametrize("text", ["", "TOW EL", "1234", "$$$", "TOWEL\x00", "X" * (MAX_SYMBOL_LENGTH + 1)])
def test_not_symbols(text: str) -> None:
    assert not is_symbol(text)


def test_decode_text_is_strict_utf8() -> None:
    assert decode_text("代币".encode("utf-8")) == "代币"
    assert decode_text(b"") == ""
    assert decode_text(b"\xe4\xbb") is None


def test_parse_hex_bytes() -> None:
    assert parse_hex_bytes("0x544f57454c") == b"TOWEL"
    assert parse_hex_bytes(" 544F57454C ") == b"TOWEL"
    assert parse_hex_bytes("0x") == b""

    with pytest.raises(ValueError):
        parse_hex_bytes("0x123")
    with pytest.raises(ValueError, match="not valid hex"):
        parse_hex_bytes("0xzz")
    with pytest.raises(ValueError, match="not valid hex"):
        parse_hex_bytes("0xé1")
