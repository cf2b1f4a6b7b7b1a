from __future__ import annotations

import logging
from typing import Callable, Iterable

from .models import NameSymbolPair, StorageChange, decode_text
from .predicates import is_symbol, is_typical_string

logger = logging.getLogger(__name__)

TextPredicate = Callable[[str], bool]


class NameSymbolScanner:
    """Finds a (name, symbol) pair in consecutive storage writes.

    Each record is compared against its immediate predecessor, left to right.
    The first adjacent pair that fails any check ends the scan with no
    result, so a valid pair later in the sequence is never reached.
    """

    def __init__(
        self,
        name_predicate: TextPredicate | None = None,
        symbol_predicate: TextPredicate | None = None,
    ) -> None:
        self.name_predicate = name_predicate or is_typical_string
        self.symbol_predicate = symbol_predicate or is_symbol

    def scan(self, changes: Iterable[StorageChange]) -> NameSymbolPair | None:
        previous: StorageChange | None = None
        for index, current in enumerate(changes):
            if previous is None:
                previous = current
                continue

            name = decode_text(previous.new_value)
            if name is None:
                logger.debug("change %d is not valid utf-8; aborting scan", index - 1)
                return None
            if not self.name_predicate(name):
                logger.debug("change %d text %r is not a typical string; aborting scan", index - 1, name)
                return None

            symbol = decode_text(current.new_value)
            if symbol is None:
                logger.debug("change %d is not valid utf-8; aborting scan", index)
                return None
            if not self.symbol_predicate(symbol):
                logger.debug("change %d text %r is not a symbol; aborting scan", index, symbol)
                return None

            logger.debug("found name %r and symbol %r at changes %d-%d", name, symbol, index - 1, index)
            return NameSymbolPair(name=name, symbol=symbol)

        logger.debug("fewer than two storage changes; nothing to pair")
        return None


def find_name_symbol_pair(changes: Iterable[StorageChange]) -> NameSymbolPair | None:
    return NameSymbolScanner().scan(changes)
