from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..models import StorageChange, parse_hex_bytes
from .base import StorageChangeFormatError

logger = logging.getLogger(__name__)


class JsonLinesChangeSource:
    """Reads storage changes from a file holding one JSON object per line.

    Each object needs a hex ``new_value``; ``slot``, ``old_value``,
    ``address``, ``block_number`` and ``tx_hash`` are optional. Blank lines
    are skipped.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def fetch_changes(self) -> list[StorageChange]:
        changes: list[StorageChange] = []
        with self.path.open("r", encoding="utf-8") as handle:
            for line_no, line in enumerate(handle, start=1):
                if not line.strip():
                    continue
                try:
                    payload = json.loads(line)
                except json.JSONDecodeError as exc:
                    raise StorageChangeFormatError(f"{self.path}:{line_no}: invalid JSON ({exc.msg})") from exc
                changes.append(self._to_change(payload, line_no))
        logger.info("loaded %d storage changes from %s", len(changes), self.path)
        return changes

    def _to_change(self, payload: Any, line_no: int) -> StorageChange:
        where = f"{self.path}:{line_no}"
        if not isinstance(payload, dict):
            raise StorageChangeFormatError(f"{where}: expected a JSON object")
        if "new_value" not in payload:
            raise StorageChangeFormatError(f"{where}: missing new_value")

        block_number = payload.get("block_number")
        if block_number is not None and (isinstance(block_number, bool) or not isinstance(block_number, int)):
            raise StorageChangeFormatError(f"{where}: block_number must be an integer")

        new_value = payload["new_value"]
        old_value = payload.get("old_value")
        if old_value is None:
            old_value = ""
        for field_name, value in (("new_value", new_value), ("old_value", old_value)):
            if not isinstance(value, str):
                raise StorageChangeFormatError(f"{where}: {field_name} must be a hex string")

        try:
            new_bytes = parse_hex_bytes(new_value)
            old_bytes = parse_hex_bytes(old_value)
        except ValueError as exc:
            raise StorageChangeFormatError(f"{where}: {exc}") from exc

        slot = payload.get("slot")
        address = payload.get("address")
        tx_hash = payload.get("tx_hash")
        return StorageChange(
            new_value=new_bytes,
            slot=str(slot) if slot is not None else "",
            old_value=old_bytes,
            address=str(address) if address is not None else "",
            block_number=block_number,
            tx_hash=str(tx_hash) if tx_hash is not None else None,
        )
