"""
JSON trade store.

Keeps the whole journal as one JSON array of trade records, the same
shape the browser client stores.
"""

import json
import os
import tempfile
from pathlib import Path

from loguru import logger

from zentrade.core.exceptions.journal import DataError, InvalidTradeRecord
from zentrade.core.interfaces.storage import ITradeRepository
from zentrade.core.models.trade import Trade


class JsonTradeStore(ITradeRepository):
    """File-backed trade repository."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self) -> list[Trade]:
        """Load trades from disk. A missing file is an empty journal.

        Raises:
            DataError: If the file cannot be read or holds invalid records
        """
        if not self.path.exists():
            logger.debug(f"No journal file at {self.path}, starting empty")
            return []

        try:
            raw = json.loads(self.path.read_text(encoding="utf-8") or "[]")
        except OSError as e:
            logger.error(f"File system error loading {self.path.name}: {e}")
            raise DataError(f"File system error loading {self.path.name}") from e
        except json.JSONDecodeError as e:
            logger.error(f"Malformed journal file {self.path.name}: {e}")
            raise DataError(f"Malformed journal file: {self.path.name}") from e

        if not isinstance(raw, list):
            raise DataError(f"Journal file must hold a list of trades: {self.path.name}")

        trades = []
        for index, record in enumerate(raw):
            if not isinstance(record, dict):
                raise DataError(f"Journal record {index} is not an object")
            try:
                trades.append(Trade.from_dict(record))
            except InvalidTradeRecord as e:
                raise DataError(f"Journal record {index} is invalid: {e}") from e

        logger.debug(f"Loaded {len(trades)} trades from {self.path}")
        return trades

    def save(self, trades: list[Trade]) -> None:
        """Write all trades, replacing the file atomically.

        Raises:
            DataError: If the file cannot be written
        """
        payload = json.dumps([trade.to_dict() for trade in trades], indent=2)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            logger.error(f"File system error saving {self.path.name}: {e}")
            raise DataError(f"File system error saving {self.path.name}") from e

        logger.info(f"Saved {len(trades)} trades to {self.path}")


class InMemoryTradeStore(ITradeRepository):
    """Trade repository that keeps records in memory."""

    def __init__(self, trades: list[Trade] | None = None):
        self._trades = list(trades or [])
        self.save_count = 0

    def load(self) -> list[Trade]:
        return list(self._trades)

    def save(self, trades: list[Trade]) -> None:
        self._trades = list(trades)
        self.save_count += 1
