"""
CSV trade import.

Reads a spreadsheet export of trades with pandas and builds validated
Trade records. Column names may use the record keys in camelCase or
snake_case.
"""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pandas as pd
from loguru import logger

from zentrade.core.exceptions.journal import DataError, InvalidTradeRecord
from zentrade.core.models.trade import Trade, record_to_fields
from zentrade.journal.factory import generate_trade_id

REQUIRED_COLUMNS = ["symbol", "side", "status", "entry_date", "entry_price", "quantity"]


class CSVTradeImporter:
    """Handles loading and validation of trade CSV exports."""

    def __init__(self, id_factory: Callable[[], str] = generate_trade_id):
        """Initialize the importer.

        Args:
            id_factory: Callable producing ids for rows without one
        """
        self.id_factory = id_factory

    def load(self, file_path: str | Path) -> list[Trade]:
        """Load trades from a CSV file, in file order.

        Raises:
            FileNotFoundError: If the file does not exist
            DataError: If the file cannot be parsed or a row is invalid
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise FileNotFoundError(f"Trade file not found: {file_path}")

        try:
            logger.debug(f"Loading trade file: {file_path}")
            df = pd.read_csv(file_path, dtype=str, keep_default_na=False)
        except pd.errors.EmptyDataError:
            logger.warning(f"Trade file is empty: {file_path.name}")
            return []
        except (pd.errors.ParserError, UnicodeDecodeError) as e:
            logger.error(f"CSV parsing error ({type(e).__name__}) in {file_path.name}: {e}")
            raise DataError(f"Failed to parse trade file: {file_path.name}") from e
        except OSError as e:
            logger.error(f"File system error loading {file_path.name}: {e}")
            raise DataError(f"File system error loading {file_path.name}") from e

        return self.from_dataframe(df, source=file_path.name)

    def from_dataframe(self, df: pd.DataFrame, source: str = "dataframe") -> list[Trade]:
        """Build trades from a DataFrame of trade rows.

        Raises:
            DataError: If required columns are missing or a row is invalid
        """
        df = df.rename(columns=_normalize_column)
        self.validate_columns(df, source)

        trades = []
        for position, row in enumerate(df.to_dict(orient="records")):
            fields = self._clean_row(row)
            fields.setdefault("id", self.id_factory())
            try:
                trades.append(Trade(**fields))
            except (InvalidTradeRecord, TypeError) as e:
                raise DataError(f"Invalid trade in {source} at row {position + 1}: {e}") from e

        logger.info(f"Imported {len(trades)} trades from {source}")
        return trades

    @staticmethod
    def validate_columns(df: pd.DataFrame, source: str) -> None:
        """Validate that all required columns are present."""
        missing = [column for column in REQUIRED_COLUMNS if column not in df.columns]
        if missing:
            raise DataError(f"Missing required columns in {source}: {missing}")

    @staticmethod
    def _clean_row(row: dict[str, Any]) -> dict[str, Any]:
        """Drop blank cells and unknown columns; blank means missing."""
        fields = {}
        for column, value in record_to_fields(row).items():
            if value is None or pd.isna(value):
                continue
            if isinstance(value, str):
                value = value.strip()
                if not value:
                    continue
            fields[column] = value
        return fields


def _normalize_column(column: str) -> str:
    """Map a camelCase record key to its snake_case field name."""
    known = record_to_fields({column.strip(): None})
    return next(iter(known), column)
