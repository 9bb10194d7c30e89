"""
Trade domain model.

A trade is one journal entry. Records are immutable: edits produce a new
Trade with the same id.
"""

from dataclasses import asdict, dataclass, replace
from typing import Any

from zentrade.core.constants import MAX_SYMBOL_LENGTH
from zentrade.core.enums import TradeSide, TradeStatus
from zentrade.core.exceptions.journal import InvalidTradeRecord
from zentrade.core.utils.validation import (
    validate_choice,
    validate_iso_date,
    validate_non_negative,
    validate_number,
    validate_positive,
    validate_text,
)

# Field name -> key used in serialized records
_RECORD_KEYS = {
    "id": "id",
    "symbol": "symbol",
    "side": "side",
    "status": "status",
    "entry_date": "entryDate",
    "exit_date": "exitDate",
    "entry_price": "entryPrice",
    "exit_price": "exitPrice",
    "quantity": "quantity",
    "fees": "fees",
    "strategy": "strategy",
    "notes": "notes",
    "pnl": "pnl",
}
_FIELD_NAMES = {key: field for field, key in _RECORD_KEYS.items()}
_REQUIRED_FIELDS = ("id", "symbol", "side", "status", "entry_date", "entry_price", "quantity")


@dataclass(frozen=True)
class Trade:
    """Represents a single journal trade.

    Attributes:
        id: Opaque unique identifier, assigned at creation
        symbol: Instrument identifier, stored upper-cased
        side: LONG or SHORT
        status: OPEN or CLOSED
        entry_date: ISO date the position was opened
        entry_price: Positive quote price at entry
        quantity: Non-negative position size
        fees: Non-negative total fees
        exit_date: ISO date the position was closed, if any
        exit_price: Positive quote price at exit, if any
        strategy: Free-text label used for grouping
        notes: Free text, not used by calculations
        pnl: Realized P/L; None means not yet realized
    """

    id: str
    symbol: str
    side: TradeSide
    status: TradeStatus
    entry_date: str
    entry_price: float
    quantity: float
    fees: float = 0.0
    exit_date: str | None = None
    exit_price: float | None = None
    strategy: str = ""
    notes: str = ""
    pnl: float | None = None

    def __post_init__(self) -> None:
        """Validate and normalize trade data after initialization."""
        if not isinstance(self.id, str) or not self.id.strip():
            raise InvalidTradeRecord("id", self.id, "a non-empty string is required")

        symbol = validate_text(self.symbol, "symbol", MAX_SYMBOL_LENGTH).strip().upper()
        if not symbol:
            raise InvalidTradeRecord("symbol", self.symbol, "must not be empty")

        self._set("symbol", symbol)
        self._set("side", validate_choice(self.side, TradeSide, "side"))
        self._set("status", validate_choice(self.status, TradeStatus, "status"))
        self._set("entry_date", validate_iso_date(self.entry_date, "entry_date"))
        self._set("entry_price", validate_positive(self.entry_price, "entry_price"))
        self._set("quantity", validate_non_negative(self.quantity, "quantity"))
        self._set("fees", validate_non_negative(self.fees, "fees"))
        self._set("strategy", validate_text(self.strategy, "strategy"))
        self._set("notes", validate_text(self.notes, "notes"))

        if self.exit_date is not None:
            self._set("exit_date", validate_iso_date(self.exit_date, "exit_date"))
        if self.exit_price is not None:
            self._set("exit_price", validate_positive(self.exit_price, "exit_price"))
        if self.pnl is not None:
            self._set("pnl", validate_number(self.pnl, "pnl"))

    def _set(self, name: str, value: Any) -> None:
        object.__setattr__(self, name, value)

    def with_changes(self, **changes: Any) -> "Trade":
        """Return an edited copy of this trade. The id cannot change."""
        if "id" in changes and changes["id"] != self.id:
            raise InvalidTradeRecord("id", changes["id"], "trade id is immutable")
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Convert trade to a serializable record; absent optionals are omitted."""
        record: dict[str, Any] = {}
        for name, value in asdict(self).items():
            if value is None:
                continue
            record[_RECORD_KEYS[name]] = str(value) if name in ("side", "status") else value
        return record

    @classmethod
    def from_dict(cls, record: dict[str, Any]) -> "Trade":
        """Build a trade from a serialized record (camelCase or snake_case keys).

        Raises:
            InvalidTradeRecord: If a required field is missing or invalid
        """
        fields = record_to_fields(record)
        for required in _REQUIRED_FIELDS:
            if fields.get(required) is None:
                raise InvalidTradeRecord(required, None, "required field is missing")

        return cls(**fields)


def record_to_fields(record: dict[str, Any]) -> dict[str, Any]:
    """Map record keys (camelCase or snake_case) to Trade field names.

    Unknown keys are dropped.
    """
    fields: dict[str, Any] = {}
    for key, value in record.items():
        name = _FIELD_NAMES.get(key, key)
        if name in _RECORD_KEYS:
            fields[name] = value
    return fields
