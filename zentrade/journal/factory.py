"""
Trade factory.

Turns a submitted trade draft (new or edited) into a validated Trade,
computing the realized P/L at edit time.
"""

import secrets
from collections.abc import Mapping
from datetime import date
from typing import Any

from zentrade.core.constants import DEFAULT_STRATEGY, TRADE_ID_ALPHABET, TRADE_ID_LENGTH
from zentrade.core.enums import TradeSide, TradeStatus
from zentrade.core.models.trade import Trade, record_to_fields
from zentrade.core.types.financial import calculate_pnl
from zentrade.core.utils.validation import validate_choice, validate_number


def generate_trade_id(length: int = TRADE_ID_LENGTH) -> str:
    """Generate a random lowercase base-36 trade id."""
    return "".join(secrets.choice(TRADE_ID_ALPHABET) for _ in range(length))


def default_draft() -> dict[str, Any]:
    """Field values a blank trade form starts from."""
    return {
        "symbol": "",
        "side": TradeSide.LONG,
        "status": TradeStatus.CLOSED,
        "entry_date": date.today().isoformat(),
        "entry_price": 0.0,
        "exit_price": None,
        "quantity": 0.0,
        "fees": 0.0,
        "strategy": DEFAULT_STRATEGY,
        "notes": "",
    }


def _realized_pnl(fields: Mapping[str, Any]) -> float | None:
    """P/L for a draft, or None when it cannot be realized yet."""
    status = validate_choice(fields.get("status"), TradeStatus, "status")
    entry_price = fields.get("entry_price")
    exit_price = fields.get("exit_price")
    quantity = fields.get("quantity")

    if not (status.is_closed and entry_price and exit_price and quantity):
        return None

    return calculate_pnl(
        entry_price=validate_number(entry_price, "entry_price"),
        exit_price=validate_number(exit_price, "exit_price"),
        quantity=validate_number(quantity, "quantity"),
        side=validate_choice(fields.get("side"), TradeSide, "side"),
        fees=validate_number(fields.get("fees") or 0.0, "fees"),
    )


def build_trade(draft: Mapping[str, Any], existing: Trade | None = None) -> Trade:
    """Build a trade from a submitted draft.

    When editing, the draft is applied over the existing trade and the id is
    kept. P/L is recomputed from the merged fields; any P/L in the draft is
    ignored.

    Args:
        draft: Field values, camelCase or snake_case keys
        existing: Trade being edited, if any

    Returns:
        The new trade

    Raises:
        InvalidTradeRecord: If the merged fields do not form a valid trade
    """
    fields = default_draft()
    if existing is not None:
        fields.update(record_to_fields(existing.to_dict()))
    fields.update(record_to_fields(dict(draft)))

    # A zero exit price means none was entered
    if not fields.get("exit_price"):
        fields["exit_price"] = None

    fields["id"] = existing.id if existing is not None else generate_trade_id()
    fields["pnl"] = _realized_pnl(fields)
    fields["fees"] = fields.get("fees") or 0.0
    return Trade(**fields)
