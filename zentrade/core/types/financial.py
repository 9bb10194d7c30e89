"""
Financial helpers for journal calculations.

Trade P/L is held as float. Aggregates are summed without rounding;
rounding helpers exist for presentation only (reports, API tiles).
"""

from zentrade.core.enums import TradeSide

# Presentation precision (number of decimal places)
PERCENTAGE_DECIMALS = 1  # 1 decimal place for displayed win rates
PRICE_DECIMALS = 2  # 2 decimal places for quote-currency amounts

ZERO = 0.0
HUNDRED = 100.0


def round_price(price: float) -> float:
    """Round a quote-currency amount for display."""
    return round(price, PRICE_DECIMALS)


def round_percentage(ratio: float) -> float:
    """Convert a 0-1 ratio to a display percentage.

    Examples:
        >>> round_percentage(0.6666)
        66.7
    """
    return round(ratio * HUNDRED, PERCENTAGE_DECIMALS)


def calculate_pnl(
    entry_price: float,
    exit_price: float,
    quantity: float,
    side: TradeSide | str,
    fees: float = ZERO,
) -> float:
    """Calculate realized P/L for a closed trade.

    P/L = (exit_price - entry_price) * quantity * (1 for LONG, -1 for SHORT) - fees

    Args:
        entry_price: Price the position was opened at
        exit_price: Price the position was closed at
        quantity: Position size (absolute value)
        side: LONG or SHORT
        fees: Total fees paid on the round trip

    Returns:
        P/L as float, unrounded

    Raises:
        ValueError: If side is not a valid trade side
    """
    trade_side = side if isinstance(side, TradeSide) else TradeSide.from_string(side)
    return (exit_price - entry_price) * abs(quantity) * trade_side.multiplier - fees
