"""
Core type definitions and utilities.
"""

# Re-export financial utilities for easy access
from .financial import (
    PERCENTAGE_DECIMALS,
    PRICE_DECIMALS,
    ZERO,
    calculate_pnl,
    round_percentage,
    round_price,
)

__all__ = [
    # Utility functions
    "round_price",
    "round_percentage",
    "calculate_pnl",
    # Constants
    "PERCENTAGE_DECIMALS",
    "PRICE_DECIMALS",
    "ZERO",
]
