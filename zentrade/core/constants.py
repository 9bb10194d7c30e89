"""
Core constants and limits.

Defines journal-wide constants and resource limits.
"""

# Equity curve
INITIAL_POINT_LABEL = "Initial"  # Date label of the synthetic baseline point

# Trade defaults
DEFAULT_STRATEGY = "Breakout"
TRADE_ID_LENGTH = 9
TRADE_ID_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
ISO_DATE_FORMAT = "%Y-%m-%d"

# Journal Limits
MAX_TRADES_IN_JOURNAL = 10000  # Maximum trades held in a single journal
MAX_SYMBOL_LENGTH = 32
MAX_SEARCH_TERM_LENGTH = 100

# Storage
DEFAULT_JOURNAL_PATH = "data/zentrade_trades.json"

# Coaching
DEFAULT_COACHING_MODEL = "gemini-3-pro-preview"
COACHING_TEMPERATURE = 0.7
COACHING_SYSTEM_INSTRUCTION = (
    "You are a world-class trading performance coach and analyst. "
    "Your tone is objective, professional, and supportive."
)
NO_ANALYSIS_MESSAGE = "No analysis generated."
ANALYSIS_FAILED_MESSAGE = "An error occurred during analysis. Please try again later."
