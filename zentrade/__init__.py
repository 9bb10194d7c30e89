"""
ZenTrade trading journal.

Trade records, performance analytics and the services around them.
"""

__version__ = "1.0.0"
