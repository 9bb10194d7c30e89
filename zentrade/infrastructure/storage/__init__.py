"""
Trade storage backends.
"""

from .csv_importer import CSVTradeImporter
from .json_store import InMemoryTradeStore, JsonTradeStore

__all__ = ["JsonTradeStore", "InMemoryTradeStore", "CSVTradeImporter"]
