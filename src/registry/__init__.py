"""
Registry module - SQLite-based persistent storage for the credential and history.
"""

from .history_store import (
    HistoryStore,
    API_KEY_KEY,
    HISTORY_KEY,
    init_store,
    get_store,
    close_store,
)

__all__ = [
    "HistoryStore",
    "API_KEY_KEY",
    "HISTORY_KEY",
    "init_store",
    "get_store",
    "close_store",
]
