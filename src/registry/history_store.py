"""
Settings/History Store - SQLite key-value persistence.

Holds the two pieces of process-wide state:
- the saved API credential (key "geminiApiKey")
- the generation history, JSON-encoded newest-first (key
  "geminiStoryGeneratorHistory")

Both are loaded once at construction and only change through the explicit
mutators below. History entries are never edited in place.
"""

import json
import logging
import sqlite3
import threading
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from src.content.models import HistoryItem
from src.infra.data_paths import get_store_path

logger = logging.getLogger("scripture_studio")

API_KEY_KEY = "geminiApiKey"
HISTORY_KEY = "geminiStoryGeneratorHistory"


class HistoryStore:
    """
    Key-value store for the API credential and generation history.

    Reads are served from memory; every mutation is written through to
    SQLite immediately.
    """

    def __init__(self, db_path: Optional[str] = None):
        """
        Initialize the store and load persisted state.

        Args:
            db_path: Path to SQLite database file. If None, uses STORE_DB_PATH
                or data/studio.db.
        """
        self.db_path = str(db_path or get_store_path())
        self._conn: Optional[sqlite3.Connection] = None
        self._lock = threading.Lock()

        logger.info(f"[HistoryStore] Opening store: {self.db_path}")

        self._ensure_directory()
        self._init_db()

        self._api_key: Optional[str] = self._get_value(API_KEY_KEY)
        self._history: List[HistoryItem] = self._load_history()

        logger.info(
            f"[HistoryStore] Loaded {len(self._history)} history items, "
            f"api key {'present' if self._api_key else 'absent'}"
        )

    def _ensure_directory(self) -> None:
        """Create parent directory if it doesn't exist."""
        db_dir = Path(self.db_path).parent
        if not db_dir.exists():
            db_dir.mkdir(parents=True, exist_ok=True)
            logger.info(f"[HistoryStore] Created directory: {db_dir}")

    def _get_connection(self) -> sqlite3.Connection:
        """Get or create database connection."""
        if self._conn is None:
            self._conn = sqlite3.connect(self.db_path, check_same_thread=False)
            self._conn.row_factory = sqlite3.Row
        return self._conn

    def _init_db(self) -> None:
        conn = self._get_connection()
        conn.execute("""
            CREATE TABLE IF NOT EXISTS kv (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL
            )
        """)
        conn.commit()

    def _get_value(self, key: str) -> Optional[str]:
        cursor = self._get_connection().execute("SELECT value FROM kv WHERE key = ?", (key,))
        row = cursor.fetchone()
        return row["value"] if row else None

    def _set_value(self, key: str, value: str) -> None:
        conn = self._get_connection()
        conn.execute(
            "INSERT INTO kv (key, value) VALUES (?, ?) "
            "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
            (key, value)
        )
        conn.commit()

    def _delete_value(self, key: str) -> None:
        conn = self._get_connection()
        conn.execute("DELETE FROM kv WHERE key = ?", (key,))
        conn.commit()

    def _load_history(self) -> List[HistoryItem]:
        """Decode persisted history. Invalid JSON loads as empty; bad entries are skipped."""
        raw = self._get_value(HISTORY_KEY)
        if not raw:
            return []

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"[HistoryStore] Failed to load history, starting empty: {e}")
            return []
        if not isinstance(data, list):
            logger.warning("[HistoryStore] Stored history is not a list, starting empty")
            return []

        items = []
        for index, entry in enumerate(data):
            try:
                items.append(HistoryItem.from_dict(entry))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(f"[HistoryStore] Skipping unreadable history entry {index}: {e!r}")
        return items

    def _persist_history(self) -> None:
        payload = json.dumps([item.to_dict() for item in self._history], ensure_ascii=False)
        self._set_value(HISTORY_KEY, payload)

    # -------------------------------------------------------------------------
    # Credential
    # -------------------------------------------------------------------------

    @property
    def api_key(self) -> Optional[str]:
        return self._api_key

    def save_api_key(self, api_key: str) -> None:
        """Persist the API credential. Empty values are rejected."""
        if not api_key:
            raise ValueError("API key must not be empty")
        with self._lock:
            self._set_value(API_KEY_KEY, api_key)
            self._api_key = api_key
        logger.info("[HistoryStore] API key saved")

    def remove_api_key(self) -> None:
        with self._lock:
            self._delete_value(API_KEY_KEY)
            self._api_key = None
        logger.info("[HistoryStore] API key removed")

    # -------------------------------------------------------------------------
    # History
    # -------------------------------------------------------------------------

    def list_items(self) -> List[HistoryItem]:
        """History items, newest first. Returns a copy of the list."""
        return list(self._history)

    def get_item(self, item_id: str) -> Optional[HistoryItem]:
        for item in self._history:
            if item.id == item_id:
                return item
        return None

    def _unique_id(self, item_id: str) -> str:
        taken = {item.id for item in self._history}
        if item_id not in taken:
            return item_id
        suffix = 1
        while f"{item_id}-{suffix}" in taken:
            suffix += 1
        return f"{item_id}-{suffix}"

    def add_item(self, item: HistoryItem) -> HistoryItem:
        """
        Prepend a completed run to history.

        Runs finishing in the same millisecond share a timestamp, so a
        numeric suffix is appended when the id is already taken.

        Returns:
            HistoryItem: The item as stored, with its final id
        """
        with self._lock:
            item_id = self._unique_id(item.id)
            if item_id != item.id:
                item = replace(item, id=item_id)
            self._history = [item] + self._history
            self._persist_history()
        logger.info(f"[HistoryStore] Added {item.id} ({len(self._history)} total)")
        return item

    def delete_item(self, item_id: str) -> bool:
        """
        Remove one item by id, keeping the order of the rest.

        Returns:
            bool: True if an item was removed
        """
        with self._lock:
            remaining = [item for item in self._history if item.id != item_id]
            if len(remaining) == len(self._history):
                return False
            self._history = remaining
            self._persist_history()
        logger.info(f"[HistoryStore] Deleted {item_id}")
        return True

    def clear(self) -> None:
        with self._lock:
            self._history = []
            self._persist_history()
        logger.info("[HistoryStore] History cleared")

    def close(self) -> None:
        """Close database connection."""
        if self._conn:
            self._conn.close()
            self._conn = None


# =============================================================================
# Module-level singleton
# =============================================================================

_store: Optional[HistoryStore] = None


def init_store(db_path: Optional[str] = None) -> HistoryStore:
    """
    Initialize the global store.

    Call this at process start to load the persisted state.
    """
    global _store
    if _store is not None:
        _store.close()
    _store = HistoryStore(db_path=db_path)
    return _store


def get_store() -> Optional[HistoryStore]:
    """Get the global store instance."""
    return _store


def close_store() -> None:
    """Close the global store."""
    global _store
    if _store:
        _store.close()
        _store = None
