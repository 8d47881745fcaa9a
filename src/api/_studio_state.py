"""
Studio state management for API integration.

Provides singleton access to the history store and builds generators bound
to it. Initialized during FastAPI lifespan.

Usage:
    from . import _studio_state

    # In lifespan:
    _studio_state.init_studio_state(db_path)

    # In routers:
    generator = _studio_state.get_generator(model_spec)
"""

import logging
from pathlib import Path
from typing import Optional, Union

from src.content.generator import ContentGenerator
from src.registry.history_store import HistoryStore, close_store, get_store, init_store

logger = logging.getLogger("scripture_studio")


def init_studio_state(db_path: Optional[Union[str, Path]] = None) -> HistoryStore:
    """
    Open the history store singleton.

    Called during FastAPI lifespan startup. Loads the saved credential and
    history once.

    Args:
        db_path: Path to SQLite database (default: STORE_DB_PATH or data/studio.db)

    Returns:
        Initialized HistoryStore
    """
    store = init_store(str(db_path) if db_path else None)
    logger.info("[StudioState] Store initialized")
    return store


def get_history_store() -> HistoryStore:
    """
    Get the history store singleton.

    Raises:
        RuntimeError: If the store was not initialized
    """
    store = get_store()
    if store is None:
        raise RuntimeError(
            "History store not initialized. "
            "Ensure init_studio_state() is called during startup."
        )
    return store


def get_generator(model_spec: Optional[str] = None) -> ContentGenerator:
    """Build a generator bound to the store singleton."""
    return ContentGenerator(get_history_store(), model_spec=model_spec)


def shutdown_studio_state() -> None:
    """Close the store. Called during FastAPI lifespan shutdown."""
    close_store()
    logger.info("[StudioState] Store closed")
