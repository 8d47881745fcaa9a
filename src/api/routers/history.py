"""
History router.

Endpoints:
- GET /history - List recorded runs (newest first)
- GET /history/{item_id} - Get one run, e.g. to load it back into the editor
- DELETE /history/{item_id} - Delete one run
- DELETE /history - Delete all runs
"""

import logging

from fastapi import APIRouter, HTTPException

from .. import _studio_state
from ..schemas.history import (
    HistoryDeleteResponse,
    HistoryItemResponse,
    HistoryListResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=HistoryListResponse)
async def list_history():
    store = _studio_state.get_history_store()
    items = [HistoryItemResponse.from_item(item) for item in store.list_items()]
    return HistoryListResponse(items=items, total=len(items))


@router.get("/{item_id}", response_model=HistoryItemResponse)
async def get_history_item(item_id: str):
    """
    Get a recorded run.

    The params and result together restore the full editable state.
    """
    store = _studio_state.get_history_store()
    item = store.get_item(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail=f"History item not found: {item_id}")
    return HistoryItemResponse.from_item(item)


@router.delete("/{item_id}", response_model=HistoryDeleteResponse)
async def delete_history_item(item_id: str):
    store = _studio_state.get_history_store()
    if not store.delete_item(item_id):
        raise HTTPException(status_code=404, detail=f"History item not found: {item_id}")
    return HistoryDeleteResponse(deleted=1, message=f"Deleted {item_id}")


@router.delete("", response_model=HistoryDeleteResponse)
async def clear_history():
    store = _studio_state.get_history_store()
    count = len(store.list_items())
    store.clear()
    logger.info(f"[HistoryAPI] Cleared {count} items")
    return HistoryDeleteResponse(deleted=count, message="History cleared")
