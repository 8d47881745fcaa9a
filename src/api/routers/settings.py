"""
Settings router - saved API credential.

Endpoints:
- GET /settings/api-key - Whether a credential is configured (never the key itself)
- PUT /settings/api-key - Save the credential
- DELETE /settings/api-key - Remove the saved credential
"""

import os

from fastapi import APIRouter, HTTPException

from .. import _studio_state
from ..schemas.settings import ApiKeyResponse, ApiKeySaveRequest, ApiKeyStatusResponse

router = APIRouter()


@router.get("/api-key", response_model=ApiKeyStatusResponse)
async def get_api_key_status():
    store = _studio_state.get_history_store()
    if store.api_key:
        return ApiKeyStatusResponse(configured=True, source="store")
    if os.getenv("GEMINI_API_KEY"):
        return ApiKeyStatusResponse(configured=True, source="environment")
    return ApiKeyStatusResponse(configured=False)


@router.put("/api-key", response_model=ApiKeyResponse)
async def save_api_key(request: ApiKeySaveRequest):
    api_key = request.api_key.strip()
    if not api_key:
        raise HTTPException(status_code=400, detail="API key must not be empty")

    store = _studio_state.get_history_store()
    store.save_api_key(api_key)
    return ApiKeyResponse(configured=True, message="Chave de API salva com sucesso!")


@router.delete("/api-key", response_model=ApiKeyResponse)
async def remove_api_key():
    store = _studio_state.get_history_store()
    store.remove_api_key()
    return ApiKeyResponse(configured=False, message="Chave de API removida.")
