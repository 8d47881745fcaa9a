"""
API Key authentication dependency.

Auth is off unless API_AUTH_ENABLED is set. When on, every router except
/health expects an X-API-Key header equal to API_KEY. This key guards the
studio API itself and is unrelated to the Gemini credential kept in the
history store.
"""

import os
import secrets
from typing import Optional

from fastapi import HTTPException, Security, status
from fastapi.security import APIKeyHeader

from src.infra.data_paths import get_env_bool

API_KEY_HEADER_NAME = "X-API-Key"

API_AUTH_ENABLED = get_env_bool("API_AUTH_ENABLED", default=False)
API_KEY = os.getenv("API_KEY", "")

api_key_header = APIKeyHeader(
    name=API_KEY_HEADER_NAME,
    auto_error=False,
    description="Studio API key (required when API_AUTH_ENABLED=true)",
)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "ApiKey"},
    )


async def verify_api_key(
    api_key: Optional[str] = Security(api_key_header),
) -> Optional[str]:
    """
    Check the X-API-Key header against API_KEY.

    Returns:
        The accepted key, or None when auth is disabled

    Raises:
        HTTPException: 401 if the header is missing or does not match
    """
    if not API_AUTH_ENABLED:
        return None

    if not api_key:
        raise _unauthorized(f"Missing API key. Provide {API_KEY_HEADER_NAME} header.")

    # An empty API_KEY never matches
    if not API_KEY or not secrets.compare_digest(api_key, API_KEY):
        raise _unauthorized("Invalid API key")

    return api_key
