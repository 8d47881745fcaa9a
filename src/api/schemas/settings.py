"""
Settings schemas - API credential management.

The credential itself is never returned, only whether one is configured.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field


class ApiKeyStatusResponse(BaseModel):
    configured: bool
    source: Optional[Literal["store", "environment"]] = Field(
        default=None,
        description="Where the active key comes from: the saved setting or GEMINI_API_KEY"
    )


class ApiKeySaveRequest(BaseModel):
    api_key: str = Field(..., min_length=1, description="Google AI Studio API key")


class ApiKeyResponse(BaseModel):
    configured: bool
    message: str
