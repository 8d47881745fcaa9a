"""
Generation router.

Endpoints:
- POST /generation/generate - Generate content and all metadata (recorded to history)
- POST /generation/regenerate - Regenerate exactly one field
- POST /generation/enhance - Expand the main idea into a richer paragraph

Missing inputs (no credential, empty idea) are rejected with 400 before any
model call. Provider failures are reported as success=false with the
user-facing message.
"""

import logging

from fastapi import APIRouter, HTTPException

from src.content.errors import (
    ENHANCE_ERROR_PREFIX,
    REGENERATE_ERROR_PREFIX,
    GenerationError,
    GenerationFailedError,
    MissingInputError,
)

from .. import _studio_state
from ..schemas.generation import (
    EnhanceRequest,
    EnhanceResponse,
    GenerateRequest,
    GenerateResponse,
    GenerationResultModel,
    RegenerateRequest,
    RegenerateResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/generate", response_model=GenerateResponse)
async def generate(request: GenerateRequest):
    """
    Run the full pipeline (blocking).

    Content first, then titles/description/tags/CTA together, then the
    thumbnail prompt. On success the run is prepended to history. On failure
    the outputs produced so far are returned and nothing is recorded.
    """
    params = request.to_params()
    status_messages = []

    try:
        generator = _studio_state.get_generator(request.model)
        item = await generator.generate_all(params, on_status=status_messages.append)

    except MissingInputError as e:
        raise HTTPException(status_code=400, detail=e.message)

    except GenerationFailedError as e:
        logger.warning(f"[GenerationAPI] Run failed during {e.phase}: {e.message}")
        return GenerateResponse(
            success=False,
            result=GenerationResultModel.from_result(e.partial),
            content_length=e.partial.content_length,
            status_messages=status_messages,
            failed_phase=e.phase,
            error=e.message,
        )

    return GenerateResponse(
        success=True,
        history_id=item.id,
        timestamp=item.timestamp,
        result=GenerationResultModel.from_result(item.result),
        content_length=item.result.content_length,
        status_messages=status_messages,
    )


@router.post("/regenerate", response_model=RegenerateResponse)
async def regenerate(request: RegenerateRequest):
    """
    Regenerate one field, returning the full result with only that field changed.

    History is not modified.
    """
    current = request.current.to_result()

    try:
        generator = _studio_state.get_generator(request.model)
        result = await generator.regenerate_field(
            request.field,
            request.params.to_params(),
            current,
            request.modification,
        )

    except MissingInputError as e:
        raise HTTPException(status_code=400, detail=e.message)

    except GenerationError as e:
        logger.warning(f"[GenerationAPI] Regeneration of {request.field.value} failed: {e.message}")
        return RegenerateResponse(
            success=False,
            field=request.field,
            result=request.current,
            content_length=current.content_length,
            error=f"{REGENERATE_ERROR_PREFIX}{e.message}",
        )

    return RegenerateResponse(
        success=True,
        field=request.field,
        result=GenerationResultModel.from_result(result),
        content_length=result.content_length,
    )


@router.post("/enhance", response_model=EnhanceResponse)
async def enhance(request: EnhanceRequest):
    """Rewrite the main idea as one richer paragraph in the selected language."""
    try:
        generator = _studio_state.get_generator(request.model)
        enhanced = await generator.enhance_prompt(request.to_params())

    except MissingInputError as e:
        raise HTTPException(status_code=400, detail=e.message)

    except GenerationError as e:
        logger.warning(f"[GenerationAPI] Enhancement failed: {e.message}")
        return EnhanceResponse(success=False, error=f"{ENHANCE_ERROR_PREFIX}{e.message}")

    return EnhanceResponse(success=True, enhanced_prompt=enhanced)
