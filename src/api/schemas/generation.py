"""
Generation operation schemas.

Request/response models for generate-all, single-field regeneration and
idea enhancement. Field names are snake_case on the wire.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from src.content.models import (
    DEFAULT_CHARACTER_COUNT,
    DEFAULT_LANGUAGE,
    MIN_CHARACTER_COUNT,
    CreationType,
    GenerationParams,
    GenerationResult,
    RegenerationField,
)


class GenerationParamsModel(BaseModel):
    """User inputs for a generation request."""

    creation_type: CreationType = Field(
        default=CreationType.STORY,
        description="Kind of long-form text: 'story' (biblical story) or 'prayer'"
    )
    main_prompt: str = Field(
        default="",
        description="Main idea. Required for generate and enhance.",
        json_schema_extra={"examples": ["Davi enfrenta Golias", "Oração pela família"]}
    )
    title_prompt: str = Field(default="", description="Extra instructions for titles")
    description_prompt: str = Field(default="", description="Extra instructions for the description")
    thumbnail_prompt: str = Field(default="", description="Extra instructions for the thumbnail")
    character_count: int = Field(
        default=DEFAULT_CHARACTER_COUNT,
        ge=MIN_CHARACTER_COUNT,
        description="Target content length in characters (accepted within +/- 500)",
        json_schema_extra={"examples": [1500, 3000]}
    )
    language: str = Field(
        default=DEFAULT_LANGUAGE,
        description="Output language code. Unknown codes fall back to Brazilian Portuguese.",
        json_schema_extra={"examples": ["pt-BR", "en-US", "es-ES", "fr-FR", "de-DE"]}
    )
    project_name: Optional[str] = Field(default=None, description="Optional project label")

    def to_params(self) -> GenerationParams:
        return GenerationParams(
            creation_type=self.creation_type,
            main_prompt=self.main_prompt.strip(),
            title_prompt=self.title_prompt,
            description_prompt=self.description_prompt,
            thumbnail_prompt=self.thumbnail_prompt,
            character_count=self.character_count,
            language=self.language,
            project_name=self.project_name,
        )

    @classmethod
    def from_params(cls, params: GenerationParams) -> "GenerationParamsModel":
        return cls(
            creation_type=params.creation_type,
            main_prompt=params.main_prompt,
            title_prompt=params.title_prompt,
            description_prompt=params.description_prompt,
            thumbnail_prompt=params.thumbnail_prompt,
            character_count=max(params.character_count, MIN_CHARACTER_COUNT),
            language=params.language,
            project_name=params.project_name,
        )


class GenerationResultModel(BaseModel):
    """Generated outputs."""

    titles: List[str] = Field(default=[])
    description: str = ""
    tags: List[str] = Field(default=[])
    thumbnail_prompt: str = ""
    content: str = ""
    cta: str = ""

    def to_result(self) -> GenerationResult:
        return GenerationResult(
            titles=list(self.titles),
            description=self.description,
            tags=list(self.tags),
            thumbnail_prompt=self.thumbnail_prompt,
            content=self.content,
            cta=self.cta,
        )

    @classmethod
    def from_result(cls, result: GenerationResult) -> "GenerationResultModel":
        return cls(
            titles=list(result.titles),
            description=result.description,
            tags=list(result.tags),
            thumbnail_prompt=result.thumbnail_prompt,
            content=result.content,
            cta=result.cta,
        )


class GenerateRequest(GenerationParamsModel):
    """Request for a full generation run."""

    model: Optional[str] = Field(
        default=None,
        description="Model spec. null uses GEMINI_MODEL (default gemini-2.5-flash); 'claude-*' uses Claude",
        json_schema_extra={"examples": [None, "gemini-2.5-pro", "claude-sonnet-4-5-20250929"]}
    )


class GenerateResponse(BaseModel):
    """Response from a full generation run."""

    success: bool
    history_id: Optional[str] = None
    timestamp: Optional[int] = None
    result: Optional[GenerationResultModel] = None
    content_length: int = 0
    status_messages: List[str] = Field(default=[])
    failed_phase: Optional[str] = Field(
        default=None,
        description="Phase that failed; result then holds the partial outputs"
    )
    error: Optional[str] = None


class RegenerateRequest(BaseModel):
    """Request for single-field regeneration."""

    field: RegenerationField
    params: GenerationParamsModel
    current: GenerationResultModel
    modification: Optional[str] = Field(
        default=None,
        description="One-off instruction applied to this regeneration only"
    )
    model: Optional[str] = None


class RegenerateResponse(BaseModel):
    """Response from single-field regeneration."""

    success: bool
    field: RegenerationField
    result: Optional[GenerationResultModel] = None
    content_length: int = 0
    error: Optional[str] = None


class EnhanceRequest(GenerationParamsModel):
    """Request for idea enhancement."""

    model: Optional[str] = None


class EnhanceResponse(BaseModel):
    """Response from idea enhancement."""

    success: bool
    enhanced_prompt: Optional[str] = None
    error: Optional[str] = None
