"""
Content domain entities.

- GenerationParams: immutable snapshot of the user's inputs for one request
- GenerationResult: the six generated outputs
- HistoryItem: params + result + id/timestamp, as persisted in history
- RegenerationField: which single output to regenerate

History items serialize with the camelCase keys used by the browser app,
so a saved history list stays readable by both.
"""

import time
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Optional


class CreationType(str, Enum):
    """Kind of long-form text to generate."""

    STORY = "story"
    PRAYER = "prayer"


class RegenerationField(str, Enum):
    """Output slot selected for single-field regeneration."""

    TITLES = "titles"
    DESCRIPTION = "description"
    TAGS = "tags"
    THUMBNAIL = "thumbnail"
    CONTENT = "content"
    CTA = "cta"


DEFAULT_LANGUAGE = "pt-BR"
DEFAULT_CHARACTER_COUNT = 1500
MIN_CHARACTER_COUNT = 100


@dataclass(frozen=True)
class GenerationParams:
    """User inputs for a generation request."""

    creation_type: CreationType = CreationType.STORY
    main_prompt: str = ""
    title_prompt: str = ""
    description_prompt: str = ""
    thumbnail_prompt: str = ""
    character_count: int = DEFAULT_CHARACTER_COUNT
    language: str = DEFAULT_LANGUAGE
    project_name: Optional[str] = None

    def __post_init__(self):
        # A blank label and no label are the same thing
        if not self.project_name:
            object.__setattr__(self, "project_name", None)

    @property
    def is_story(self) -> bool:
        return self.creation_type == CreationType.STORY

    def to_dict(self) -> Dict[str, Any]:
        return {
            "projectName": self.project_name or "",
            "creationType": self.creation_type.value,
            "mainPrompt": self.main_prompt,
            "titlePrompt": self.title_prompt,
            "descriptionPrompt": self.description_prompt,
            "thumbnailPrompt": self.thumbnail_prompt,
            "characterCount": self.character_count,
            "language": self.language,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GenerationParams":
        return cls(
            project_name=data.get("projectName") or None,
            creation_type=CreationType(data.get("creationType", CreationType.STORY.value)),
            main_prompt=data.get("mainPrompt", ""),
            title_prompt=data.get("titlePrompt", ""),
            description_prompt=data.get("descriptionPrompt", ""),
            thumbnail_prompt=data.get("thumbnailPrompt", ""),
            character_count=int(data.get("characterCount", DEFAULT_CHARACTER_COUNT)),
            language=data.get("language", DEFAULT_LANGUAGE),
        )


@dataclass(frozen=True)
class GenerationResult:
    """Generated outputs. Each field is independently regenerable."""

    titles: List[str] = field(default_factory=list)
    description: str = ""
    tags: List[str] = field(default_factory=list)
    thumbnail_prompt: str = ""
    content: str = ""
    cta: str = ""

    @property
    def content_length(self) -> int:
        return len(self.content)

    def with_field(self, target: RegenerationField, value: Any) -> "GenerationResult":
        """Return a copy with exactly one output replaced."""
        attribute = {
            RegenerationField.TITLES: "titles",
            RegenerationField.DESCRIPTION: "description",
            RegenerationField.TAGS: "tags",
            RegenerationField.THUMBNAIL: "thumbnail_prompt",
            RegenerationField.CONTENT: "content",
            RegenerationField.CTA: "cta",
        }[target]
        return replace(self, **{attribute: value})

    def to_dict(self) -> Dict[str, Any]:
        return {
            "generatedTitles": list(self.titles),
            "generatedDescription": self.description,
            "generatedTags": list(self.tags),
            "generatedThumbnailPrompt": self.thumbnail_prompt,
            "generatedContent": self.content,
            "generatedCta": self.cta,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GenerationResult":
        return cls(
            titles=list(data.get("generatedTitles", [])),
            description=data.get("generatedDescription", ""),
            tags=list(data.get("generatedTags", [])),
            thumbnail_prompt=data.get("generatedThumbnailPrompt", ""),
            content=data.get("generatedContent", ""),
            cta=data.get("generatedCta", ""),
        )


def now_millis() -> int:
    """Current time as epoch milliseconds."""
    return int(time.time() * 1000)


@dataclass(frozen=True)
class HistoryItem:
    """A completed "generate all" run as stored in history."""

    id: str
    timestamp: int
    params: GenerationParams
    result: GenerationResult

    @classmethod
    def create(
        cls,
        params: GenerationParams,
        result: GenerationResult,
        timestamp: Optional[int] = None,
    ) -> "HistoryItem":
        """Create a new HistoryItem with a timestamp-derived id."""
        ts = timestamp if timestamp is not None else now_millis()
        return cls(id=f"history-{ts}", timestamp=ts, params=params, result=result)

    def to_dict(self) -> Dict[str, Any]:
        data = self.params.to_dict()
        data["id"] = self.id
        data["timestamp"] = self.timestamp
        data.update(self.result.to_dict())
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HistoryItem":
        return cls(
            id=str(data["id"]),
            timestamp=int(data["timestamp"]),
            params=GenerationParams.from_dict(data),
            result=GenerationResult.from_dict(data),
        )
