"""
Content generator - orchestration of the generation pipeline.

A full run goes through these phases:

    IDLE -> GENERATING_CONTENT -> GENERATING_METADATA -> GENERATING_THUMBNAIL
         -> COMPLETE                                  (recorded to history)
         -> FAILED                                    (nothing recorded)

Titles, description, tags and call-to-action are requested together and
joined all-or-nothing. The thumbnail prompt waits for the content because it
quotes its opening.

Content length policy: up to MAX_CONTENT_ATTEMPTS attempts, each retry told
whether the previous text was too short or too long. When no attempt lands
inside the tolerance window the last attempt is returned as-is; the text is
never truncated, so the ending stays intact.
"""

import asyncio
import logging
from enum import Enum
from typing import Any, Callable, Dict, Optional

from . import prompt_builder
from .api_client import GenerationClient
from .config import (
    CHARACTER_TOLERANCE,
    CONTENT_TEMPERATURE,
    DEFAULT_TEMPERATURE,
    MAX_CONTENT_ATTEMPTS,
    MAX_TITLES,
    STRING_LIST_SCHEMA,
    load_environment,
)
from .errors import (
    GenerationError,
    GenerationFailedError,
    MissingApiKeyError,
    MissingInputError,
)
from .languages import PIVOT_LANGUAGE
from .models import (
    GenerationParams,
    GenerationResult,
    HistoryItem,
    RegenerationField,
)
from .postprocess import enforce_tag_budget, parse_string_list, truncate_cta

logger = logging.getLogger("scripture_studio")

ENHANCE_MISSING_IDEA_MESSAGE = "Por favor, insira uma ideia para aprimorar."

StatusCallback = Callable[[str], None]
ClientFactory = Callable[..., GenerationClient]


class GenerationStatus(str, Enum):
    """Phase of a full generation run."""

    IDLE = "IDLE"
    GENERATING_CONTENT = "GENERATING_CONTENT"
    GENERATING_METADATA = "GENERATING_METADATA"
    GENERATING_THUMBNAIL = "GENERATING_THUMBNAIL"
    COMPLETE = "COMPLETE"
    FAILED = "FAILED"


def is_within_tolerance(length: int, target: int, tolerance: int = CHARACTER_TOLERANCE) -> bool:
    return target - tolerance <= length <= target + tolerance


class ContentGenerator:
    """
    Drives the prompt builders and the generation client.

    The store supplies the credential and receives completed runs; it is
    injected rather than looked up globally.
    """

    def __init__(
        self,
        store,
        model_spec: Optional[str] = None,
        client_factory: Optional[ClientFactory] = None,
        config: Optional[Dict[str, Any]] = None,
    ):
        self.store = store
        self.config = config or load_environment()
        self.model_spec = model_spec or self.config.get("model")
        self.client_factory = client_factory or GenerationClient
        self.status = GenerationStatus.IDLE

    # -------------------------------------------------------------------------
    # Setup
    # -------------------------------------------------------------------------

    def resolve_api_key(self) -> str:
        """Saved credential first, then GEMINI_API_KEY from the environment."""
        return (self.store.api_key if self.store else None) or self.config.get("api_key") or ""

    def _create_client(self) -> GenerationClient:
        api_key = self.resolve_api_key()
        if not api_key:
            raise MissingApiKeyError()
        return self.client_factory(
            api_key=api_key,
            model_spec=self.model_spec,
            temperature=self.config.get("temperature", DEFAULT_TEMPERATURE),
        )

    def _set_status(self, status: GenerationStatus) -> None:
        logger.debug(f"[Generator] {self.status.value} -> {status.value}")
        self.status = status

    # -------------------------------------------------------------------------
    # Single-field generations
    # -------------------------------------------------------------------------

    async def generate_content(
        self,
        params: GenerationParams,
        modification: Optional[str] = None,
        client: Optional[GenerationClient] = None,
    ) -> str:
        """
        Generate the story or prayer, retrying to approach character_count.

        Args:
            params: Generation parameters
            modification: Optional one-off instruction
            client: Client to use; created from the store credential if None

        Returns:
            str: First attempt inside the tolerance window, else the last attempt
        """
        client = client or self._create_client()
        base_prompt = prompt_builder.build_content_prompt(params, modification)
        overrides = {"temperature": self.config.get("content_temperature", CONTENT_TEMPERATURE)}
        target = params.character_count

        generated_text = ""
        for attempt in range(1, MAX_CONTENT_ATTEMPTS + 1):
            prompt = base_prompt
            if attempt > 1 and generated_text:
                prompt += prompt_builder.build_length_feedback(params, len(generated_text))

            generated_text = await client.complete_text_async(prompt, params.language, overrides)
            logger.info(
                f"[Generator] Content attempt {attempt}/{MAX_CONTENT_ATTEMPTS}: "
                f"{len(generated_text)} chars (target {target} +/- {CHARACTER_TOLERANCE})"
            )

            if is_within_tolerance(len(generated_text), target):
                return generated_text

        logger.warning(
            f"[Generator] After {MAX_CONTENT_ATTEMPTS} attempts the content length "
            f"({len(generated_text)}) is still outside {target} +/- {CHARACTER_TOLERANCE}. "
            "Returning the last attempt untruncated to keep its ending."
        )
        return generated_text

    async def generate_titles(
        self,
        params: GenerationParams,
        modification: Optional[str] = None,
        client: Optional[GenerationClient] = None,
    ) -> list:
        client = client or self._create_client()
        prompt = prompt_builder.build_titles_prompt(params, modification)
        raw = await client.complete_structured_async(prompt, params.language, STRING_LIST_SCHEMA)
        return parse_string_list(raw, delimiter="\n", limit=MAX_TITLES, strip_bullets=True)

    async def generate_description(
        self,
        params: GenerationParams,
        modification: Optional[str] = None,
        client: Optional[GenerationClient] = None,
    ) -> str:
        client = client or self._create_client()
        prompt = prompt_builder.build_description_prompt(params, modification)
        return await client.complete_text_async(prompt, params.language)

    async def generate_tags(
        self,
        params: GenerationParams,
        modification: Optional[str] = None,
        client: Optional[GenerationClient] = None,
    ) -> list:
        """Generate tags, then cap their summed length at the platform limit."""
        client = client or self._create_client()
        prompt = prompt_builder.build_tags_prompt(params, modification)
        raw = await client.complete_structured_async(prompt, params.language, STRING_LIST_SCHEMA)
        return enforce_tag_budget(parse_string_list(raw, delimiter=","))

    async def generate_cta(
        self,
        params: GenerationParams,
        modification: Optional[str] = None,
        client: Optional[GenerationClient] = None,
    ) -> str:
        client = client or self._create_client()
        prompt = prompt_builder.build_cta_prompt(params, modification)
        text = await client.complete_text_async(prompt, params.language)
        return truncate_cta(text)

    async def generate_thumbnail_prompt(
        self,
        params: GenerationParams,
        generated_content: str,
        modification: Optional[str] = None,
        client: Optional[GenerationClient] = None,
    ) -> str:
        """Image prompt in the pivot language, quoting the content's opening."""
        client = client or self._create_client()
        prompt = prompt_builder.build_thumbnail_prompt(params, generated_content, modification)
        return await client.complete_text_async(prompt, PIVOT_LANGUAGE)

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    async def generate_all(
        self,
        params: GenerationParams,
        on_status: Optional[StatusCallback] = None,
    ) -> HistoryItem:
        """
        Run the full pipeline and record the result to history.

        Args:
            params: Immutable snapshot of the user's inputs
            on_status: Optional callback receiving a progress message per phase

        Returns:
            HistoryItem: The recorded run

        Raises:
            MissingInputError: No credential or empty main_prompt (no network call made)
            GenerationFailedError: A phase failed; carries the partial result
        """
        def report(message: str) -> None:
            logger.info(f"[Generator] {message}")
            if on_status:
                on_status(message)

        api_key = self.resolve_api_key()
        if not api_key:
            raise MissingApiKeyError()
        if not params.main_prompt:
            raise MissingInputError()

        client = self._create_client()
        partial = GenerationResult()

        logger.info("=" * 80)
        logger.info(f"[Generator] Generate all - type: {params.creation_type.value}, "
                    f"language: {params.language}, target: {params.character_count} chars")
        logger.info("=" * 80)

        try:
            self._set_status(GenerationStatus.GENERATING_CONTENT)
            report(f"Gerando {'história' if params.is_story else 'oração'}...")
            content = await self.generate_content(params, client=client)
            partial = partial.with_field(RegenerationField.CONTENT, content)

            self._set_status(GenerationStatus.GENERATING_METADATA)
            report("Gerando metadados (títulos, descrição, etc.)...")
            titles, description, tags, cta = await asyncio.gather(
                self.generate_titles(params, client=client),
                self.generate_description(params, client=client),
                self.generate_tags(params, client=client),
                self.generate_cta(params, client=client),
            )
            partial = GenerationResult(
                titles=titles,
                description=description,
                tags=tags,
                content=content,
                cta=cta,
            )

            self._set_status(GenerationStatus.GENERATING_THUMBNAIL)
            report("Gerando prompt para thumbnail...")
            thumbnail_prompt = await self.generate_thumbnail_prompt(params, content, client=client)
            result = partial.with_field(RegenerationField.THUMBNAIL, thumbnail_prompt)

        except GenerationError as e:
            phase = self.status.value
            self._set_status(GenerationStatus.FAILED)
            logger.error(f"[Generator] Run failed during {phase}: {e.message}")
            raise GenerationFailedError(e, partial, phase) from e

        item = HistoryItem.create(params, result)
        if self.store:
            item = self.store.add_item(item)

        self._set_status(GenerationStatus.COMPLETE)
        logger.info(f"[Generator] Run complete - {item.id}, content {result.content_length} chars")
        return item

    async def regenerate_field(
        self,
        target: RegenerationField,
        params: GenerationParams,
        current: GenerationResult,
        modification: Optional[str] = None,
    ) -> GenerationResult:
        """
        Regenerate exactly one output, leaving every other field untouched.

        The thumbnail is rebuilt from current.content. History is not changed.

        Args:
            target: Field to regenerate
            params: Generation parameters snapshot
            current: Current outputs
            modification: Optional one-off instruction

        Returns:
            GenerationResult: Copy of current with the target field replaced
        """
        client = self._create_client()
        modification = modification or None
        logger.info(f"[Generator] Regenerating {target.value}")

        if target == RegenerationField.TITLES:
            value = await self.generate_titles(params, modification, client=client)
        elif target == RegenerationField.DESCRIPTION:
            value = await self.generate_description(params, modification, client=client)
        elif target == RegenerationField.TAGS:
            value = await self.generate_tags(params, modification, client=client)
        elif target == RegenerationField.THUMBNAIL:
            value = await self.generate_thumbnail_prompt(
                params, current.content, modification, client=client
            )
        elif target == RegenerationField.CONTENT:
            value = await self.generate_content(params, modification, client=client)
        else:
            value = await self.generate_cta(params, modification, client=client)

        return current.with_field(target, value)

    async def enhance_prompt(self, params: GenerationParams) -> str:
        """
        Expand the main idea into a richer single paragraph.

        Raises:
            MissingInputError: No credential or empty main_prompt
        """
        client = self._create_client()
        if not params.main_prompt:
            raise MissingInputError(ENHANCE_MISSING_IDEA_MESSAGE)

        prompt = prompt_builder.build_enhance_prompt(params)
        return await client.complete_text_async(prompt, params.language)
