"""
Prompt Builder - instruction strings for each generation task.

Every builder is a pure function of GenerationParams (plus the optional
one-off modification text). Nothing here touches the network or storage,
and empty inputs are echoed through rather than rejected.
"""

import logging
from typing import Optional

from . import templates
from .config import (
    CAPTION_MAX_WORDS,
    CAPTION_MIN_WORDS,
    CHARACTER_TOLERANCE,
    CTA_MAX_LENGTH,
    TAG_CHAR_LIMIT,
    TAG_PROMPT_BUDGET,
    THUMBNAIL_TEASER_LENGTH,
)
from .languages import get_language_name
from .models import GenerationParams

logger = logging.getLogger("scripture_studio")


def _type_text(params: GenerationParams) -> str:
    return "história bíblica" if params.is_story else "oração"


def _content_noun(params: GenerationParams) -> str:
    return "história" if params.is_story else "oração"


def build_content_prompt(
    params: GenerationParams,
    modification: Optional[str] = None,
    tolerance: int = CHARACTER_TOLERANCE,
) -> str:
    """
    Build the long-form story or prayer prompt.

    Rules embedded: output language, fidelity to the biblical source with
    expansion techniques, a complete beginning/middle/end, the target
    character count with its tolerance window, and text-only output.

    Args:
        params: Generation parameters
        modification: Optional one-off instruction from a regeneration
        tolerance: Accepted deviation from character_count, in characters

    Returns:
        str: Complete content prompt
    """
    language_name = get_language_name(params.language)

    prompt = templates.CONTENT_HEADER.format(language_name=language_name)
    prompt += templates.STORY_RULES if params.is_story else templates.PRAYER_RULES

    modification_block = ""
    if modification:
        modification_block = templates.CONTENT_MODIFICATION.format(modification=modification)

    prompt += templates.CONTENT_FOOTER.format(
        character_count=params.character_count,
        tolerance=tolerance,
        content_noun=_content_noun(params),
        content_label=_type_text(params),
        main_prompt=params.main_prompt,
        modification_block=modification_block,
    )

    logger.debug(f"[PromptBuilder] Content prompt built ({len(prompt)} chars)")
    return prompt


def build_length_feedback(
    params: GenerationParams,
    previous_length: int,
    tolerance: int = CHARACTER_TOLERANCE,
) -> str:
    """
    Feedback appended to a retry after an out-of-window attempt.

    States whether the previous attempt was too short or too long and its
    length, then restates the target while prioritising a conclusive ending.
    """
    if previous_length < params.character_count - tolerance:
        verdict = templates.LENGTH_TOO_SHORT.format(length=previous_length)
    else:
        verdict = templates.LENGTH_TOO_LONG.format(length=previous_length)

    content_word = "a narrativa" if params.is_story else "a oração"

    return templates.LENGTH_FEEDBACK.format(
        verdict=verdict,
        content_word=content_word,
        character_count=params.character_count,
    )


def build_titles_prompt(params: GenerationParams, modification: Optional[str] = None) -> str:
    """Ask for exactly 5 click-optimized titles as a JSON array of strings."""
    prompt = templates.TITLES.format(main_prompt=params.main_prompt, type_text=_type_text(params))
    if params.title_prompt:
        prompt += templates.REFINEMENT.format(hint=params.title_prompt)
    if modification:
        prompt += templates.MODIFICATION.format(modification=modification)
    prompt += templates.TITLES_CLOSING.format(language_name=get_language_name(params.language))
    return prompt


def build_description_prompt(params: GenerationParams, modification: Optional[str] = None) -> str:
    """Ask for a single engagement-optimized description block."""
    prompt = templates.DESCRIPTION.format(main_prompt=params.main_prompt, type_text=_type_text(params))
    if params.description_prompt:
        prompt += templates.REFINEMENT.format(hint=params.description_prompt)
    if modification:
        prompt += templates.MODIFICATION.format(modification=modification)
    prompt += templates.DESCRIPTION_CLOSING.format(language_name=get_language_name(params.language))
    return prompt


def build_tags_prompt(params: GenerationParams, modification: Optional[str] = None) -> str:
    """
    Ask for a mix of long-tail and short-tail tags.

    The prompt asks for a total under TAG_PROMPT_BUDGET characters, a safety
    margin below the TAG_CHAR_LIMIT enforced afterwards by enforce_tag_budget.
    """
    prompt = templates.TAGS.format(
        type_text=_type_text(params),
        main_prompt=params.main_prompt,
        tag_budget=TAG_PROMPT_BUDGET,
        tag_limit=TAG_CHAR_LIMIT,
        language_name=get_language_name(params.language),
    )
    if modification:
        prompt += templates.MODIFICATION.format(modification=modification)
    prompt += templates.TAGS_CLOSING
    return prompt


def build_thumbnail_prompt(
    params: GenerationParams,
    generated_content: str,
    modification: Optional[str] = None,
) -> str:
    """
    Build the image-prompt request, always in English.

    The requested image prompt must describe a high-contrast scene and carry
    a short caption, invented in the user's language, rendered verbatim on
    the image. The first THUMBNAIL_TEASER_LENGTH characters of the generated
    content are quoted as context.

    Args:
        params: Generation parameters
        generated_content: Current content text (may be empty)
        modification: Optional one-off instruction from a regeneration

    Returns:
        str: Thumbnail prompt request
    """
    language_name = get_language_name(params.language)

    prompt = templates.THUMBNAIL_INTRO.format(
        type_text=_type_text(params),
        main_prompt=params.main_prompt,
        teaser=generated_content[:THUMBNAIL_TEASER_LENGTH],
    )
    prompt += templates.THUMBNAIL_RULES.format(
        caption_min=CAPTION_MIN_WORDS,
        caption_max=CAPTION_MAX_WORDS,
        language_name=language_name,
    )
    if params.thumbnail_prompt:
        prompt += templates.THUMBNAIL_STYLE.format(hint=params.thumbnail_prompt)
    if modification:
        prompt += templates.THUMBNAIL_MODIFICATION.format(modification=modification)
    prompt += templates.THUMBNAIL_CLOSING
    return prompt


def build_cta_prompt(params: GenerationParams, modification: Optional[str] = None) -> str:
    """Ask for a persuasive subscribe/notify/like/comment call-to-action."""
    prompt = templates.CTA.format(
        main_prompt=params.main_prompt,
        type_text=_content_noun(params),
        max_length=CTA_MAX_LENGTH,
    )
    if modification:
        prompt += templates.CTA_MODIFICATION.format(modification=modification)
    prompt += templates.CTA_CLOSING.format(language_name=get_language_name(params.language))
    return prompt


def build_enhance_prompt(params: GenerationParams) -> str:
    """Expand the main idea into one richer paragraph. Uses main_prompt only."""
    return templates.ENHANCE.format(
        main_prompt=params.main_prompt,
        language_name=get_language_name(params.language),
    )
