"""
Post-processing of model outputs.

- parse_string_list: structured list parsing with a delimiter fallback
- enforce_tag_budget: hard cap on the summed tag length
- truncate_cta: boundary-aware cut of an over-long call-to-action
"""

import json
import logging
import re
from typing import List, Optional

from .config import CTA_LOOK_BACK, CTA_MAX_LENGTH, TAG_CHAR_LIMIT

logger = logging.getLogger("scripture_studio")

_BULLET_PATTERN = re.compile(r"^- ")


def parse_string_list(
    raw: str,
    delimiter: str = "\n",
    limit: Optional[int] = None,
    strip_bullets: bool = False,
) -> List[str]:
    """
    Parse a structured-response text into a list of strings.

    A JSON array yields its stripped, non-empty items; any other JSON value
    yields an empty list. Text that is not valid JSON is split on the
    delimiter instead, so this never raises.

    Args:
        raw: Raw structured-response text
        delimiter: Fallback delimiter ("\\n" for titles, "," for tags)
        limit: Maximum number of items to keep
        strip_bullets: Remove a leading "- " from fallback items

    Returns:
        List[str]: Parsed items, in their original order
    """
    try:
        data = json.loads(raw)
        if isinstance(data, list):
            items = [str(item).strip() for item in data]
        else:
            logger.warning(f"[PostProcess] Structured response is not a list: {type(data).__name__}")
            items = []
    except (json.JSONDecodeError, TypeError) as e:
        logger.warning(f"[PostProcess] Failed to parse structured response ({e}), splitting on {delimiter!r}")
        items = []
        for part in (raw or "").split(delimiter):
            if strip_bullets:
                part = _BULLET_PATTERN.sub("", part)
            items.append(part.strip())

    items = [item for item in items if item]
    if limit is not None:
        items = items[:limit]
    return items


def enforce_tag_budget(tags: List[str], limit: int = TAG_CHAR_LIMIT) -> List[str]:
    """
    Keep the longest prefix of tags whose summed length stays within limit.

    Accepting stops at the first tag that would overflow, even if a later,
    shorter tag would still fit.
    """
    accepted: List[str] = []
    running_length = 0

    for tag in tags:
        if running_length + len(tag) > limit:
            logger.debug(f"[PostProcess] Tag budget reached at {running_length}/{limit} chars")
            break
        accepted.append(tag)
        running_length += len(tag)

    return accepted


def truncate_cta(text: str, limit: int = CTA_MAX_LENGTH, look_back: int = CTA_LOOK_BACK) -> str:
    """
    Cut a call-to-action down to at most limit characters.

    Preference order: end of the last sentence within the final look_back
    characters before the limit, then the last word boundary, then a hard
    cut at the limit.
    """
    if len(text) <= limit:
        return text

    period_index = text.rfind(".", 0, limit)
    if period_index != -1 and period_index >= limit - look_back:
        cut_index = period_index + 1
    else:
        cut_index = text.rfind(" ", 0, limit + 1)
        if cut_index <= 0:
            cut_index = limit

    truncated = text[:cut_index].strip()
    logger.info(f"[PostProcess] CTA truncated from {len(text)} to {len(truncated)} chars")
    return truncated
