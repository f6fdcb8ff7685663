"""
Duration parsing for recipe cooking times.

Two shapes are understood: ISO-8601 minute tokens such as ``PT15M`` and
free text like ``"約20分"`` or ``"25 minutes"`` where the first run of digits
is taken as minutes. Hours are not decoded, so ``PT1H30M`` is unresolved.
"""
from __future__ import annotations

import logging
import re

_LOGGER = logging.getLogger(__name__)

_ISO_MINUTES = re.compile(r"PT(\d+)M")
_ISO_PREFIX = re.compile(r"^\s*P(?:\d|T)")
_DIGITS = re.compile(r"\d+")


def parse_duration(text: str | None) -> int | None:
    """Convert a duration string into whole minutes.

    Args:
        text: An ISO-8601 token (``PT30M``) or free text containing a number

    Returns:
        Minutes as an integer, or None if no duration could be recognised
    """
    if not text or not isinstance(text, str):
        return None

    match = _ISO_MINUTES.search(text)
    if match:
        return int(match.group(1))

    # Other ISO components (PT1H30M, P1D) are not decoded
    if _ISO_PREFIX.match(text):
        _LOGGER.debug("Unsupported ISO-8601 duration: %s", text)
        return None

    match = _DIGITS.search(text)
    if match:
        return int(match.group())

    return None
