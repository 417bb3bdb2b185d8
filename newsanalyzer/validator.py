# newsanalyzer/validator.py
from __future__ import annotations

import logging

from newsanalyzer.errors import InputTooShort

logger = logging.getLogger(__name__)

MIN_INPUT_CHARS = 20


def validate_input(text: str) -> str:
    """Return the trimmed text, or raise InputTooShort if it is too short to analyze."""
    trimmed = (text or "").strip()
    if len(trimmed) < MIN_INPUT_CHARS:
        logger.debug("Rejected input of %d characters", len(trimmed))
        raise InputTooShort(len(trimmed), MIN_INPUT_CHARS)
    return trimmed
