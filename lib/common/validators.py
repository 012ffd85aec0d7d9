"""Validation utilities for the link shortener."""

import re
from typing import Tuple

# Paths served by fixed routes; a code with one of these names could never be reached
RESERVED_CODES = {"links", "shorten", "style.css"}


def is_valid_short_code(short_code: str, min_length: int = 1, max_length: int = 64) -> Tuple[bool, str]:
    """Validate a user supplied short code.

    Args:
        short_code: The short code to validate
        min_length: Minimum length for short code
        max_length: Maximum length for short code

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not short_code or not isinstance(short_code, str):
        return False, "Short code is required"

    if len(short_code) < min_length:
        return False, f"Short code must be at least {min_length} characters"

    if len(short_code) > max_length:
        return False, f"Short code must be at most {max_length} characters"

    # Only allow alphanumeric characters, hyphens, and underscores
    if not re.match(r'^[a-zA-Z0-9_-]+$', short_code):
        return False, "Short code can only contain letters, numbers, hyphens, and underscores"

    if short_code.lower() in RESERVED_CODES:
        return False, f"'{short_code}' is a reserved word and cannot be used"

    return True, ""
