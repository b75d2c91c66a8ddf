"""Attribute validators shared by the style components."""

from __future__ import annotations

import re
from typing import Optional

from .exceptions import InvalidAttributeError


_HEX_RE = re.compile(r"^[a-fA-F0-9]+$")


def validate_color(
    attribute: str,
    value: Optional[str],
    use_alpha: bool = True,
    allow_empty: bool = False,
) -> Optional[str]:
    """Validate an RGB/ARGB hex color and return it upper-cased.

    ``use_alpha`` expects 8 hex characters (ARGB), otherwise 6 (RGB).
    ``None`` is accepted only when ``allow_empty`` is set.
    """
    if value is None or value == "":
        if allow_empty and value is None:
            return None
        raise InvalidAttributeError(attribute, value, "color must not be empty")

    length = 8 if use_alpha else 6
    if len(value) != length:
        raise InvalidAttributeError(
            attribute, value, f"a valid color must contain {length} hex characters"
        )
    if not _HEX_RE.match(value):
        raise InvalidAttributeError(attribute, value, "not a valid hex value")
    return value.upper()


def validate_range(attribute: str, value, minimum, maximum):
    """Ensure ``minimum <= value <= maximum``."""
    if value < minimum or value > maximum:
        raise InvalidAttributeError(
            attribute, value, f"must be between {minimum} and {maximum}"
        )
    return value
