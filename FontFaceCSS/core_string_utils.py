#!/usr/bin/env python3
"""
String normalization helpers for family names and style tokens.

Philosophy:
- None means "no value was provided"
- Empty string means "value was provided but empty"
- Whitespace-only strings are treated as empty

Usage:
    from FontFaceCSS.core_string_utils import family_slug, css_identifier

    family = family_slug("Open Sans")  # "open-sans"
"""

import re
from typing import Optional


def is_empty(value: Optional[str]) -> bool:
    """
    Check if string is None, empty, or whitespace-only.

    Examples:
        >>> is_empty(None)
        True
        >>> is_empty("   ")
        True
        >>> is_empty("inter")
        False
    """
    return not value or not str(value).strip()


def normalize_empty(value: Optional[str]) -> Optional[str]:
    """
    Convert empty/whitespace strings to None, strip meaningful content.

    Examples:
        >>> normalize_empty("") is None
        True
        >>> normalize_empty("  src/Fonts  ")
        'src/Fonts'
    """
    if value is None:
        return None
    stripped = str(value).strip()
    return stripped if stripped else None


def family_slug(directory_name: str) -> str:
    """
    Family name derived from a directory name: lower-cased, whitespace runs to hyphens.

    Examples:
        >>> family_slug("Inter")
        'inter'
        >>> family_slug("Open Sans")
        'open-sans'
        >>> family_slug("  IBM  Plex Mono ")
        'ibm-plex-mono'
    """
    return re.sub(r"\s+", "-", directory_name.strip()).lower()


def css_identifier(value: str) -> str:
    """
    Lower-case a token and turn underscores into hyphens.

    Examples:
        >>> css_identifier("Bold_Italic")
        'bold-italic'
    """
    return value.lower().replace("_", "-")


def join_nonempty(*parts: Optional[str], separator: str = "-") -> str:
    """
    Join only non-empty parts with separator.

    Examples:
        >>> join_nonempty("inter", None, "bold")
        'inter-bold'
        >>> join_nonempty(None, "", separator="-")
        ''
    """
    cleaned = [normalize_empty(p) for p in parts]
    return separator.join(p for p in cleaned if p is not None)
