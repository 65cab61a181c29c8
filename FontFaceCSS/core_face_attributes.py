#!/usr/bin/env python3
"""
Derive @font-face attributes from a style token by substring inspection.

Weight precedence is bold > medium > regular; only one rule fires.
Variable styles bypass the single weight and use a weight range instead.

Examples (doctests):
>>> derive_weight("extrabold-italic")
'700'
>>> derive_weight("medium")
'500'
>>> derive_weight("regular")
'400'
>>> derive_style("bold-italic")
'italic'
>>> is_variable("Variable-Italic")
True
>>> derive_format("Inter-Bold.otf")
'opentype'
>>> derive_format("Inter-Bold.WOFF2", FormatPolicy.EXTENSION)
'woff2'
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

VARIABLE_WEIGHT_RANGE = "100 900"
VARIABLE_DEFAULT_WEIGHT = "400"
VARIATION_SETTINGS = '"wght" 400'

CANONICAL_FORMATS = {
    "ttf": "truetype",
    "otf": "opentype",
    "woff": "woff",
    "woff2": "woff2",
}


class FormatPolicy(Enum):
    """How a file extension becomes the CSS format() argument."""

    CANONICAL = "canonical"  # ttf -> truetype, otf -> opentype
    EXTENSION = "extension"  # raw lower-cased extension


@dataclass(frozen=True)
class FaceAttributes:
    font_weight: str
    font_style: str
    is_variable: bool
    format: str

    @property
    def variation_settings(self) -> str | None:
        return VARIATION_SETTINGS if self.is_variable else None

    @property
    def class_weight(self) -> str:
        """Single weight for utility classes, where a range is not allowed."""
        return VARIABLE_DEFAULT_WEIGHT if self.is_variable else self.font_weight


def derive_weight(style_token: str) -> str:
    token = style_token.lower()
    if "bold" in token:
        return "700"
    if "medium" in token:
        return "500"
    return "400"


def derive_style(style_token: str) -> str:
    return "italic" if "italic" in style_token.lower() else "normal"


def is_variable(style_token: str) -> bool:
    return "variable" in style_token.lower()


def derive_format(
    file_path: str | Path, policy: FormatPolicy = FormatPolicy.CANONICAL
) -> str:
    ext = Path(file_path).suffix.lower().lstrip(".")
    if policy is FormatPolicy.CANONICAL:
        return CANONICAL_FORMATS.get(ext, ext)
    return ext


def derive_attributes(
    style_token: str,
    file_path: str | Path,
    policy: FormatPolicy = FormatPolicy.CANONICAL,
) -> FaceAttributes:
    """All attributes of one face; variable styles use the weight range and normal style."""
    fmt = derive_format(file_path, policy)
    if is_variable(style_token):
        return FaceAttributes(
            font_weight=VARIABLE_WEIGHT_RANGE,
            font_style="normal",
            is_variable=True,
            format=fmt,
        )
    return FaceAttributes(
        font_weight=derive_weight(style_token),
        font_style=derive_style(style_token),
        is_variable=False,
        format=fmt,
    )
