#!/usr/bin/env python3
"""
Run configuration for the CSS generator.

GENERATOR_CONFIG holds the defaults offered by the interactive prompts;
GeneratorConfig carries the values of one run, including the project root
every relative path is resolved against.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import FrozenSet, Optional

from FontFaceCSS.core_face_attributes import FormatPolicy
from FontFaceCSS.core_file_collector import LEGACY_EXTENSIONS, SUPPORTED_EXTENSIONS

GENERATOR_CONFIG = {
    "fonts_root": "src/Fonts",  # default fonts folder, relative to project root
    "tailwind_css": "src/app.css",  # default Tailwind stylesheet to update
    "standard_css": "fonts.css",  # default Standard CSS output file
    "fallback": "sans-serif",  # generic family appended to every declaration
    "token_prefix": "--font-",  # @theme variable prefix
}


class CssTarget(Enum):
    """Which flavor of CSS a run produces."""

    TAILWIND = "tailwind"
    STANDARD = "standard"

    @property
    def label(self) -> str:
        return "TailwindCSS" if self is CssTarget.TAILWIND else "Standard CSS"


@dataclass(frozen=True)
class GeneratorConfig:
    project_root: Path = field(default_factory=Path.cwd)
    target: CssTarget = CssTarget.TAILWIND
    format_policy: FormatPolicy = FormatPolicy.CANONICAL
    recursive: bool = False
    extensions: FrozenSet[str] = frozenset(SUPPORTED_EXTENSIONS)
    fallback: str = GENERATOR_CONFIG["fallback"]
    token_prefix: str = GENERATOR_CONFIG["token_prefix"]
    font_display: Optional[str] = None

    @classmethod
    def legacy(cls, project_root: Optional[Path] = None, **overrides) -> "GeneratorConfig":
        """Settings matching the ttf-only tool: recursive scan of .ttf files."""
        config = cls(
            project_root=Path(project_root) if project_root else Path.cwd(),
            recursive=True,
            extensions=frozenset(LEGACY_EXTENSIONS),
        )
        return replace(config, **overrides)

    def with_target(self, target: CssTarget) -> "GeneratorConfig":
        return replace(self, target=target)
