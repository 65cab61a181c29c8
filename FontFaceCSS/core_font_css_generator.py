#!/usr/bin/env python3
"""
Generation pipeline: family directories in, one CSS file out.

Three run modes:
- Tailwind add: read the stylesheet, strip earlier generated blocks, append a
  fresh @theme block and @font-face section, overwrite.
- Tailwind clean: read the stylesheet, strip the selected families, overwrite.
- Standard CSS: write @font-face rules plus utility classes to a new or
  overwritten file.

Reads and writes happen once each, sequentially. OSError propagates to the
caller unchanged; nothing is rolled back and no backup is written.

Usage:
    from FontFaceCSS.core_font_css_generator import generate_tailwind
    from FontFaceCSS.core_generator_config import GeneratorConfig

    config = GeneratorConfig(project_root=Path("/proj"))
    result = generate_tailwind(config, [Path("/proj/src/Fonts/Inter")], Path("/proj/src/app.css"))
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from FontFaceCSS.core_css_cleaner import clean_css, strip_generated
from FontFaceCSS.core_css_synthesizer import synthesize_standard, synthesize_tailwind
from FontFaceCSS.core_error_handling import ErrorTracker
from FontFaceCSS.core_generator_config import GENERATOR_CONFIG, GeneratorConfig
from FontFaceCSS.core_logging_config import HandlerAPI, get_logger
from FontFaceCSS.core_path_resolver import resolve_project_path, validate_file
from FontFaceCSS.core_style_inference import FamilyStyles, FontFamily, scan_family

logger = get_logger(__name__)

ENCODING = "utf-8"


@dataclass
class GenerationResult:
    css_path: Path
    css: str
    families: List[FamilyStyles] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)

    @property
    def face_count(self) -> int:
        return sum(len(f.styles) for f in self.families)


def collect_families(
    family_dirs: Iterable[str | Path],
    config: GeneratorConfig,
    *,
    tracker: Optional[ErrorTracker] = None,
    handler: Optional[HandlerAPI] = None,
) -> Tuple[List[FamilyStyles], List[str]]:
    """Scan each family directory in the given order; empty ones are skipped."""
    collected: List[FamilyStyles] = []
    skipped: List[str] = []
    for directory in family_dirs:
        family = FontFamily.from_directory(directory)
        family_styles = scan_family(
            family,
            recursive=config.recursive,
            extensions=config.extensions,
            tracker=tracker,
        )
        if family_styles is None:
            skipped.append(family.name)
            if handler:
                handler.skipped(family.name, f"No font files found under {family.name}")
            continue
        logger.debug(f"[{family.name}] styles: {', '.join(family_styles.tokens)}")
        if handler:
            handler.discovered(family.name, family_styles.tokens)
            for token, font_file in family_styles.styles.items():
                handler.mapping(token, font_file.absolute_path.name, family=family.name)
        collected.append(family_styles)
    return collected, skipped


def build_tailwind_css(
    existing_css: str,
    families: Sequence[FamilyStyles],
    family_names: Iterable[str],
    css_path: str | Path,
    config: GeneratorConfig,
) -> str:
    """Existing stylesheet text with earlier output replaced by a fresh fragment."""
    css = strip_generated(existing_css, family_names)
    if not families:
        return css
    fragment = synthesize_tailwind(
        families,
        css_path,
        format_policy=config.format_policy,
        fallback=config.fallback,
        token_prefix=config.token_prefix,
        font_display=config.font_display,
    )
    return css + fragment.as_appendix()


def _write(css_path: Path, css: str, handler: Optional[HandlerAPI]) -> None:
    css_path.write_text(css, encoding=ENCODING)
    logger.debug(f"Wrote {len(css)} characters to {css_path}")
    if handler:
        handler.saved(css_path)


def generate_tailwind(
    config: GeneratorConfig,
    family_dirs: Sequence[str | Path],
    css_path: str | Path,
    *,
    tracker: Optional[ErrorTracker] = None,
    handler: Optional[HandlerAPI] = None,
) -> GenerationResult:
    """Add mode: regenerate @theme and @font-face blocks inside an existing stylesheet."""
    css_path = validate_file(
        resolve_project_path(config.project_root, css_path)
    ).absolute()
    existing = css_path.read_text(encoding=ENCODING)
    families, skipped = collect_families(
        family_dirs, config, tracker=tracker, handler=handler
    )
    names = [FontFamily.from_directory(d).name for d in family_dirs]
    css = build_tailwind_css(existing, families, names, css_path, config)
    _write(css_path, css, handler)
    return GenerationResult(css_path=css_path, css=css, families=families, skipped=skipped)


def clean_tailwind(
    config: GeneratorConfig,
    family_dirs: Sequence[str | Path],
    css_path: str | Path,
    *,
    handler: Optional[HandlerAPI] = None,
) -> GenerationResult:
    """Clean mode: remove generated blocks for the selected families."""
    css_path = validate_file(
        resolve_project_path(config.project_root, css_path)
    ).absolute()
    existing = css_path.read_text(encoding=ENCODING)
    names = [FontFamily.from_directory(d).name for d in family_dirs]
    css = clean_css(existing, names)
    _write(css_path, css, handler)
    if handler:
        handler.removed(names)
    return GenerationResult(css_path=css_path, css=css)


def generate_standard(
    config: GeneratorConfig,
    family_dirs: Sequence[str | Path],
    css_path: Optional[str | Path] = None,
    *,
    tracker: Optional[ErrorTracker] = None,
    handler: Optional[HandlerAPI] = None,
) -> GenerationResult:
    """Standard CSS mode: write @font-face rules and utility classes, replacing the file."""
    css_path = resolve_project_path(
        config.project_root, css_path or GENERATOR_CONFIG["standard_css"]
    ).absolute()
    families, skipped = collect_families(
        family_dirs, config, tracker=tracker, handler=handler
    )
    css = synthesize_standard(
        families,
        css_path,
        format_policy=config.format_policy,
        fallback=config.fallback,
        font_display=config.font_display,
    )
    _write(css_path, css, handler)
    return GenerationResult(css_path=css_path, css=css, families=families, skipped=skipped)
