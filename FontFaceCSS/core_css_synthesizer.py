"""
core_css_synthesizer: render @theme tokens, @font-face rules and utility classes.

Families render in the order given; styles within a family in sorted token
order (FamilyStyles keeps them sorted). Identical inputs give identical text.

Generated Tailwind output has this shape, appended after the existing CSS:

    @theme {
      /* inter */
      --font-inter-bold: "inter-bold", sans-serif;
    }

    /* Custom @font-face rules */
    /* Custom @font-face rules for inter */
    @font-face {
      font-family: "inter-bold";
      src: url("./Fonts/Inter/Inter-Bold.ttf") format("truetype");
      font-weight: 700;
      font-style: normal;
    }

The comment markers are the contract core_css_cleaner relies on to find and
remove a family's section again.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from FontFaceCSS.core_face_attributes import (
    FaceAttributes,
    FormatPolicy,
    derive_attributes,
)
from FontFaceCSS.core_generator_config import GENERATOR_CONFIG
from FontFaceCSS.core_path_resolver import relative_url
from FontFaceCSS.core_style_inference import FamilyStyles

FACE_BLOCK_HEADER = "/* Custom @font-face rules */"
FAMILY_MARKER_TEMPLATE = "/* Custom @font-face rules for {family} */"


def family_marker(family_name: str) -> str:
    return FAMILY_MARKER_TEMPLATE.format(family=family_name)


@dataclass(frozen=True)
class GeneratedCssFragment:
    theme: str
    faces: str

    def as_appendix(self) -> str:
        """Text appended to an existing stylesheet; the leading newline is owned by the fragment."""
        return f"\n{self.theme}\n{self.faces}"


def render_theme_block(
    families: Sequence[FamilyStyles],
    fallback: str = GENERATOR_CONFIG["fallback"],
    token_prefix: str = GENERATOR_CONFIG["token_prefix"],
) -> str:
    lines = ["@theme {"]
    for family_styles in families:
        lines.append(f"  /* {family_styles.family.name} */")
        for token in family_styles.styles:
            face = family_styles.face_family(token)
            lines.append(f'  {token_prefix}{face}: "{face}", {fallback};')
    lines.append("}")
    return "\n".join(lines) + "\n"


def render_face_rule(
    face_family: str,
    url: str,
    attributes: FaceAttributes,
    font_display: Optional[str] = None,
) -> List[str]:
    lines = [
        "@font-face {",
        f'  font-family: "{face_family}";',
        f'  src: url("{url}") format("{attributes.format}");',
        f"  font-weight: {attributes.font_weight};",
        f"  font-style: {attributes.font_style};",
    ]
    if attributes.variation_settings:
        lines.append(f"  font-variation-settings: {attributes.variation_settings};")
    if font_display:
        lines.append(f"  font-display: {font_display};")
    lines.append("}")
    return lines


def render_utility_class(
    face_family: str,
    attributes: FaceAttributes,
    fallback: str = GENERATOR_CONFIG["fallback"],
) -> List[str]:
    return [
        f".font-{face_family} {{",
        f'  font-family: "{face_family}", {fallback};',
        f"  font-weight: {attributes.class_weight};",
        f"  font-style: {attributes.font_style};",
        "}",
    ]


def render_face_block(
    families: Sequence[FamilyStyles],
    css_path: str | Path,
    *,
    format_policy: FormatPolicy = FormatPolicy.CANONICAL,
    with_classes: bool = False,
    with_markers: bool = True,
    fallback: str = GENERATOR_CONFIG["fallback"],
    font_display: Optional[str] = None,
) -> str:
    """@font-face rules (and optional utility classes) with URLs relative to css_path."""
    lines: List[str] = [FACE_BLOCK_HEADER] if with_markers else []
    for family_styles in families:
        if with_markers:
            lines.append(family_marker(family_styles.family.name))
        for token, font_file in family_styles.styles.items():
            face = family_styles.face_family(token)
            attributes = derive_attributes(token, font_file.absolute_path, format_policy)
            url = relative_url(css_path, font_file.absolute_path)
            lines.extend(render_face_rule(face, url, attributes, font_display))
            lines.append("")
            if with_classes:
                lines.extend(render_utility_class(face, attributes, fallback))
                lines.append("")
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def synthesize_tailwind(
    families: Sequence[FamilyStyles],
    css_path: str | Path,
    *,
    format_policy: FormatPolicy = FormatPolicy.CANONICAL,
    fallback: str = GENERATOR_CONFIG["fallback"],
    token_prefix: str = GENERATOR_CONFIG["token_prefix"],
    font_display: Optional[str] = None,
) -> GeneratedCssFragment:
    return GeneratedCssFragment(
        theme=render_theme_block(families, fallback, token_prefix),
        faces=render_face_block(
            families,
            css_path,
            format_policy=format_policy,
            fallback=fallback,
            font_display=font_display,
        ),
    )


def synthesize_standard(
    families: Sequence[FamilyStyles],
    css_path: str | Path,
    *,
    format_policy: FormatPolicy = FormatPolicy.CANONICAL,
    fallback: str = GENERATOR_CONFIG["fallback"],
    font_display: Optional[str] = None,
) -> str:
    """Whole Standard CSS document: @font-face rules each followed by its utility class."""
    return render_face_block(
        families,
        css_path,
        format_policy=format_policy,
        with_classes=True,
        with_markers=False,
        fallback=fallback,
        font_display=font_display,
    )
