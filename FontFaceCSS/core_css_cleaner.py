"""
core_css_cleaner: strip previously generated @theme and @font-face blocks.

Works on raw text through the comment markers written by
core_css_synthesizer; no CSS parsing. Passes, in order:

1. Every non-nested ``@theme { ... }`` block goes, whoever wrote it. Hand-written
   tokens placed inside the same block are lost with it.
2. Per family, the section opened by ``/* Custom @font-face rules for <family> */``
   up to the next marker or end of text, then any leftover ``@font-face`` rule
   whose font-family starts with ``<family>-`` (output of older versions that
   wrote no per-family markers). Faces of a longer family name that is
   also known ("inter-display" while cleaning "inter") are left alone. A
   face-block header with no section left behind it is dropped as well.
3. Runs of three or more newlines collapse to one blank line.

A block that fills whole lines is removed together with its own line break
and at most one blank line right above it; the lines around it are kept as
they were. A block sharing a line with other text loses only its own
characters. Cleaning freshly appended output therefore restores the earlier
text exactly when that text ended with a newline (otherwise one newline is
left behind). Text with nothing to remove comes back unchanged (apart from
pass 3).
"""

from __future__ import annotations

import re
from typing import Iterable, List

from FontFaceCSS.core_css_synthesizer import FACE_BLOCK_HEADER, family_marker
from FontFaceCSS.core_logging_config import get_logger

logger = get_logger(__name__)


def _whole_lines(body: str) -> str:
    """Pattern for body on its own lines (plus one blank line above), else body alone.

    Compile with re.MULTILINE.
    """
    return rf"^\n?{body}[ \t]*(?:\n|\Z)|{body}"


_THEME_BLOCK = re.compile(_whole_lines(r"@theme\s*\{[^{}]*\}"), re.MULTILINE)
_MARKER_PREFIX = re.escape("/* Custom @font-face rules")
_ORPHAN_HEADER = re.compile(
    r"^\n?"
    + re.escape(FACE_BLOCK_HEADER)
    + r"\s*(?="
    + re.escape(FACE_BLOCK_HEADER)
    + r"|\Z)",
    re.MULTILINE,
)
_LEGACY_SECTION = re.compile(
    r"^\n?" + re.escape(FACE_BLOCK_HEADER) + r"[\s\S]*\Z", re.MULTILINE
)
_FAMILY_MARKER = re.compile(re.escape("/* Custom @font-face rules for ") + r"(\S+) \*/")
_BLANK_RUN = re.compile(r"\n{3,}")


def _family_section_pattern(family_name: str) -> re.Pattern:
    return re.compile(
        re.escape(family_marker(family_name))
        + r"[\s\S]*?(?="
        + _MARKER_PREFIX
        + r"|\Z)"
    )


def _family_face_pattern(
    family_name: str, longer_names: Iterable[str] = ()
) -> re.Pattern:
    # "inter-" must not reach into the faces of a known "inter-display"
    suffixes = [
        re.escape(name[len(family_name) + 1 :]) + "-"
        for name in longer_names
        if name.lower().startswith(family_name.lower() + "-")
    ]
    guard = f"(?!{'|'.join(suffixes)})" if suffixes else ""
    body = (
        r"@font-face\s*\{[^{}]*?font-family:\s*[\"']?\s*"
        + re.escape(family_name)
        + "-"
        + guard
        + r"[^{}]*\}"
    )
    return re.compile(_whole_lines(body), re.IGNORECASE | re.MULTILINE)


def remove_theme_blocks(css: str) -> str:
    return _THEME_BLOCK.sub("", css)


def remove_family_sections(
    css: str, family_name: str, known_families: Iterable[str] = ()
) -> str:
    """Remove the marked section of one family, then its standalone @font-face rules.

    known_families protects families whose name extends family_name.
    """
    css = _family_section_pattern(family_name).sub("", css)
    return _family_face_pattern(family_name, known_families).sub("", css)


def remove_orphan_headers(css: str) -> str:
    """Drop face-block headers with no family section after them."""
    return _ORPHAN_HEADER.sub("", css)


def remove_legacy_section(css: str) -> str:
    """Drop everything from the face-block header on, when no family marker exists.

    Older versions wrote the header alone and kept all their rules below it.
    """
    if generated_family_names(css):
        return css
    return _LEGACY_SECTION.sub("", css, count=1)


def generated_family_names(css: str) -> List[str]:
    """Families that have a marker-delimited section in the text, in order of appearance."""
    names: List[str] = []
    for match in _FAMILY_MARKER.finditer(css):
        if match.group(1) not in names:
            names.append(match.group(1))
    return names


def collapse_blank_lines(css: str) -> str:
    return _BLANK_RUN.sub("\n\n", css)


def clean_css(css: str, family_names: Iterable[str]) -> str:
    """Remove generated blocks for the given families from stylesheet text."""
    original_length = len(css)
    names = list(family_names)
    known = generated_family_names(css) + names
    css = remove_theme_blocks(css)
    for name in names:
        css = remove_family_sections(css, name, known)
    css = remove_orphan_headers(css)
    css = collapse_blank_lines(css)
    logger.debug(f"Cleaned stylesheet: {original_length} -> {len(css)} characters")
    return css


def strip_generated(css: str, family_names: Iterable[str]) -> str:
    """Clean the given families plus every family already carrying a generated section.

    Used before appending fresh output so a run replaces the whole generated
    fragment instead of stacking a second face-block header. Output of older
    versions (a header without family markers) goes from the header on.
    """
    css = remove_legacy_section(css)
    names = list(family_names)
    names.extend(n for n in generated_family_names(css) if n not in names)
    return clean_css(css, names)
