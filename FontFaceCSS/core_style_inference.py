"""
core_style_inference: derive style tokens from font filenames within a family.

A family is one subdirectory of the fonts root. Each font file in it maps to a
style token: the base filename with the leading family segment(s) removed,
hyphen-joined, lower-cased, underscores turned into hyphens.

Family prefix precedence (first match wins):
1. The leading hyphen-separated segments equal the family name
   ("open-sans" strips "Open-Sans-Bold" down to "bold").
2. The first segment equals the family name without hyphens
   ("open-sans" strips "OpenSans-Bold" down to "bold").
3. Otherwise the whole base name is the token ("Roboto-Bold" under "inter"
   becomes "roboto-bold").

A file whose token ends up empty ("Inter.ttf") has no style and is dropped.
"regular" is an ordinary token and is kept.

Two files yielding the same token collide: the file enumerated later wins.
Enumeration follows filesystem listing order, which differs across platforms.

Examples (doctests):
>>> style_token("inter", "Inter-Bold")
'bold'
>>> style_token("inter", "Inter-Bold_Italic")
'bold-italic'
>>> style_token("open-sans", "OpenSans-SemiBold")
'semibold'
>>> style_token("open-sans", "Open-Sans-Italic")
'italic'
>>> style_token("inter", "Roboto-Bold")
'roboto-bold'
>>> style_token("inter", "Inter")
''
>>> style_token("inter", "Inter-Regular")
'regular'
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from FontFaceCSS.core_error_handling import (
    EmptyFamilyWarning,
    ErrorContext,
    ErrorTracker,
)
from FontFaceCSS.core_file_collector import SUPPORTED_EXTENSIONS, collect_font_files
from FontFaceCSS.core_logging_config import get_logger
from FontFaceCSS.core_string_utils import css_identifier, family_slug, join_nonempty

logger = get_logger(__name__)


@dataclass(frozen=True)
class FontFamily:
    name: str
    source_directory: Path

    @classmethod
    def from_directory(cls, directory: str | Path) -> "FontFamily":
        directory = Path(directory)
        return cls(name=family_slug(directory.name), source_directory=directory)


@dataclass(frozen=True)
class FontFile:
    absolute_path: Path
    extension: str
    base_name: str

    @classmethod
    def from_path(cls, path: str | Path) -> "FontFile":
        path = Path(path).absolute()
        return cls(
            absolute_path=path,
            extension=path.suffix.lower().lstrip("."),
            base_name=path.stem,
        )


@dataclass
class FamilyStyles:
    """Style token -> chosen font file for one family, sorted by token."""

    family: FontFamily
    styles: Dict[str, FontFile] = field(default_factory=dict)

    @property
    def tokens(self) -> List[str]:
        return list(self.styles)

    def face_family(self, token: str) -> str:
        return join_nonempty(self.family.name, token)


def _strip_family_prefix(family_name: str, segments: List[str]) -> List[str]:
    family_segments = family_name.lower().split("-")
    count = len(family_segments)
    if len(segments) >= count and "-".join(segments[:count]).lower() == family_name.lower():
        return segments[count:]
    if segments and segments[0].lower() == family_name.lower().replace("-", ""):
        return segments[1:]
    return segments


def style_token(family_name: str, base_name: str) -> str:
    """Style token of a base filename within a family; '' when no style remains."""
    remainder = _strip_family_prefix(family_name, base_name.split("-"))
    return css_identifier("-".join(remainder))


def infer_styles(
    family: FontFamily, files: Iterable[str | Path | FontFile]
) -> Dict[str, FontFile]:
    """Map style token -> font file, last-wins on collision, sorted by token."""
    styles: Dict[str, FontFile] = {}
    for item in files:
        font_file = item if isinstance(item, FontFile) else FontFile.from_path(item)
        token = style_token(family.name, font_file.base_name)
        if not token:
            logger.debug(f"[{family.name}] no style in {font_file.absolute_path.name}")
            continue
        if token in styles:
            logger.debug(
                f"[{family.name}] '{token}': {font_file.absolute_path.name} "
                f"replaces {styles[token].absolute_path.name}"
            )
        styles[token] = font_file
    return dict(sorted(styles.items()))


def scan_family(
    family: FontFamily,
    *,
    recursive: bool = False,
    extensions: Optional[Iterable[str]] = None,
    tracker: Optional[ErrorTracker] = None,
) -> Optional[FamilyStyles]:
    """Collect and infer the styles of one family directory.

    Returns None (after recording an EmptyFamilyWarning) when the directory
    holds no qualifying font files or none of them carries a style.
    """
    files = collect_font_files(
        family.source_directory,
        recursive=recursive,
        allowed_extensions=extensions or SUPPORTED_EXTENSIONS,
    )
    styles = infer_styles(family, files) if files else {}
    if not styles:
        warning = EmptyFamilyWarning(family.name, family.source_directory)
        if tracker is not None:
            tracker.add_from_exception(
                ErrorContext.FAMILY_SCAN,
                warning,
                filepath=str(family.source_directory),
            )
        else:
            logger.warning(str(warning))
        return None
    return FamilyStyles(family=family, styles=styles)
