"""
core_file_collector: helpers to enumerate font files and family directories.

Features:
- Supports TTF, OTF, WOFF, WOFF2 by default (legacy mode: TTF only)
- Optional recursive directory scanning
- Case-insensitive extension matching
- Preserves filesystem listing order (style inference is last-wins on that order)
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Set


SUPPORTED_EXTENSIONS: Set[str] = {".ttf", ".otf", ".woff", ".woff2"}
LEGACY_EXTENSIONS: Set[str] = {".ttf"}


def _matches_extension(path: Path, allowed_extensions: Iterable[str]) -> bool:
    """Check if path has an allowed extension (case-insensitive)."""
    ext = path.suffix.lower()
    if not ext:
        return False
    return ext in {e.lower() for e in allowed_extensions}


def iter_font_files(
    directory: str | Path,
    recursive: bool = False,
    *,
    allowed_extensions: Optional[Iterable[str]] = None,
) -> Iterator[Path]:
    """Yield absolute font file paths under a directory in listing order.

    - directory: family directory to scan
    - recursive: descend into subdirectories
    - allowed_extensions: override supported extensions; compared case-insensitively

    OSError from listing propagates to the caller.
    """
    allowed = set(allowed_extensions or SUPPORTED_EXTENSIONS)
    base = Path(directory).expanduser()

    if recursive:

        def _raise(error: OSError) -> None:
            raise error

        for root, _dirs, files in os.walk(base, onerror=_raise):
            for filename in files:
                file_path = Path(root) / filename
                if _matches_extension(file_path, allowed):
                    yield file_path.absolute()
    else:
        for filename in os.listdir(base):
            file_path = base / filename
            if file_path.is_file() and _matches_extension(file_path, allowed):
                yield file_path.absolute()


def collect_font_files(
    directory: str | Path,
    recursive: bool = False,
    *,
    allowed_extensions: Optional[Iterable[str]] = None,
) -> List[Path]:
    """Collect font file paths from a family directory, in listing order."""
    return list(
        iter_font_files(
            directory, recursive=recursive, allowed_extensions=allowed_extensions
        )
    )


def list_family_directories(fonts_root: str | Path) -> List[Path]:
    """Immediate subdirectories of the fonts root, sorted by name."""
    root = Path(fonts_root).expanduser()
    return sorted(
        (entry for entry in root.iterdir() if entry.is_dir()),
        key=lambda p: p.name.lower(),
    )


__all__ = [
    "SUPPORTED_EXTENSIONS",
    "LEGACY_EXTENSIONS",
    "collect_font_files",
    "iter_font_files",
    "list_family_directories",
]
