"""
core_path_resolver: relative URLs and project-root path handling.

Examples (doctests):
>>> relative_url("/proj/src/app.css", "/proj/src/Fonts/Inter/Inter-Bold.ttf")
'./Fonts/Inter/Inter-Bold.ttf'
>>> relative_url("/proj/fonts.css", "/proj/src/Fonts/Inter/Inter-Bold.ttf")
'./src/Fonts/Inter/Inter-Bold.ttf'
>>> relative_url("/proj/css/app.css", "/proj/Fonts/Inter-Bold.ttf")
'../Fonts/Inter-Bold.ttf'
"""

from __future__ import annotations

import os
from pathlib import Path

from FontFaceCSS.core_error_handling import PathValidationError


def relative_url(from_file: str | Path, to_file: str | Path) -> str:
    """URL of to_file as seen from the directory holding from_file.

    Always starts with "./" or "../".
    """
    rel = os.path.relpath(str(to_file), os.path.dirname(str(from_file)))
    rel = rel.replace("\\", "/")
    return rel if rel.startswith(".") else f"./{rel}"


def resolve_project_path(project_root: str | Path, value: str | Path) -> Path:
    """Join a user-supplied path onto the project root; absolute values pass through."""
    path = Path(value).expanduser()
    if path.is_absolute():
        return path
    return Path(project_root) / path


def validate_directory(path: str | Path) -> Path:
    path = Path(path)
    if not path.is_dir():
        raise PathValidationError(path, "directory")
    return path


def validate_file(path: str | Path) -> Path:
    path = Path(path)
    if not path.is_file():
        raise PathValidationError(path, "file")
    return path
