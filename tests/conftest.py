import logging
from pathlib import Path
from typing import Iterable

import pytest

from FontFaceCSS.core_logging_config import reset_logging

TAILWIND_PRELUDE = '@import "tailwindcss";\n\nbody {\n  margin: 0;\n}\n'


def make_family(fonts_root: Path, directory: str, filenames: Iterable[str]) -> Path:
    """Create a family directory holding empty files with the given names."""
    family_dir = fonts_root / directory
    family_dir.mkdir(parents=True, exist_ok=True)
    for filename in filenames:
        target = family_dir / filename
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(b"")
    return family_dir


@pytest.fixture(autouse=True)
def fresh_logging():
    """Undo setup_logging() between tests; it reconfigures the root logger."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    reset_logging()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Project root with src/Fonts and a Tailwind stylesheet at src/app.css."""
    fonts_root = tmp_path / "src" / "Fonts"
    fonts_root.mkdir(parents=True)
    (tmp_path / "src" / "app.css").write_text(TAILWIND_PRELUDE, encoding="utf-8")
    return tmp_path


@pytest.fixture
def fonts_root(project: Path) -> Path:
    return project / "src" / "Fonts"


@pytest.fixture
def inter_dir(fonts_root: Path) -> Path:
    return make_family(
        fonts_root,
        "Inter",
        ["Inter-Bold.ttf", "Inter-Regular.ttf", "Inter-Italic.woff2", "README.txt"],
    )
