"""Tests for removing generated blocks from stylesheet text."""

from pathlib import Path
from typing import List

import pytest

from FontFaceCSS.core_css_cleaner import (
    clean_css,
    collapse_blank_lines,
    generated_family_names,
    remove_orphan_headers,
    remove_theme_blocks,
    strip_generated,
)
from FontFaceCSS.core_css_synthesizer import FACE_BLOCK_HEADER, synthesize_tailwind
from FontFaceCSS.core_style_inference import FamilyStyles, FontFamily, infer_styles
from tests.conftest import TAILWIND_PRELUDE

LEGACY_OUTPUT = """@import "tailwindcss";

@theme {
  --font-inter-bold: "inter-bold", sans-serif;
}

/* Custom @font-face rules */
@font-face {
  font-family: "inter-bold";
  src: url("./Fonts/Inter/Inter-Bold.ttf") format("ttf");
  font-weight: 700;
  font-style: normal;
}

@font-face {
  font-family: "roboto-bold";
  src: url("./Fonts/Roboto/Roboto-Bold.ttf") format("ttf");
  font-weight: 700;
  font-style: normal;
}
"""


def _family(root: Path, directory: str, filenames: List[str]) -> FamilyStyles:
    family = FontFamily.from_directory(root / "Fonts" / directory)
    files = [family.source_directory / name for name in filenames]
    return FamilyStyles(family, infer_styles(family, files))


@pytest.fixture
def root(tmp_path: Path) -> Path:
    return tmp_path.resolve()


@pytest.fixture
def appendix(root: Path) -> str:
    families = [
        _family(root, "Inter", ["Inter-Bold.ttf", "Inter-Regular.ttf"]),
        _family(root, "Roboto", ["Roboto-Italic.woff2"]),
    ]
    return synthesize_tailwind(families, root / "app.css").as_appendix()


def test_cleaning_appended_output_restores_original(appendix: str) -> None:
    assert clean_css(TAILWIND_PRELUDE + appendix, ["inter", "roboto"]) == TAILWIND_PRELUDE


def test_cleaning_one_family_keeps_the_other(appendix: str) -> None:
    css = clean_css(TAILWIND_PRELUDE + appendix, ["inter"])

    assert "@theme" not in css
    assert "inter-bold" not in css
    assert "/* Custom @font-face rules for roboto */" in css
    assert FACE_BLOCK_HEADER in css
    assert 'font-family: "roboto-italic";' in css


def test_cleaning_absent_family_changes_nothing_but_theme(appendix: str) -> None:
    css = clean_css(TAILWIND_PRELUDE + appendix, ["lato"])
    assert generated_family_names(css) == ["inter", "roboto"]


def test_unrelated_text_is_preserved() -> None:
    css = ".btn {\n  color: red;\n}\n\n@media (min-width: 640px) {\n  .btn { color: blue; }\n}\n"
    assert clean_css(css, ["inter"]) == css


def test_strip_generated_is_idempotent(appendix: str) -> None:
    once = strip_generated(TAILWIND_PRELUDE + appendix, []) + appendix
    twice = strip_generated(once, []) + appendix
    assert once == twice == TAILWIND_PRELUDE + appendix


def test_strip_generated_finds_marked_families(appendix: str) -> None:
    assert generated_family_names(TAILWIND_PRELUDE + appendix) == ["inter", "roboto"]
    assert strip_generated(TAILWIND_PRELUDE + appendix, []) == TAILWIND_PRELUDE


def test_prefix_sharing_family_survives(root: Path) -> None:
    families = [
        _family(root, "Inter", ["Inter-Bold.ttf"]),
        _family(root, "Inter Display", ["Inter-Display-Bold.ttf"]),
    ]
    css = TAILWIND_PRELUDE + synthesize_tailwind(families, root / "app.css").as_appendix()

    cleaned = clean_css(css, ["inter"])
    assert 'font-family: "inter-display-bold";' in cleaned
    assert 'font-family: "inter-bold";' not in cleaned


def test_legacy_rules_without_markers() -> None:
    css = clean_css(LEGACY_OUTPUT, ["inter"])

    assert "inter-bold" not in css
    assert "roboto-bold" in css
    assert FACE_BLOCK_HEADER in css

    assert clean_css(css, ["roboto"]) == '@import "tailwindcss";\n'


def test_bare_rules_removed_next_to_marked_sections(appendix: str) -> None:
    bare = '@font-face {\n  font-family: "lato-bold";\n  src: url("./Lato-Bold.ttf");\n}\n'
    css = clean_css(TAILWIND_PRELUDE + bare + appendix, ["lato"])

    assert "lato-bold" not in css
    assert generated_family_names(css) == ["inter", "roboto"]


def test_remove_theme_blocks_leaves_nested_braces() -> None:
    nested = "@theme {\n  @keyframes x { to { opacity: 1; } }\n}\n"
    assert remove_theme_blocks(nested) == nested
    assert remove_theme_blocks("a {}\n\n@theme {\n  --x: 1;\n}\n") == "a {}\n"


def test_orphan_header_dropped() -> None:
    css = "a {}\n\n" + FACE_BLOCK_HEADER + "\n"
    assert remove_orphan_headers(css) == "a {}\n"

    kept = FACE_BLOCK_HEADER + "\n/* Custom @font-face rules for inter */\n"
    assert remove_orphan_headers(kept) == kept


def test_collapse_blank_lines() -> None:
    assert collapse_blank_lines("a\n\n\n\nb\n") == "a\n\nb\n"
    assert collapse_blank_lines("a\n\nb") == "a\n\nb"


def test_removed_theme_keeps_surrounding_lines_apart() -> None:
    css = "a {}\n@theme {\n  --color-x: red;\n}\nb {}\n"
    assert clean_css(css, ["inter"]) == "a {}\nb {}\n"


def test_removed_bare_rule_keeps_surrounding_lines_apart() -> None:
    css = 'a {}\n@font-face {\n  font-family: "inter-bold";\n  src: url("./Inter-Bold.ttf");\n}\nb {}\n'
    assert clean_css(css, ["inter"]) == "a {}\nb {}\n"


def test_theme_block_removal_follows_its_line() -> None:
    assert remove_theme_blocks("a {} @theme { --x: 1; } b {}\n") == "a {}  b {}\n"
    assert remove_theme_blocks("@theme{--x:1;}\nb {}\n") == "b {}\n"


def test_strip_generated_drops_legacy_section() -> None:
    assert strip_generated(LEGACY_OUTPUT, ["inter"]) == '@import "tailwindcss";\n'


def test_adding_over_legacy_output_keeps_one_header(appendix: str) -> None:
    css = strip_generated(LEGACY_OUTPUT, ["inter", "roboto"]) + appendix

    assert css.count(FACE_BLOCK_HEADER) == 1
    assert "roboto-bold" not in css
    assert generated_family_names(css) == ["inter", "roboto"]
