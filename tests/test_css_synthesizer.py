"""Tests for @theme, @font-face and utility class rendering."""

from pathlib import Path
from typing import List

import pytest

from FontFaceCSS.core_css_synthesizer import (
    FACE_BLOCK_HEADER,
    family_marker,
    render_face_block,
    render_theme_block,
    synthesize_standard,
    synthesize_tailwind,
)
from FontFaceCSS.core_face_attributes import FormatPolicy
from FontFaceCSS.core_style_inference import FamilyStyles, FontFamily, infer_styles


def _family(root: Path, directory: str, filenames: List[str]) -> FamilyStyles:
    family = FontFamily.from_directory(root / "src" / "Fonts" / directory)
    files = [family.source_directory / name for name in filenames]
    return FamilyStyles(family, infer_styles(family, files))


@pytest.fixture
def root(tmp_path: Path) -> Path:
    return tmp_path.resolve()


@pytest.fixture
def inter(root: Path) -> FamilyStyles:
    return _family(root, "Inter", ["Inter-Regular.ttf", "Inter-Bold.ttf"])


def test_theme_block(inter: FamilyStyles) -> None:
    assert render_theme_block([inter]) == (
        "@theme {\n"
        "  /* inter */\n"
        '  --font-inter-bold: "inter-bold", sans-serif;\n'
        '  --font-inter-regular: "inter-regular", sans-serif;\n'
        "}\n"
    )


def test_theme_block_fallback_and_prefix(inter: FamilyStyles) -> None:
    theme = render_theme_block([inter], fallback="serif", token_prefix="--type-")
    assert '  --type-inter-bold: "inter-bold", serif;' in theme


def test_tailwind_fragment(root: Path, inter: FamilyStyles) -> None:
    fragment = synthesize_tailwind([inter], root / "src" / "app.css")

    assert fragment.faces == (
        "/* Custom @font-face rules */\n"
        "/* Custom @font-face rules for inter */\n"
        "@font-face {\n"
        '  font-family: "inter-bold";\n'
        '  src: url("./Fonts/Inter/Inter-Bold.ttf") format("truetype");\n'
        "  font-weight: 700;\n"
        "  font-style: normal;\n"
        "}\n"
        "\n"
        "@font-face {\n"
        '  font-family: "inter-regular";\n'
        '  src: url("./Fonts/Inter/Inter-Regular.ttf") format("truetype");\n'
        "  font-weight: 400;\n"
        "  font-style: normal;\n"
        "}\n"
        "\n"
    )
    assert fragment.as_appendix() == "\n" + fragment.theme + "\n" + fragment.faces


def test_families_keep_given_order(root: Path, inter: FamilyStyles) -> None:
    roboto = _family(root, "Roboto", ["Roboto-Italic.otf"])
    fragment = synthesize_tailwind([roboto, inter], root / "src" / "app.css")

    assert fragment.theme.index("/* roboto */") < fragment.theme.index("/* inter */")
    assert fragment.faces.index(family_marker("roboto")) < fragment.faces.index(
        family_marker("inter")
    )
    assert fragment.faces.count(FACE_BLOCK_HEADER) == 1


def test_extension_format_policy(root: Path) -> None:
    family = _family(root, "Inter", ["Inter-Bold.otf"])
    faces = render_face_block(
        [family], root / "src" / "app.css", format_policy=FormatPolicy.EXTENSION
    )
    assert 'format("otf")' in faces


def test_variable_face(root: Path) -> None:
    family = _family(root, "Inter", ["Inter-Variable.woff2"])
    faces = render_face_block([family], root / "src" / "app.css")

    assert "  font-weight: 100 900;\n" in faces
    assert "  font-style: normal;\n" in faces
    assert '  font-variation-settings: "wght" 400;\n' in faces


def test_font_display(root: Path, inter: FamilyStyles) -> None:
    faces = render_face_block([inter], root / "src" / "app.css", font_display="swap")
    assert faces.count("  font-display: swap;\n") == 2

    assert "font-display" not in render_face_block([inter], root / "src" / "app.css")


def test_standard_document(root: Path) -> None:
    family = _family(root, "Inter", ["Inter-Bold_Italic.woff2"])
    css = synthesize_standard([family], root / "fonts.css")

    assert css == (
        "@font-face {\n"
        '  font-family: "inter-bold-italic";\n'
        '  src: url("./src/Fonts/Inter/Inter-Bold_Italic.woff2") format("woff2");\n'
        "  font-weight: 700;\n"
        "  font-style: italic;\n"
        "}\n"
        "\n"
        ".font-inter-bold-italic {\n"
        '  font-family: "inter-bold-italic", sans-serif;\n'
        "  font-weight: 700;\n"
        "  font-style: italic;\n"
        "}\n"
        "\n"
    )


def test_standard_variable_class_uses_single_weight(root: Path) -> None:
    family = _family(root, "Inter", ["Inter-Variable.ttf"])
    css = synthesize_standard([family], root / "fonts.css")

    rule, utility = css.split(".font-inter-variable {")
    assert "font-weight: 100 900;" in rule
    assert "font-weight: 400;" in utility
    assert FACE_BLOCK_HEADER not in css


def test_no_families_renders_nothing(root: Path) -> None:
    assert synthesize_standard([], root / "fonts.css") == ""
    assert render_theme_block([]) == "@theme {\n}\n"


def test_output_is_deterministic(root: Path, inter: FamilyStyles) -> None:
    first = synthesize_tailwind([inter], root / "src" / "app.css")
    second = synthesize_tailwind([inter], root / "src" / "app.css")
    assert first == second
