"""Tests for @font-face attribute derivation."""

import pytest

from FontFaceCSS.core_face_attributes import (
    VARIABLE_WEIGHT_RANGE,
    FormatPolicy,
    derive_attributes,
    derive_format,
    derive_style,
    derive_weight,
    is_variable,
)


@pytest.mark.parametrize(
    "token, weight",
    [
        ("bold", "700"),
        ("semibold", "700"),
        ("bold-medium", "700"),
        ("medium-italic", "500"),
        ("regular", "400"),
        ("light", "400"),
        ("black", "400"),
    ],
)
def test_derive_weight(token: str, weight: str) -> None:
    assert derive_weight(token) == weight


def test_derive_style() -> None:
    assert derive_style("bold-italic") == "italic"
    assert derive_style("Italic") == "italic"
    assert derive_style("oblique") == "normal"


def test_is_variable() -> None:
    assert is_variable("variable")
    assert is_variable("variablefont-wght")
    assert not is_variable("bold")


@pytest.mark.parametrize(
    "filename, canonical, extension",
    [
        ("Inter-Bold.ttf", "truetype", "ttf"),
        ("Inter-Bold.OTF", "opentype", "otf"),
        ("Inter-Bold.woff", "woff", "woff"),
        ("Inter-Bold.woff2", "woff2", "woff2"),
    ],
)
def test_derive_format(filename: str, canonical: str, extension: str) -> None:
    assert derive_format(filename) == canonical
    assert derive_format(filename, FormatPolicy.CANONICAL) == canonical
    assert derive_format(filename, FormatPolicy.EXTENSION) == extension


def test_static_face_attributes() -> None:
    attrs = derive_attributes("bold-italic", "Inter-Bold_Italic.woff2")

    assert attrs.font_weight == "700"
    assert attrs.font_style == "italic"
    assert attrs.format == "woff2"
    assert not attrs.is_variable
    assert attrs.variation_settings is None
    assert attrs.class_weight == "700"


def test_variable_face_attributes() -> None:
    attrs = derive_attributes("variable-bold-italic", "Inter-Variable.ttf", FormatPolicy.EXTENSION)

    assert attrs.is_variable
    assert attrs.font_weight == VARIABLE_WEIGHT_RANGE == "100 900"
    assert attrs.font_style == "normal"
    assert attrs.variation_settings == '"wght" 400'
    assert attrs.class_weight == "400"
    assert attrs.format == "ttf"
