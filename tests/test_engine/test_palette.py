"""Tests for palettes."""

import pytest

from pentagrid.engine.errors import TilingError
from pentagrid.engine.palette import DEFAULT_PALETTE, get_palette, next_palette


def test_default_palette_colours():
    palette = get_palette(DEFAULT_PALETTE)
    assert palette.fill("thick") == "#ee964b"
    assert palette.fill("thin") == "#f4d35e"


def test_accent_palette_cycles_by_color_key():
    palette = get_palette("spectrum")
    assert palette.fill("thick", 0) == palette.accents[0]
    assert palette.fill("thin", len(palette.accents) + 2) == palette.accents[2]


def test_next_palette_wraps():
    assert next_palette("spectrum") == "sunset"


def test_unknown_palette():
    with pytest.raises(TilingError):
        get_palette("neon")
