"""Tests for the built-in glyph table."""

import pytest

from pixoo.fonts import FONT_HEIGHT, FONT_WIDTH, GLYPHS, Glyph


def test_all_glyphs_are_3x5_bitmaps():
    for char, glyph in GLYPHS.items():
        assert glyph.width == FONT_WIDTH, char
        assert glyph.height == FONT_HEIGHT, char
        assert len(glyph.cells) == FONT_WIDTH * FONT_HEIGHT, char
        assert set(glyph.cells) <= {0, 1}, char


def test_digits_and_uppercase_letters_present():
    for char in "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ ":
        assert char in GLYPHS


def test_space_is_blank():
    assert list(GLYPHS[" "].lit_cells()) == []


def test_glyph_table_is_read_only():
    with pytest.raises(TypeError):
        GLYPHS["a"] = GLYPHS["A"]


def test_lit_cells_are_row_major():
    glyph = Glyph(width=2, height=2, cells=(0, 1, 1, 0))
    assert list(glyph.lit_cells()) == [(1, 0), (0, 1)]


def test_glyph_rejects_wrong_cell_count():
    with pytest.raises(ValueError):
        Glyph(width=3, height=5, cells=(1, 0, 1))
