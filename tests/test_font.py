import pytest

from dinoladder.font import FONT_HEIGHT, FONT_WIDTH, glyph


def test_space_is_blank():
    assert glyph(" ") == bytes(5)


def test_letter_a():
    assert glyph("A") == bytes((0x7E, 0x11, 0x11, 0x11, 0x7E))


def test_exclamation():
    assert glyph("!") == bytes((0x00, 0x00, 0x5F, 0x00, 0x00))


def test_last_glyph_is_left_arrow():
    assert glyph("\x7f") == bytes((0x08, 0x1C, 0x2A, 0x08, 0x08))


def test_every_glyph_fits_the_cell():
    for code in range(0x20, 0x80):
        columns = glyph(chr(code))
        assert len(columns) == FONT_WIDTH
        assert all(column < (1 << FONT_HEIGHT) for column in columns)


@pytest.mark.parametrize("char", ["\x1f", "\x80", "\n", "é"])
def test_out_of_range_raises(char):
    with pytest.raises(ValueError):
        glyph(char)


@pytest.mark.parametrize("text", ["", "AB"])
def test_not_single_character_raises(text):
    with pytest.raises(ValueError):
        glyph(text)