import string

import pytest

from chuvalerta.font import glyph


def test_uppercase_a_columns():
    assert glyph("A") == bytes([0x7C, 0x7E, 0x13, 0x11, 0x13, 0x7E, 0x7C, 0x00])


def test_tilde_is_last_glyph():
    assert glyph("~") == bytes([0x02, 0x03, 0x01, 0x03, 0x02, 0x03, 0x01, 0x00])


def test_space_is_blank():
    assert glyph(" ") == bytes(8)


@pytest.mark.parametrize("char", ["\n", "\x7f", "é", "\x00"])
def test_unprintable_falls_back_to_space(char):
    assert glyph(char) == glyph(" ")


def test_every_printable_glyph_has_eight_columns():
    for char in map(chr, range(ord(" "), ord("~") + 1)):
        assert len(glyph(char)) == 8


def test_digits_are_distinct():
    shapes = {glyph(d) for d in string.digits}
    assert len(shapes) == len(string.digits)


def test_percent_sign():
    assert glyph("%") == bytes([0x46, 0x66, 0x30, 0x18, 0x0C, 0x66, 0x62, 0x00])


@pytest.mark.parametrize("bad", ["", "ab"])
def test_rejects_non_single_character(bad):
    with pytest.raises(ValueError):
        glyph(bad)