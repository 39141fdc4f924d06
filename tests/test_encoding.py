import random
import re

import pytest

from charcoder.encoding import (
    EncodingInfo,
    code_units,
    describe,
    encode_char,
    random_color,
    unicode_hex,
    utf16_hex,
    utf8_hex,
)

COLOR_RE = re.compile(r"^rgb\((\d+), (\d+), (\d+)\)$")


def _channels(color):
    match = COLOR_RE.match(color)
    assert match is not None, color
    return tuple(int(value) for value in match.groups())


def test_utf8_hex_of_cjk_character():
    assert utf8_hex("中") == "E4 B8 AD"


def test_utf16_hex_is_padded_upper_case():
    assert utf16_hex("\n") == "000A"


def test_unicode_hex_matches_utf16_for_bmp():
    assert unicode_hex("中") == utf16_hex("中")


@pytest.mark.parametrize("ch", ["A", "é", "中", "€", "\u00a0", "ﬀ"])
def test_utf8_hex_round_trips(ch):
    assert bytes.fromhex(utf8_hex(ch)).decode("utf-8") == ch


@pytest.mark.parametrize("ch", ["A", "é", "中", "€", "\uffff"])
def test_utf16_hex_round_trips(ch):
    text = utf16_hex(ch)
    assert len(text) == 4
    assert text == text.upper()
    assert chr(int(text, 16)) == ch


def test_utf8_hex_groups_bytes_in_pairs():
    groups = utf8_hex("€").split(" ")
    assert all(len(group) == 2 for group in groups)
    assert len(groups) == len("€".encode("utf-8"))


def test_lone_surrogate_utf8_is_question_mark():
    assert bytes.fromhex(utf8_hex("\ud83d")) == b"?"


def test_code_units_splits_astral_characters():
    units = list(code_units("a😀"))
    assert len(units) == 3
    assert units[0] == "a"
    assert "".join(units).encode("utf-16-le", "surrogatepass").decode("utf-16-le") == "a😀"


def test_code_units_of_bmp_text_is_identity():
    text = "Hello, 世界"
    assert "".join(code_units(text)) == text


def test_code_units_empty():
    assert list(code_units("")) == []


@pytest.mark.parametrize("bad", ["", "ab", "😀"])
def test_rejects_non_code_units(bad):
    with pytest.raises(ValueError):
        utf8_hex(bad)
    with pytest.raises(ValueError):
        utf16_hex(bad)
    with pytest.raises(ValueError):
        unicode_hex(bad)


def test_random_color_channels_are_light():
    rng = random.Random(1)
    for _ in range(500):
        assert all(150 <= value <= 255 for value in _channels(random_color(rng)))


def test_random_color_is_reproducible_with_seed():
    first_rng = random.Random(7)
    second_rng = random.Random(7)
    first = [random_color(first_rng) for _ in range(20)]
    second = [random_color(second_rng) for _ in range(20)]
    assert first == second
    for color in first:
        assert all(150 <= value <= 255 for value in _channels(color))


def test_random_color_without_rng_is_well_formed():
    channels = _channels(random_color())
    assert len(channels) == 3
    assert all(150 <= value <= 255 for value in channels)


def test_encode_char_collects_all_encodings():
    info = encode_char("中", random.Random(3))
    assert info.utf8_hex == "E4 B8 AD"
    assert info.utf16_hex == "4E2D"
    assert info.unicode_hex == "4E2D"
    assert all(150 <= value <= 255 for value in _channels(info.color))


def test_encoding_info_is_immutable():
    info = encode_char("x", random.Random(0))
    before = info.color
    with pytest.raises(AttributeError):
        info.color = "red"
    assert info.color == before
    assert info.color != "red"
    assert info.utf8_hex == "78"


def test_describe_lists_every_field():
    info = EncodingInfo(utf8_hex="41", utf16_hex="0041", unicode_hex="0041", color="rgb(200, 200, 200)")
    lines = describe("A", info).split("\n")
    assert lines == ["字符: A", "UTF-8: 41", "UTF-16: 0041", "Unicode: U+0041"]