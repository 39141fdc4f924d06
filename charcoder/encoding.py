"""Per-character encoding details: UTF-8 bytes, UTF-16 code units and code points."""

from __future__ import annotations

import random
import struct
from collections.abc import Iterator
from dataclasses import dataclass

_MIN_CHANNEL = 150
_CHANNEL_SPAN = 106  # channels fall in 150..255, so colours stay light


@dataclass(frozen=True)
class EncodingInfo:
    """Encodings of one UTF-16 code unit and the colour used to show it."""

    utf8_hex: str
    utf16_hex: str
    unicode_hex: str
    color: str


def code_units(text: str) -> Iterator[str]:
    """Yield the text one UTF-16 code unit at a time.

    Characters outside the Basic Multilingual Plane come out as two
    surrogate characters.
    """
    data = text.encode("utf-16-le", "surrogatepass")
    for (unit,) in struct.iter_unpack("<H", data):
        yield chr(unit)


def _check_unit(ch: str) -> int:
    if len(ch) != 1 or ord(ch) > 0xFFFF:
        raise ValueError(f"expected a single UTF-16 code unit, got {ch!r}")
    return ord(ch)


def utf8_hex(ch: str) -> str:
    """Return the UTF-8 bytes of a code unit as space-separated upper-case hex.

    A lone surrogate cannot be encoded and is shown as a question mark.
    """
    _check_unit(ch)
    return ch.encode("utf-8", "replace").hex(" ").upper()


def utf16_hex(ch: str) -> str:
    """Return the UTF-16 code unit as four upper-case hex digits."""
    return f"{_check_unit(ch):04X}"


def unicode_hex(ch: str) -> str:
    """Return the code point value of a code unit as at least four hex digits."""
    return f"{_check_unit(ch):04X}"


def random_color(rng: random.Random | None = None) -> str:
    """Return a light background colour in the form ``rgb(r, g, b)``."""
    source = rng if rng is not None else random
    r, g, b = (_MIN_CHANNEL + source.randrange(_CHANNEL_SPAN) for _ in range(3))
    return f"rgb({r}, {g}, {b})"


def encode_char(ch: str, rng: random.Random | None = None) -> EncodingInfo:
    """Collect every encoding of a code unit together with a random colour."""
    return EncodingInfo(
        utf8_hex=utf8_hex(ch),
        utf16_hex=utf16_hex(ch),
        unicode_hex=unicode_hex(ch),
        color=random_color(rng),
    )


def describe(ch: str, info: EncodingInfo) -> str:
    """Return the multi-line summary shown when hovering over a character."""
    return (
        f"字符: {ch}\n"
        f"UTF-8: {info.utf8_hex}\n"
        f"UTF-16: {info.utf16_hex}\n"
        f"Unicode: U+{info.unicode_hex}"
    )