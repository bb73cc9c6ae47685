"""
Fast fixed-width UTF-8 decoding for numeral text.

Every numeral character in the vocabulary is three bytes long in UTF-8:

    byte 1: 1110 xxxx
    byte 2: 10xx xxxx
    byte 3: 10xx xxxx

decode_kanji() assumes that layout and builds the code point with masks
only. If the bytes do not follow the layout the mismatching marker bits end
up above bit 24, so the forged code point can never equal a real character.
Callers must therefore check the result against the value table (or an
explicit set of characters) before trusting it, and call unexpected_rune()
to find out what really is at that position.
"""

from __future__ import annotations

from .exceptions import EncodingError, KanjiNumberError, UnexpectedRuneError

KANJI_BYTES = 3

_REPLACEMENT_CHARACTER = "\ufffd"


def to_bytes(text: str | bytes) -> bytes:
    """Return the UTF-8 bytes of the input.

    Lone surrogates are kept (and later reported as EncodingError) instead of
    failing here.
    """
    if isinstance(text, str):
        return text.encode("utf-8", "surrogatepass")
    return bytes(text)


def decode_kanji(data: bytes, i: int) -> int:
    """Forge the code point of the 3-byte character starting at data[i]."""
    byte1 = data[i]
    byte2 = data[i + 1]
    byte3 = data[i + 2]
    validation = (
        (byte1 & 0b1111_0000) | ((byte2 & 0b1100_0000) >> 4) | ((byte3 & 0b1100_0000) >> 6)
    ) ^ 0b1110_1010
    return (
        (byte3 & 0b0011_1111)
        | ((byte2 & 0b0011_1111) << 6)
        | ((byte1 & 0b0000_1111) << 12)
        | (validation << 24)
    )


def decode_rune(data: bytes, i: int) -> str | None:
    """Strictly decode the character starting at data[i], None if malformed."""
    for width in range(1, 5):
        chunk = data[i : i + width]
        if len(chunk) < width:
            break
        try:
            decoded = chunk.decode("utf-8")
        except UnicodeDecodeError:
            continue
        return decoded[0]
    return None


def unexpected_rune(data: bytes, i: int) -> KanjiNumberError:
    """Classify the character at data[i] after the fast path rejected it."""
    rune = decode_rune(data, i)
    if rune is None or rune == _REPLACEMENT_CHARACTER:
        return EncodingError(details={"offset": i})
    return UnexpectedRuneError(rune)
