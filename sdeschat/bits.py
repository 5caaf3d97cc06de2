"""Conversions between integers, characters and bit tuples."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

Bits = tuple[int, ...]


def int_to_bits(number: int, size: int) -> Bits:
    """Return the low ``size`` bits of ``number``, most significant first."""
    if number < 0:
        raise ValueError("number must not be negative")
    if size < 0:
        raise ValueError("size must not be negative")
    return tuple((number >> shift) & 1 for shift in reversed(range(size)))


def char_to_bits(char: str | int) -> Bits:
    """Return the 8 bits of a single-byte character."""
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError("expected exactly one character")
        code = ord(char)
    else:
        code = char
    if not 0 <= code <= 0xFF:
        raise ValueError(f"character code {code} does not fit in one byte")
    return int_to_bits(code, 8)


def bits_to_char(bits: Sequence[int]) -> str:
    """Assemble 8 bits, most significant first, into a character."""
    if len(bits) != 8:
        raise ValueError(f"expected 8 bits, got {len(bits)}")
    code = 0
    for bit in bits:
        if bit not in (0, 1):
            raise ValueError("bits must be 0 or 1")
        code = (code << 1) | bit
    return chr(code)


def bits_to_str(bits: Iterable[int]) -> str:
    """Render bits as a string of '0' and '1' characters."""
    text = []
    for bit in bits:
        if bit not in (0, 1):
            raise ValueError("bits must be 0 or 1")
        text.append("1" if bit else "0")
    return "".join(text)


def str_to_bits(text: str) -> Bits:
    """Parse a string of '0' and '1' characters into bits."""
    try:
        return tuple({"0": 0, "1": 1}[c] for c in text)
    except KeyError as exc:
        raise ValueError(f"not a binary digit: {exc.args[0]!r}") from None