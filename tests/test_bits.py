import pytest

from sdeschat.bits import (
    bits_to_char,
    bits_to_str,
    char_to_bits,
    int_to_bits,
    str_to_bits,
)


def test_char_to_bits_pinned():
    assert char_to_bits("A") == (0, 1, 0, 0, 0, 0, 0, 1)


def test_char_round_trip_all_bytes():
    for code in range(256):
        char = chr(code)
        bits = char_to_bits(char)
        assert len(bits) == 8
        assert bits_to_char(bits) == char
        assert char_to_bits(code) == bits


def test_int_to_bits_recomposes():
    for number in range(0, 3000, 37):
        bits = int_to_bits(number, 10)
        assert len(bits) == 10
        assert int(bits_to_str(bits), 2) == number % 1024


def test_int_to_bits_keeps_low_bits():
    assert int_to_bits(1023, 10) == (1,) * 10
    assert int_to_bits(1024, 10) == (0,) * 10
    assert int_to_bits(7, 0) == ()


def test_int_to_bits_rejects_negative():
    with pytest.raises(ValueError):
        int_to_bits(-1, 10)
    with pytest.raises(ValueError):
        int_to_bits(5, -1)


def test_string_round_trip():
    text = "0110100111"
    assert bits_to_str(str_to_bits(text)) == text
    assert str_to_bits("") == ()


def test_str_to_bits_rejects_other_characters():
    with pytest.raises(ValueError):
        str_to_bits("01a1")


def test_bits_to_str_rejects_non_bits():
    with pytest.raises(ValueError):
        bits_to_str((0, 2))


@pytest.mark.parametrize("char", ["", "ab", "\u0100"])
def test_char_to_bits_rejects_bad_input(char):
    with pytest.raises(ValueError):
        char_to_bits(char)


def test_bits_to_char_rejects_wrong_length():
    with pytest.raises(ValueError):
        bits_to_char((1, 0, 1))