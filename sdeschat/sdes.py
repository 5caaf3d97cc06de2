"""Simplified DES (S-DES): 8-bit blocks under a 10-bit key."""

from __future__ import annotations

from collections.abc import Sequence

Bits = tuple[int, ...]

P10 = (3, 5, 2, 7, 4, 10, 1, 9, 8, 6)
P8 = (6, 3, 7, 4, 8, 5, 10, 9)
IP = (2, 6, 3, 1, 4, 8, 5, 7)
EP = (4, 1, 2, 3, 2, 3, 4, 1)
P4 = (2, 4, 3, 1)
IP_INV = (4, 1, 3, 5, 7, 2, 8, 6)

S0 = (
    (1, 0, 3, 2),
    (3, 2, 1, 0),
    (0, 2, 1, 3),
    (3, 1, 3, 2),
)
S1 = (
    (0, 1, 2, 3),
    (2, 0, 1, 3),
    (3, 0, 1, 0),
    (2, 1, 0, 3),
)

KEY_BITS = 10
BLOCK_BITS = 8


def _as_bits(bits: Sequence[int], length: int, what: str) -> Bits:
    result = tuple(int(b) for b in bits)
    if len(result) != length:
        raise ValueError(f"{what} must have {length} bits, got {len(result)}")
    if any(b not in (0, 1) for b in result):
        raise ValueError(f"{what} must contain only 0 and 1")
    return result


def _permute(bits: Sequence[int], table: Sequence[int]) -> Bits:
    return tuple(bits[position - 1] for position in table)


def _sbox_lookup(box: tuple[tuple[int, ...], ...], bits: Bits) -> tuple[int, int]:
    row = (bits[0] << 1) | bits[3]
    col = (bits[1] << 1) | bits[2]
    value = box[row][col]
    return (value >> 1) & 1, value & 1


def rotate_left(bits: Sequence[int], shifts: int) -> Bits:
    """Rotate a bit sequence left by ``shifts`` positions."""
    if shifts < 0:
        raise ValueError("shift count must not be negative")
    result = tuple(bits)
    if not result:
        return result
    shifts %= len(result)
    return result[shifts:] + result[:shifts]


def generate_subkeys(key: Sequence[int]) -> tuple[Bits, Bits]:
    """Derive the two 8-bit round keys from a 10-bit key."""
    key = _as_bits(key, KEY_BITS, "key")
    permuted = _permute(key, P10)
    left, right = permuted[:5], permuted[5:]

    left, right = rotate_left(left, 1), rotate_left(right, 1)
    key1 = _permute(left + right, P8)

    left, right = rotate_left(left, 2), rotate_left(right, 2)
    key2 = _permute(left + right, P8)
    return key1, key2


def feistel(bits: Sequence[int], subkey: Sequence[int]) -> Bits:
    """Apply one round: the left half is mixed with F(right half, subkey)."""
    bits = _as_bits(bits, BLOCK_BITS, "block")
    subkey = _as_bits(subkey, BLOCK_BITS, "subkey")
    left, right = bits[:4], bits[4:]

    mixed = tuple(k ^ e for k, e in zip(subkey, _permute(right, EP)))
    substituted = _sbox_lookup(S0, mixed[:4]) + _sbox_lookup(S1, mixed[4:])
    mask = _permute(substituted, P4)

    return tuple(l ^ m for l, m in zip(left, mask)) + right


def swap_halves(bits: Sequence[int]) -> Bits:
    """Exchange the left and right halves of an even-length bit sequence."""
    result = tuple(bits)
    if len(result) % 2:
        raise ValueError("cannot swap halves of an odd-length sequence")
    half = len(result) // 2
    return result[half:] + result[:half]


def _run(block: Sequence[int], first: Sequence[int], second: Sequence[int]) -> Bits:
    block = _as_bits(block, BLOCK_BITS, "block")
    state = _permute(block, IP)
    state = feistel(state, first)
    state = swap_halves(state)
    state = feistel(state, second)
    return _permute(state, IP_INV)


def encrypt_block(block: Sequence[int], key1: Sequence[int], key2: Sequence[int]) -> Bits:
    """Encrypt one 8-bit block with the given round keys."""
    return _run(block, key1, key2)


def decrypt_block(block: Sequence[int], key1: Sequence[int], key2: Sequence[int]) -> Bits:
    """Decrypt one 8-bit block with the given round keys."""
    return _run(block, key2, key1)


class SDES:
    """An S-DES cipher bound to one 10-bit key."""

    def __init__(self, key: Sequence[int]) -> None:
        self.key = _as_bits(key, KEY_BITS, "key")
        self.key1, self.key2 = generate_subkeys(self.key)

    def encrypt(self, block: Sequence[int]) -> Bits:
        """Encrypt one 8-bit block."""
        return encrypt_block(block, self.key1, self.key2)

    def decrypt(self, block: Sequence[int]) -> Bits:
        """Decrypt one 8-bit block."""
        return decrypt_block(block, self.key1, self.key2)

    def __repr__(self) -> str:
        return f"SDES(key={''.join(map(str, self.key))})"