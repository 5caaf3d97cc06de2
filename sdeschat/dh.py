"""Diffie-Hellman key agreement over small primes."""

from __future__ import annotations

from collections.abc import Callable

MIN_PRIVATE_KEY = 1
MAX_PRIVATE_KEY = 1000

PROMPT = "Please enter a private key number between 1 and 1000."
RETRY = "Please enter a valid number between 1 and 1000"


def fast_mod_exp(base: int, exp: int, mod: int) -> int:
    """Compute ``base ** exp % mod`` by repeated squaring."""
    if mod <= 0:
        raise ValueError("modulus must be positive")
    result = 1
    base %= mod
    while exp > 0:
        if exp % 2 == 1:
            result = (result * base) % mod
        exp //= 2
        base = (base * base) % mod
    return result


def public_key(g: int, private_key: int, p: int) -> int:
    """Return the public value ``g ** private_key mod p``."""
    return fast_mod_exp(g, private_key, p)


def shared_key(peer_public_key: int, private_key: int, p: int) -> int:
    """Return the shared secret from the peer's public value."""
    return fast_mod_exp(peer_public_key, private_key, p)


def _valid(value: int) -> bool:
    return MIN_PRIVATE_KEY <= value <= MAX_PRIVATE_KEY


def prompt_private_key(read_line: Callable[[], str], write: Callable[[str], object]) -> int:
    """Ask until a private key between 1 and 1000 is entered.

    ``read_line`` returns one line of input, or an empty string at end of
    input, which raises EOFError.
    """
    write(PROMPT)
    while True:
        line = read_line()
        if not line:
            raise EOFError("no private key entered")
        try:
            value = int(line.strip())
        except ValueError:
            value = 0
        if _valid(value):
            return value
        write(RETRY)