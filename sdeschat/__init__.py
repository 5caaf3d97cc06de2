"""Diffie-Hellman key exchange and Simplified DES for a small encrypted chat."""

__version__ = "0.1.0"
__all__ = ["bits", "client", "dh", "primes", "sdes", "server"]