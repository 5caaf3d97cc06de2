"""Chat server: publish Diffie-Hellman parameters and decrypt S-DES blocks."""

from __future__ import annotations

import argparse
import os
import random
import re
import socket
import sys
from collections.abc import Sequence

from .bits import bits_to_char, bits_to_str, int_to_bits, str_to_bits
from .dh import prompt_private_key, public_key, shared_key
from .sdes import BLOCK_BITS, KEY_BITS, SDES

DEFAULT_PORT = 8439
DEFAULT_PRIMES = "Primes.txt"

_PUBLIC_KEY = re.compile(rb"\s*(\d+)\n?")


class BlockDecoder:
    """Decrypt a stream of '0'/'1' text in 8-character blocks.

    Characters that do not yet make a whole block are kept for the next feed.
    """

    def __init__(self, cipher: SDES) -> None:
        self.cipher = cipher
        self._pending = ""

    def feed(self, data: str | bytes) -> str:
        """Add received text and return the characters it completes."""
        if isinstance(data, bytes):
            data = data.decode("ascii")
        buffer = self._pending + data
        whole = len(buffer) - len(buffer) % BLOCK_BITS
        self._pending = buffer[whole:]
        return "".join(
            bits_to_char(self.cipher.decrypt(str_to_bits(buffer[start:start + BLOCK_BITS])))
            for start in range(0, whole, BLOCK_BITS)
        )


def read_prime_table(path: str | os.PathLike[str]) -> list[tuple[int, int]]:
    """Read "prime generator" pairs, one per line; blank lines are skipped."""
    entries = []
    with open(path, encoding="ascii") as table:
        for number, line in enumerate(table, start=1):
            fields = line.split()
            if not fields:
                continue
            if len(fields) < 2:
                raise ValueError(f"line {number}: expected a prime and a generator")
            try:
                entries.append((int(fields[0]), int(fields[1])))
            except ValueError:
                raise ValueError(f"line {number}: not a number: {line.strip()!r}") from None
    return entries


def choose_prime(
    entries: Sequence[tuple[int, int]], rng: random.Random | None = None
) -> tuple[int, int]:
    """Pick one (prime, generator) pair at random."""
    if not entries:
        raise ValueError("the prime table is empty")
    return (rng or random.Random()).choice(entries)


def format_server_hello(p: int, g: int, public_key: int) -> str:
    """Return the greeting that carries p, g and the server's public key."""
    return f"{p} {g} {public_key}\n"


def _say(text: str) -> None:
    print(text, flush=True)


def _show(decoder: BlockDecoder, data: bytes) -> None:
    text = data.decode("ascii", errors="replace")
    print(f"Encrypted message from client: {text}")
    print(decoder.feed(data), flush=True)


def main(argv: list[str] | None = None) -> int:
    """Run the chat server for one client."""
    parser = argparse.ArgumentParser(
        prog="sdeschat-server", description="Receive S-DES encrypted messages from a client."
    )
    parser.add_argument("--primes", default=DEFAULT_PRIMES, help="table of primes and generators")
    parser.add_argument("--host", default="", help="address to listen on")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    args = parser.parse_args(argv)

    try:
        entries = read_prime_table(args.primes)
    except OSError as exc:
        print(f"Error opening file: {exc}", file=sys.stderr)
        return 1
    p, g = choose_prime(entries)
    print(f"Random prime: {p}, Primitive root: {g}")

    try:
        private = prompt_private_key(sys.stdin.readline, _say)
    except EOFError:
        print("no private key entered")
        return 1
    print(f"PRIVATE KEY: {private}")
    server_public = public_key(g, private, p)
    print(f"PUBLIC KEY: {server_public}")

    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as listener:
        listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            listener.bind((args.host, args.port))
        except OSError:
            print(" unable to bind")
            return 1
        print(" socket bound, ready for and waiting on a client")
        listener.listen(3)
        print(" Waiting for incoming connections... ", flush=True)

        try:
            conn, _ = listener.accept()
        except OSError as exc:
            print(f"accept failed: {exc}", file=sys.stderr)
            return 1

        with conn:
            print("Connection accepted")
            hello = format_server_hello(p, g, server_public)
            conn.sendall(hello.encode("ascii"))
            print(f"Sent p,g and server's public key : {hello}")

            first = conn.recv(100)
            match = _PUBLIC_KEY.match(first)
            if match is None:
                print("Client did not send a public key")
                return 1
            client_public = int(match.group(1))
            print(f"Received, client's public key: {client_public}")

            secret = shared_key(client_public, private, p)
            print(f"Shared Key (server): {secret}")
            key_bits = int_to_bits(secret, KEY_BITS)
            print(f"Binary representation of {secret} is: {bits_to_str(key_bits)}")
            cipher = SDES(key_bits)
            print("KEY1 : " + " ".join(map(str, cipher.key1)))
            print("KEY2 : " + " ".join(map(str, cipher.key2)), flush=True)

            decoder = BlockDecoder(cipher)
            rest = first[match.end():]
            if rest:
                _show(decoder, rest)
            while True:
                try:
                    data = conn.recv(99)
                except OSError as exc:
                    print(f"Receive failed: {exc}", file=sys.stderr)
                    return 1
                if not data:
                    break
                _show(decoder, data)
            print("Client disconnected", flush=True)
    return 0