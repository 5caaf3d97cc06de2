"""Chat client: agree on a key with the server, then send S-DES encrypted text."""

from __future__ import annotations

import argparse
import socket
import sys

from .bits import bits_to_str, char_to_bits, int_to_bits
from .dh import prompt_private_key, public_key, shared_key
from .sdes import KEY_BITS, SDES

DEFAULT_HOST = "169.254.216.26"
DEFAULT_PORT = 8439


def parse_server_hello(text: str | bytes) -> tuple[int, int, int]:
    """Parse the server's "p g public_key" greeting."""
    if isinstance(text, bytes):
        text = text.decode("ascii")
    fields = text.split()
    if len(fields) < 3:
        raise ValueError(f"malformed server greeting: {text!r}")
    try:
        p, g, server_public = (int(field) for field in fields[:3])
    except ValueError:
        raise ValueError(f"malformed server greeting: {text!r}") from None
    return p, g, server_public


def encrypt_text(text: str | bytes, cipher: SDES) -> list[str]:
    """Encrypt each byte of ``text`` into an 8-character block of '0'/'1'."""
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    return [bits_to_str(cipher.encrypt(char_to_bits(byte))) for byte in data]


def _say(text: str) -> None:
    print(text, flush=True)


def _show_subkeys(cipher: SDES) -> None:
    print("KEY1 : " + " ".join(map(str, cipher.key1)))
    print("KEY2 : " + " ".join(map(str, cipher.key2)))


def main(argv: list[str] | None = None) -> int:
    """Run the chat client."""
    parser = argparse.ArgumentParser(
        prog="sdeschat-client", description="Send S-DES encrypted messages to a server."
    )
    parser.add_argument("--host", default=DEFAULT_HOST, help="server address")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="server port")
    args = parser.parse_args(argv)

    print("Trying to create socket")
    try:
        sock = socket.create_connection((args.host, args.port))
    except OSError as exc:
        print(f" connect error: {exc}")
        return 1

    with sock:
        with sock.makefile("rb") as reader:
            reply = reader.readline()
        if not reply:
            print("receive failed")
            return 1
        p, g, server_public = parse_server_hello(reply)
        print(f"Received p,g,servers_public_key {p} {g} {server_public}")

        try:
            private = prompt_private_key(sys.stdin.readline, _say)
        except EOFError:
            print("no private key entered")
            return 1
        client_public = public_key(g, private, p)
        print(f"private_key & public_key {private} {client_public}")

        try:
            sock.sendall(f"{client_public}\n".encode("ascii"))
        except OSError:
            print("send failed")
            return 1

        secret = shared_key(server_public, private, p)
        print(f"Shared Key (client): {secret}")
        key_bits = int_to_bits(secret, KEY_BITS)
        print(f"Binary representation of {secret} is: {bits_to_str(key_bits)}")
        cipher = SDES(key_bits)
        _show_subkeys(cipher)

        for line in iter(sys.stdin.readline, ""):
            if line.startswith("b"):
                break
            for block in encrypt_text(line, cipher):
                try:
                    sock.sendall(block.encode("ascii"))
                except OSError:
                    print("Send failed")
                    return 1
                print(f"Encrypted character sent to server: {block}")
    return 0