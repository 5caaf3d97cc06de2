import io
import random
import socket
import sys
import threading
import time

import pytest

from sdeschat.bits import int_to_bits
from sdeschat.client import encrypt_text, parse_server_hello
from sdeschat.dh import public_key, shared_key
from sdeschat.sdes import SDES
from sdeschat.server import (
    BlockDecoder,
    choose_prime,
    format_server_hello,
    main,
    read_prime_table,
)

KEY = (0, 1, 1, 1, 0, 0, 1, 0, 1, 1)


def _free_port():
    with socket.socket() as probe:
        probe.bind(("127.0.0.1", 0))
        return probe.getsockname()[1]


def test_block_decoder_whole_message():
    cipher = SDES(KEY)
    decoder = BlockDecoder(cipher)
    assert decoder.feed("".join(encrypt_text("hello", cipher))) == "hello"


def test_block_decoder_keeps_partial_blocks():
    cipher = SDES(KEY)
    stream = "".join(encrypt_text("abc", cipher))
    decoder = BlockDecoder(cipher)
    pieces = [decoder.feed(stream[:5]), decoder.feed(stream[5:13]), decoder.feed(stream[13:])]
    assert pieces[0] == ""
    assert "".join(pieces) == "abc"


def test_block_decoder_accepts_bytes():
    cipher = SDES(KEY)
    data = "".join(encrypt_text("ok", cipher)).encode("ascii")
    assert BlockDecoder(cipher).feed(data) == "ok"


def test_block_decoder_rejects_non_binary():
    with pytest.raises(ValueError):
        BlockDecoder(SDES(KEY)).feed("0101x010")


def test_format_server_hello_round_trip():
    text = format_server_hello(23, 5, 8)
    assert text == "23 5 8\n"
    assert parse_server_hello(text) == (23, 5, 8)


def test_read_prime_table(tmp_path):
    path = tmp_path / "Primes.txt"
    path.write_text("23 5\n\n47 5 extra\n", encoding="ascii")
    assert read_prime_table(path) == [(23, 5), (47, 5)]


@pytest.mark.parametrize("content", ["23\n", "abc 5\n"])
def test_read_prime_table_rejects_malformed(tmp_path, content):
    path = tmp_path / "Primes.txt"
    path.write_text(content, encoding="ascii")
    with pytest.raises(ValueError):
        read_prime_table(path)


def test_choose_prime_picks_an_entry():
    entries = [(23, 5), (47, 5), (1009, 11)]
    rng = random.Random(1)
    picks = {choose_prime(entries, rng) for _ in range(50)}
    assert picks <= set(entries)
    assert len(picks) > 1


def test_choose_prime_empty_table():
    with pytest.raises(ValueError):
        choose_prime([])


def test_main_missing_table_fails(tmp_path):
    assert main(["--primes", str(tmp_path / "missing.txt")]) == 1


def test_main_decrypts_client_message(tmp_path, monkeypatch, capsys):
    table = tmp_path / "Primes.txt"
    table.write_text("23 5\n", encoding="ascii")
    port = _free_port()
    monkeypatch.setattr(sys, "stdin", io.StringIO("6\n"))
    results = []
    thread = threading.Thread(
        target=lambda: results.append(
            main(["--primes", str(table), "--host", "127.0.0.1", "--port", str(port)])
        ),
        daemon=True,
    )
    thread.start()

    deadline = time.monotonic() + 10
    while True:
        try:
            sock = socket.create_connection(("127.0.0.1", port))
            break
        except OSError:
            if time.monotonic() > deadline:
                raise
            time.sleep(0.05)

    with sock:
        with sock.makefile("rb") as reader:
            p, g, server_public = parse_server_hello(reader.readline())
        client_private = 3
        sock.sendall(f"{public_key(g, client_private, p)}\n".encode("ascii"))
        secret = shared_key(server_public, client_private, p)
        cipher = SDES(int_to_bits(secret, 10))
        sock.sendall("".join(encrypt_text("hi", cipher)).encode("ascii"))
    thread.join(10)

    assert results == [0]
    assert (p, g) == (23, 5)
    out = capsys.readouterr().out
    assert f"Shared Key (server): {secret}" in out
    assert "hi" in out
    assert "Client disconnected" in out