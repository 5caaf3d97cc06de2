# sdeschat

sdeschat is a small teaching program for two classic ideas. It agrees on a shared key with
Diffie-Hellman. It then encrypts chat text one byte at a time with Simplified DES (S-DES), a
cipher with 10-bit keys and 8-bit blocks.

It is meant for learning. It is **not** secure and must not protect real data.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running a chat

Start the server first. By default it reads a prime table from `Primes.txt` in the working
directory. Each non-blank line of that file holds a prime and one of its primitive roots,
separated by whitespace:

```
1009 11
1013 3
```

```
sdeschat-server [--primes PATH] [--host ADDRESS] [--port PORT]
```

The server picks a random line from the table and asks on standard input for a private key
between 1 and 1000. It keeps asking until it gets a valid one. It then listens on TCP port 8439,
or on the port given, and serves a single client. When that client disconnects, the server exits.

Next, start the client:

```
sdeschat-client [--host ADDRESS] [--port PORT]
```

The default host is `169.254.216.26` and the default port is 8439. Pass `--host` to reach your
own server, for example `--host 127.0.0.1`.

The client connects and receives `p`, `g` and the server's public key as one line. It asks for
its own private key between 1 and 1000, then sends its public key back. Both sides then compute
the same shared key and use its lowest 10 bits as the S-DES key. Each side prints the key and
the two derived round keys.

Each line you type in the client is encoded as UTF-8 and encrypted one byte at a time. The
trailing newline is encrypted too. Every byte is sent as eight `0`/`1` digits. The server
decrypts whole 8-digit blocks as they arrive and prints the result. Digits that do not yet form
a whole block are held until the next read. A line that starts with `b` (for example `bye`)
ends the session.

## Using the library

```python
from sdeschat.sdes import SDES
from sdeschat.bits import char_to_bits, bits_to_char, int_to_bits
from sdeschat.dh import public_key, shared_key

p, g = 1009, 11
a, b = 123, 456
key = shared_key(public_key(g, b, p), a, p)
assert key == shared_key(public_key(g, a, p), b, p)

cipher = SDES(int_to_bits(key, 10))
block = cipher.encrypt(char_to_bits("H"))
assert bits_to_char(cipher.decrypt(block)) == "H"
```

The modules:

- `sdeschat.sdes`: the `SDES` class, plus `generate_subkeys`, `feistel`, `swap_halves`,
  `rotate_left`, `encrypt_block` and `decrypt_block`. Bits are tuples of 0 and 1. Wrong lengths
  or non-binary values raise `ValueError`.
- `sdeschat.bits`: `int_to_bits`, `char_to_bits`, `bits_to_char`, `bits_to_str` and `str_to_bits`.
- `sdeschat.dh`: `fast_mod_exp`, `public_key`, `shared_key` and `prompt_private_key`.
  `prompt_private_key` takes a line-reading function and a writing function, and raises
  `EOFError` at end of input.
- `sdeschat.primes`: `gcd`, `find_factors`, `is_primitive_root` and `find_primitive_root`. The
  chat commands do not use this module. It can help you build a prime table.
- `sdeschat.client`: `parse_server_hello`, `encrypt_text` and `main`.
- `sdeschat.server`: `BlockDecoder`, `read_prime_table`, `choose_prime`,
  `format_server_hello` and `main`.

## What it does not do

The server talks to one client per run, and messages go only from client to server. The package
ships no prime table, so you must supply `Primes.txt` yourself.