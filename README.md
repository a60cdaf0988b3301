# aesblock

A small, dependency-free implementation of the AES-128 block cipher (FIPS 197)
in two styles. One works byte by byte. The other works on 32-bit column words
with precomputed lookup tables.

## Modules

- `aesblock.primitives` holds the byte-level building blocks. These are the
  constants `SBOX`, `INV_SBOX` and `RCON`, the sizes `BLOCK_SIZE`, `KEY_SIZE`
  and `ROUNDS`, and three functions:
  - `xtime(x)` multiplies a field element by 0x02 in GF(2^8).
  - `gf_mul(a, b)` multiplies two field elements.
  - `invert_sbox(sbox)` inverts a 256-entry substitution table. It raises
    `ValueError` if the table is not a permutation of 0..255.
- `aesblock.tables` provides `generate_encryption_tables(sbox)`. It builds the
  five 32-bit encryption tables for an S-box. The tables for the standard
  S-box are available as `TE0`..`TE4`.
- `aesblock.aes8` is the byte-oriented cipher. The state is a 16-byte block
  stored column by column. It provides:
  - `key_schedule(key)`, which returns the 11 round keys as `bytes`.
  - The round steps `sub_bytes`, `shift_rows`, `mix_columns` and
    `add_round_key`, with their inverses `inv_sub_bytes`, `inv_shift_rows`
    and `inv_mix_columns`.
  - `encrypt(plaintext, key)` and `decrypt(ciphertext, key)` for a single
    block.

  Every function is pure: it takes bytes-like input and returns new `bytes`.
- `aesblock.aes32` is the table-driven cipher. The state is a tuple of four
  big-endian column words. It provides:
  - The helpers `bytes_to_state`, `state_to_bytes`, `format_state`,
    `rot_word` and `sub_word`.
  - `key_schedule(key)`, which returns 11 round keys of four words each.
  - `encrypt_round(state, round_key)`.
  - `encrypt(plaintext, round_keys)`, which takes an already expanded key.
  - `decrypt(ciphertext, key)`, which uses the byte-oriented inverse cipher
    from `aes8`.
  - The class `Aes32Cipher`. It expands a key once and then encrypts or
    decrypts single blocks.
- `aesblock.cli` provides the self-test, described below.

Wrong lengths or out-of-range values raise `ValueError`. This covers a block
or key that is not 16 bytes, a word outside 32 bits, and an expanded key that
does not hold 11 round keys.

## Installation

```
pip install .
```

To run the tests, install the test extras with `pip install .[test]` and run
`pytest`.

## Usage

```python
from aesblock import aes8
from aesblock.aes32 import Aes32Cipher

key = bytes(range(16))
block = bytes.fromhex("00112233445566778899aabbccddeeff")

ciphertext = aes8.encrypt(block, key)
assert ciphertext.hex() == "69c4e0d86a7b0430d8cdb78070b4c55a"
assert aes8.decrypt(ciphertext, key) == block

cipher = Aes32Cipher(key)
assert cipher.encrypt(block) == ciphertext
assert cipher.decrypt(ciphertext) == block
```

## Self-test

The `aesblock` command runs the FIPS 197 appendix C.1 test vector through
both implementations (`AES8` and `AES32`). For each one it prints the
plaintext, the ciphertext and the decryption:

```
aesblock
```

It takes no options apart from `--help`. It exits with status 0 when every
check passes and 1 otherwise. The same check is available from Python as
`aesblock.cli.run_self_test(out)`, which writes the report to `out` and
returns `True` on success.

## What it does not do

This package encrypts and decrypts one 16-byte block with a 16-byte key, and
nothing more:

- It supports only AES-128; there are no 192- or 256-bit keys.
- It has no modes of operation and no padding.
- It has no command for encrypting files or streams.
- It has no protection against timing attacks.

It is meant for study and testing. Do not use it to protect real data.