"""Command-line self-test that checks both AES-128 implementations against the FIPS-197 vector."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from aesblock import aes8, aes32

# FIPS-197 Appendix C.1 example vector.
PLAINTEXT = bytes.fromhex("00112233445566778899aabbccddeeff")
KEY = bytes.fromhex("000102030405060708090a0b0c0d0e0f")
EXPECTED_CIPHERTEXT = bytes.fromhex("69c4e0d86a7b0430d8cdb78070b4c55a")


def _hex(block: bytes) -> str:
    return " ".join(f"{b:02x}" for b in block)


def _aes32_encrypt(plaintext: bytes, key: bytes) -> bytes:
    return aes32.encrypt(plaintext, aes32.key_schedule(key))


_IMPLEMENTATIONS: tuple[tuple[str, Callable[[bytes, bytes], bytes], Callable[[bytes, bytes], bytes]], ...] = (
    ("AES8", aes8.encrypt, aes8.decrypt),
    ("AES32", _aes32_encrypt, aes32.decrypt),
)


def _check(name: str, encrypt: Callable[[bytes, bytes], bytes],
           decrypt: Callable[[bytes, bytes], bytes], out: TextIO) -> bool:
    print(f"[{name}]", file=out)
    print(f"PT = {_hex(PLAINTEXT)}", file=out)

    ciphertext = encrypt(PLAINTEXT, KEY)
    print(f"CT = {_hex(ciphertext)}", file=out)
    if ciphertext != EXPECTED_CIPHERTEXT:
        print("** Encryption failed **", file=out)
        return False
    print("** Encryption succeeded **", file=out)

    decrypted = decrypt(ciphertext, KEY)
    print(f"DEC = {_hex(decrypted)}", file=out)
    if decrypted != PLAINTEXT:
        print("** Decryption failed **", file=out)
        return False
    print("** Decryption succeeded **", file=out)
    return True


def run_self_test(out: TextIO) -> bool:
    """Encrypt and decrypt the FIPS-197 vector with every implementation.

    Writes a report to ``out`` and returns True when all checks pass.
    """
    results = []
    for index, (name, encrypt, decrypt) in enumerate(_IMPLEMENTATIONS):
        if index:
            print(file=out)
        results.append(_check(name, encrypt, decrypt, out))
    return all(results)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the self-test; the exit status is 0 on success and 1 on failure."""
    parser = argparse.ArgumentParser(
        prog="aesblock",
        description="Check the AES-128 implementations against the FIPS-197 test vector.",
    )
    parser.parse_args(argv)
    return 0 if run_self_test(sys.stdout) else 1


if __name__ == "__main__":
    sys.exit(main())