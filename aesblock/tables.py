"""Precomputed 32-bit round tables for table-driven AES encryption.

Each table maps an input byte ``x`` to a column word built from ``S(x)``:

    TE0[x] = [2*S(x),   S(x),   S(x), 3*S(x)]
    TE1[x] = [3*S(x), 2*S(x),   S(x),   S(x)]
    TE2[x] = [  S(x), 3*S(x), 2*S(x),   S(x)]
    TE3[x] = [  S(x),   S(x), 3*S(x), 2*S(x)]
    TE4[x] = [  S(x),   S(x),   S(x),   S(x)]

The first four fold SubBytes and MixColumns into one lookup; TE4 serves the
final round, which has no MixColumns.
"""

from __future__ import annotations

from collections.abc import Sequence

from aesblock.primitives import SBOX, xtime

Table = tuple[int, ...]


def _rotate_right(word: int, bits: int) -> int:
    return ((word >> bits) | (word << (32 - bits))) & 0xFFFFFFFF


def generate_encryption_tables(sbox: Sequence[int]) -> tuple[Table, Table, Table, Table, Table]:
    """Build the five encryption tables (TE0..TE4) for a 256-entry S-box.

    Raises ValueError if the S-box does not have 256 byte entries.
    """
    if len(sbox) != 256:
        raise ValueError(f"an S-box has 256 entries, got {len(sbox)}")

    te0: list[int] = []
    te4: list[int] = []
    for sx in sbox:
        doubled = xtime(sx)  # also rejects values outside 0..255
        te0.append((doubled << 24) | (sx << 16) | (sx << 8) | (doubled ^ sx))
        te4.append(sx * 0x01010101)

    te1 = tuple(_rotate_right(word, 8) for word in te0)
    te2 = tuple(_rotate_right(word, 16) for word in te0)
    te3 = tuple(_rotate_right(word, 24) for word in te0)
    return tuple(te0), te1, te2, te3, tuple(te4)


TE0, TE1, TE2, TE3, TE4 = generate_encryption_tables(SBOX)