"""Byte-oriented AES-128: the round transformations on a 16-byte state.

The state is stored column by column, as in the standard: byte ``4*c + r``
holds row ``r`` of column ``c``. Every function here is pure. It takes
bytes-like input and returns a new ``bytes`` object.
"""

from __future__ import annotations

from collections.abc import Sequence

from aesblock.primitives import BLOCK_SIZE, INV_SBOX, KEY_SIZE, RCON, ROUNDS, SBOX, gf_mul

_MIX_MATRIX = (
    (0x02, 0x03, 0x01, 0x01),
    (0x01, 0x02, 0x03, 0x01),
    (0x01, 0x01, 0x02, 0x03),
    (0x03, 0x01, 0x01, 0x02),
)

_INV_MIX_MATRIX = (
    (0x0E, 0x0B, 0x0D, 0x09),
    (0x09, 0x0E, 0x0B, 0x0D),
    (0x0D, 0x09, 0x0E, 0x0B),
    (0x0B, 0x0D, 0x09, 0x0E),
)

# Row r is rotated left by r positions: new byte i comes from old byte _SHIFT[i].
_SHIFT = tuple((4 * (column + row) + row) % 16 for column in range(4) for row in range(4))
_INV_SHIFT = tuple(_SHIFT.index(i) for i in range(16))


def _as_block(data: Sequence[int] | bytes, name: str, size: int = BLOCK_SIZE) -> bytes:
    try:
        block = bytes(data)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be a sequence of bytes") from exc
    if len(block) != size:
        raise ValueError(f"{name} must be {size} bytes long, got {len(block)}")
    return block


def _rot_word(word: int) -> int:
    return ((word << 8) | (word >> 24)) & 0xFFFFFFFF


def _sub_word(word: int) -> int:
    return int.from_bytes(bytes(SBOX[b] for b in word.to_bytes(4, "big")), "big")


def key_schedule(key: Sequence[int] | bytes) -> list[bytes]:
    """Expand a 16-byte key into the 11 round keys of AES-128."""
    key = _as_block(key, "key", KEY_SIZE)
    words = [int.from_bytes(key[i:i + 4], "big") for i in range(0, KEY_SIZE, 4)]
    for rcon in RCON:
        previous = words[-4:]
        temp = _sub_word(_rot_word(previous[3])) ^ rcon
        for word in previous:
            temp ^= word
            words.append(temp)
    return [
        b"".join(w.to_bytes(4, "big") for w in words[i:i + 4])
        for i in range(0, len(words), 4)
    ]


def sub_bytes(state: Sequence[int] | bytes) -> bytes:
    """Apply the S-box to every byte of the state."""
    return bytes(SBOX[b] for b in _as_block(state, "state"))


def inv_sub_bytes(state: Sequence[int] | bytes) -> bytes:
    """Apply the inverse S-box to every byte of the state."""
    return bytes(INV_SBOX[b] for b in _as_block(state, "state"))


def shift_rows(state: Sequence[int] | bytes) -> bytes:
    """Rotate row r of the state left by r positions."""
    block = _as_block(state, "state")
    return bytes(block[i] for i in _SHIFT)


def inv_shift_rows(state: Sequence[int] | bytes) -> bytes:
    """Rotate row r of the state right by r positions."""
    block = _as_block(state, "state")
    return bytes(block[i] for i in _INV_SHIFT)


def _mix(block: bytes, matrix: tuple[tuple[int, ...], ...]) -> bytes:
    out = bytearray()
    for start in range(0, BLOCK_SIZE, 4):
        column = block[start:start + 4]
        for row in matrix:
            value = 0
            for coefficient, byte in zip(row, column):
                value ^= gf_mul(coefficient, byte)
            out.append(value)
    return bytes(out)


def mix_columns(state: Sequence[int] | bytes) -> bytes:
    """Multiply each column of the state by the MixColumns matrix over GF(2^8)."""
    return _mix(_as_block(state, "state"), _MIX_MATRIX)


def inv_mix_columns(state: Sequence[int] | bytes) -> bytes:
    """Multiply each column of the state by the inverse MixColumns matrix."""
    return _mix(_as_block(state, "state"), _INV_MIX_MATRIX)


def add_round_key(state: Sequence[int] | bytes, round_key: Sequence[int] | bytes) -> bytes:
    """XOR a round key into the state."""
    block = _as_block(state, "state")
    key = _as_block(round_key, "round key")
    return bytes(a ^ b for a, b in zip(block, key))


def encrypt(plaintext: Sequence[int] | bytes, key: Sequence[int] | bytes) -> bytes:
    """Encrypt one 16-byte block with AES-128."""
    state = _as_block(plaintext, "plaintext")
    round_keys = key_schedule(key)

    state = add_round_key(state, round_keys[0])
    for round_key in round_keys[1:ROUNDS]:
        state = add_round_key(mix_columns(shift_rows(sub_bytes(state))), round_key)
    return add_round_key(shift_rows(sub_bytes(state)), round_keys[ROUNDS])


def decrypt(ciphertext: Sequence[int] | bytes, key: Sequence[int] | bytes) -> bytes:
    """Decrypt one 16-byte block with AES-128.

    The middle rounds use the equivalent inverse cipher: InvMixColumns is
    applied to the state and to the round key before they are combined.
    """
    state = _as_block(ciphertext, "ciphertext")
    round_keys = key_schedule(key)

    state = add_round_key(state, round_keys[ROUNDS])
    for round_key in reversed(round_keys[1:ROUNDS]):
        state = inv_mix_columns(inv_shift_rows(inv_sub_bytes(state)))
        state = add_round_key(state, inv_mix_columns(round_key))
    return add_round_key(inv_shift_rows(inv_sub_bytes(state)), round_keys[0])