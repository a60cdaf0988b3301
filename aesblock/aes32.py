"""Table-driven AES-128 working on four 32-bit column words.

A state is a tuple of four words; word ``c`` packs column ``c`` of the
standard byte state big-endian, so row 0 sits in the top byte.
Encryption folds SubBytes, ShiftRows and MixColumns into lookups in the
precomputed TE tables. Decryption uses the byte-oriented inverse cipher.
"""

from __future__ import annotations

from collections.abc import Sequence

from aesblock import aes8
from aesblock.primitives import BLOCK_SIZE, KEY_SIZE, RCON, ROUNDS, SBOX
from aesblock.tables import TE0, TE1, TE2, TE3, TE4

State = tuple[int, int, int, int]

_WORD_MASK = 0xFFFFFFFF


def _as_block(data: Sequence[int] | bytes, name: str, size: int) -> bytes:
    try:
        block = bytes(data)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be a sequence of bytes") from exc
    if len(block) != size:
        raise ValueError(f"{name} must be {size} bytes long, got {len(block)}")
    return block


def _check_word(word: int, name: str = "word") -> int:
    if not isinstance(word, int) or not 0 <= word <= _WORD_MASK:
        raise ValueError(f"{name} must be a 32-bit unsigned integer, got {word!r}")
    return word


def _as_state(words: Sequence[int], name: str = "state") -> State:
    if len(words) != 4:
        raise ValueError(f"{name} must hold 4 words, got {len(words)}")
    a, b, c, d = (_check_word(w, f"{name} word") for w in words)
    return a, b, c, d


def bytes_to_state(block: Sequence[int] | bytes) -> State:
    """Pack a 16-byte block into four big-endian column words."""
    data = _as_block(block, "block", BLOCK_SIZE)
    a, b, c, d = (int.from_bytes(data[i:i + 4], "big") for i in range(0, BLOCK_SIZE, 4))
    return a, b, c, d


def state_to_bytes(state: Sequence[int]) -> bytes:
    """Unpack four column words into a 16-byte block."""
    return b"".join(word.to_bytes(4, "big") for word in _as_state(state))


def format_state(state: Sequence[int]) -> str:
    """Render a state as four zero-padded hexadecimal words."""
    return " ".join(f"{word:08x}" for word in _as_state(state))


def rot_word(word: int) -> int:
    """Rotate a word left by one byte."""
    _check_word(word)
    return ((word << 8) | (word >> 24)) & _WORD_MASK


def sub_word(word: int) -> int:
    """Apply the S-box to each byte of a word."""
    _check_word(word)
    return int.from_bytes(bytes(SBOX[b] for b in word.to_bytes(4, "big")), "big")


def key_schedule(key: Sequence[int] | bytes) -> list[State]:
    """Expand a 16-byte key into 11 round keys of four words each."""
    round_keys = [bytes_to_state(_as_block(key, "key", KEY_SIZE))]
    for rcon in RCON:
        previous = round_keys[-1]
        temp = sub_word(rot_word(previous[3])) ^ rcon
        words = []
        for word in previous:
            temp ^= word
            words.append(temp)
        round_keys.append(_as_state(words))
    return round_keys


def encrypt_round(state: Sequence[int], round_key: Sequence[int]) -> State:
    """Run one full middle round (SubBytes, ShiftRows, MixColumns, AddRoundKey)."""
    s = _as_state(state)
    rk = _as_state(round_key, "round key")
    out = [
        TE0[s[i] >> 24]
        ^ TE1[(s[(i + 1) % 4] >> 16) & 0xFF]
        ^ TE2[(s[(i + 2) % 4] >> 8) & 0xFF]
        ^ TE3[s[(i + 3) % 4] & 0xFF]
        ^ rk[i]
        for i in range(4)
    ]
    return _as_state(out)


def _final_round(s: State, rk: State) -> State:
    out = [
        (TE4[s[i] >> 24] & 0xFF000000)
        ^ (TE4[(s[(i + 1) % 4] >> 16) & 0xFF] & 0x00FF0000)
        ^ (TE4[(s[(i + 2) % 4] >> 8) & 0xFF] & 0x0000FF00)
        ^ (TE4[s[(i + 3) % 4] & 0xFF] & 0x000000FF)
        ^ rk[i]
        for i in range(4)
    ]
    return _as_state(out)


def _check_round_keys(round_keys: Sequence[Sequence[int]]) -> list[State]:
    if len(round_keys) != ROUNDS + 1:
        raise ValueError(f"expected {ROUNDS + 1} round keys, got {len(round_keys)}")
    return [_as_state(rk, "round key") for rk in round_keys]


def encrypt(plaintext: Sequence[int] | bytes, round_keys: Sequence[Sequence[int]]) -> bytes:
    """Encrypt one 16-byte block with an expanded key from key_schedule."""
    keys = _check_round_keys(round_keys)
    state = bytes_to_state(plaintext)
    state = _as_state([w ^ k for w, k in zip(state, keys[0])])
    for round_key in keys[1:ROUNDS]:
        state = encrypt_round(state, round_key)
    return state_to_bytes(_final_round(state, keys[ROUNDS]))


def decrypt(ciphertext: Sequence[int] | bytes, key: Sequence[int] | bytes) -> bytes:
    """Decrypt one 16-byte block with a 16-byte key."""
    return aes8.decrypt(ciphertext, key)


class Aes32Cipher:
    """An AES-128 block cipher bound to one key, with its round keys expanded once."""

    def __init__(self, key: Sequence[int] | bytes) -> None:
        self._key = _as_block(key, "key", KEY_SIZE)
        self.round_keys: list[State] = key_schedule(self._key)

    def encrypt(self, block: Sequence[int] | bytes) -> bytes:
        """Encrypt one 16-byte block."""
        return encrypt(block, self.round_keys)

    def decrypt(self, block: Sequence[int] | bytes) -> bytes:
        """Decrypt one 16-byte block."""
        return decrypt(block, self._key)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(<{KEY_SIZE}-byte key>)"