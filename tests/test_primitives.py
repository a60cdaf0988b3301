import pytest
from hypothesis import given
from hypothesis import strategies as st

from aesblock.primitives import (
    BLOCK_SIZE,
    INV_SBOX,
    RCON,
    ROUNDS,
    SBOX,
    gf_mul,
    invert_sbox,
    xtime,
)

byte_values = st.integers(min_value=0, max_value=255)


def test_sbox_pinned_entries():
    sbox = invert_sbox(INV_SBOX)
    assert sbox[0x00] == 0x63
    assert sbox[0x53] == 0xED
    assert sbox[0xFF] == 0x16
    assert list(sbox) == list(SBOX)


def test_inverse_sbox_pinned_entries():
    inverse = invert_sbox(SBOX)
    assert inverse[0x00] == 0x52
    assert inverse[0x63] == 0x00
    assert inverse[0xFF] == 0x7D
    assert list(inverse) == list(INV_SBOX)


def test_inverse_sbox_undoes_sbox():
    inverse = invert_sbox(SBOX)
    assert all(inverse[SBOX[value]] == value for value in range(256))
    assert all(SBOX[inverse[value]] == value for value in range(256))


def test_sizes():
    assert len(invert_sbox(SBOX)) == 256
    assert len(invert_sbox(INV_SBOX)) == 256
    assert len(RCON) == ROUNDS
    assert BLOCK_SIZE == 16


def test_rcon_is_successive_doubling():
    assert RCON[0] == 0x01000000
    assert RCON[-1] == 0x36000000
    for current, following in zip(RCON, RCON[1:]):
        assert following >> 24 == xtime(current >> 24)
        assert following & 0x00FFFFFF == 0


def test_xtime_worked_example():
    assert xtime(0x57) == 0xAE


def test_gf_mul_worked_example():
    assert gf_mul(0x57, 0x83) == 0xC1


@given(byte_values)
def test_xtime_is_multiplication_by_two(value):
    assert xtime(value) == gf_mul(value, 0x02)


@given(byte_values)
def test_identity_and_zero(value):
    assert gf_mul(value, 1) == value
    assert gf_mul(1, value) == value
    assert gf_mul(value, 0) == 0


@given(byte_values, byte_values)
def test_gf_mul_commutes(a, b):
    assert gf_mul(a, b) == gf_mul(b, a)


@given(byte_values, byte_values, byte_values)
def test_gf_mul_associates_and_distributes(a, b, c):
    assert gf_mul(gf_mul(a, b), c) == gf_mul(a, gf_mul(b, c))
    assert gf_mul(a, b ^ c) == gf_mul(a, b) ^ gf_mul(a, c)


def test_every_nonzero_element_has_an_inverse():
    for a in range(1, 256):
        assert sum(1 for b in range(1, 256) if gf_mul(a, b) == 1) == 1


def test_mix_column_coefficients_are_inverse():
    forward = (0x02, 0x03, 0x01, 0x01)
    backward = (0x0E, 0x0B, 0x0D, 0x09)
    # Product of the two circulant matrices must be the identity.
    for row in range(4):
        for col in range(4):
            total = 0
            for k in range(4):
                total ^= gf_mul(forward[(k - row) % 4], backward[(col - k) % 4])
            assert total == (1 if row == col else 0)


@pytest.mark.parametrize("bad", [-1, 256, 1000])
def test_xtime_rejects_non_bytes(bad):
    with pytest.raises(ValueError):
        xtime(bad)


@pytest.mark.parametrize("a, b", [(256, 1), (1, 256), (-1, 3)])
def test_gf_mul_rejects_non_bytes(a, b):
    with pytest.raises(ValueError):
        gf_mul(a, b)


def test_invert_sbox_round_trip():
    assert invert_sbox(INV_SBOX) == SBOX
    assert invert_sbox(invert_sbox(SBOX)) == SBOX


def test_invert_identity_table():
    identity = bytes(range(256))
    assert invert_sbox(identity) == identity


@given(st.permutations(list(range(256))))
def test_invert_arbitrary_permutation(perm):
    inverse = invert_sbox(perm)
    assert all(inverse[perm[i]] == i for i in range(256))


def test_invert_sbox_rejects_wrong_length():
    with pytest.raises(ValueError):
        invert_sbox(bytes(range(255)))


def test_invert_sbox_rejects_duplicates():
    table = list(range(256))
    table[1] = 0
    with pytest.raises(ValueError):
        invert_sbox(table)


def test_invert_sbox_rejects_out_of_range_entries():
    table = list(range(256))
    table[5] = 300
    with pytest.raises(ValueError):
        invert_sbox(table)