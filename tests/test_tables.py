import pytest
from hypothesis import given
from hypothesis import strategies as st

from aesblock.primitives import SBOX, gf_mul, xtime
from aesblock.tables import TE0, TE1, TE2, TE3, TE4, generate_encryption_tables


def _rotr(word, bits):
    return ((word >> bits) | (word << (32 - bits))) & 0xFFFFFFFF


def test_first_entries_match_reference_tables():
    te0, te1, te2, te3, te4 = generate_encryption_tables(SBOX)
    assert te0[0] == 0xC66363A5
    assert te1[0] == 0xA5C66363
    assert te2[0] == 0x63A5C663
    assert te3[0] == 0x6363A5C6
    assert te4[0] == 0x63636363


def test_last_entries_match_reference_tables():
    te0, te1, te2, te3, te4 = generate_encryption_tables(SBOX)
    assert te0[255] == 0x2C16163A
    assert te1[255] == 0x3A2C1616
    assert te2[255] == 0x163A2C16
    assert te3[255] == 0x16163A2C
    assert te4[255] == 0x16161616


def test_other_reference_entries():
    te0, _, _, _, te4 = generate_encryption_tables(SBOX)
    assert te0[1] == 0xF87C7C84
    assert te0[0x52] == 0x00000000
    assert te4[0x52] == 0x00000000


def test_module_tables_equal_fresh_generation():
    assert generate_encryption_tables(SBOX) == (TE0, TE1, TE2, TE3, TE4)


def test_every_table_has_256_entries():
    for table in generate_encryption_tables(SBOX):
        assert len(table) == 256


@given(st.integers(min_value=0, max_value=255))
def test_te0_column_is_mixcolumns_of_sbox(x):
    s = SBOX[x]
    word = TE0[x]
    assert word >> 24 == xtime(s)
    assert (word >> 16) & 0xFF == s
    assert (word >> 8) & 0xFF == s
    assert word & 0xFF == gf_mul(3, s)


def test_tables_are_byte_rotations_of_te0():
    te0, te1, te2, te3, _ = generate_encryption_tables(SBOX)
    for x in range(256):
        assert te1[x] == _rotr(te0[x], 8)
        assert te2[x] == _rotr(te0[x], 16)
        assert te3[x] == _rotr(te0[x], 24)


@given(st.integers(min_value=0, max_value=255))
def test_te4_repeats_sbox_byte(x):
    assert TE4[x].to_bytes(4, "big") == bytes([SBOX[x]] * 4)


@given(st.permutations(list(range(256))))
def test_custom_sbox_tables_follow_their_sbox(sbox):
    te0, te1, _, te3, te4 = generate_encryption_tables(sbox)
    for x in (0, 17, 255):
        assert (te0[x] >> 16) & 0xFF == sbox[x]
        assert te4[x] & 0xFF == sbox[x]
        assert te1[x] == _rotr(te0[x], 8)
        assert te3[x] == _rotr(te0[x], 24)


def test_identity_sbox_zero_maps_to_zero():
    tables = generate_encryption_tables(range(256))
    assert all(table[0] == 0 for table in tables)


@pytest.mark.parametrize("length", [0, 255, 257])
def test_wrong_length_is_rejected(length):
    with pytest.raises(ValueError):
        generate_encryption_tables([0] * length)


def test_non_byte_entry_is_rejected():
    bad = list(SBOX)
    bad[10] = 256
    with pytest.raises(ValueError):
        generate_encryption_tables(bad)


def test_negative_entry_is_rejected():
    bad = list(SBOX)
    bad[0] = -1
    with pytest.raises(ValueError):
        generate_encryption_tables(bad)