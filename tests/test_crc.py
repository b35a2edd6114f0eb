import pytest

from crcforge.crc import Crc, reverse_bits

TEST_SEQUENCE = bytes(
    [
        0x09, 0x03, 0x5E, 0x57, 0x3F, 0xA7, 0x11, 0xF1, 0xED, 0xF4, 0xEA, 0xE1, 0x33, 0x96, 0x6A, 0x00,
        0x22, 0xE1, 0x93, 0x83, 0xC2, 0x56, 0x07, 0x48, 0x47, 0x80, 0xCD, 0x48, 0x19, 0x38, 0xA2, 0x4C,
        0x4E, 0x81, 0x05, 0xF9, 0xE8, 0x02, 0x0E, 0x5F, 0x16, 0x2D, 0x28, 0x11, 0x45, 0x0E, 0x1C, 0x4F,
        0x84, 0x63, 0x84, 0x1E, 0x2F, 0x28, 0x6E, 0x26, 0x12, 0xBC, 0xC3, 0x82, 0x11, 0x70, 0x18, 0x41,
    ]
)


@pytest.mark.parametrize(
    "value, width, expected",
    [
        (0x01, 8, 0x80),
        (0x12, 8, 0x48),
        (0x0F, 8, 0xF0),
        (0x0001, 16, 0x8000),
        (0x1234, 16, 0x2C48),
        (0x00000001, 32, 0x80000000),
        (0x1, 64, 0x8000000000000000),
        (0xBF, 8, 0xFD),
    ],
)
def test_reverse_bits_values(value, width, expected):
    assert reverse_bits(value, width) == expected


@pytest.mark.parametrize("width", [8, 16, 32, 64])
def test_reverse_bits_is_involution(width):
    value = 0x1D2C3B4A59687786 & ((1 << width) - 1)
    assert reverse_bits(reverse_bits(value, width), width) == value


def test_reverse_bits_rejects_bad_width():
    with pytest.raises(ValueError):
        reverse_bits(1, 12)


def test_reverse_bits_rejects_oversized_value():
    with pytest.raises(ValueError):
        reverse_bits(0x100, 8)


def test_mixed_reflection_in_true_out_false():
    crc = Crc(32, 0x4C11DB7, 0xAB111FF, True, False, 0xFFFFFFFF)
    assert crc.calc() == 0xF54EEE00
    assert crc.calc(TEST_SEQUENCE) == 0xEB8C5295


def test_mixed_reflection_in_false_out_true():
    crc = Crc(32, 0x4C11DB7, 0xAB111FF, False, True, 0xFFFFFFFF)
    assert crc.calc() == 0x007772AF
    assert crc.calc(TEST_SEQUENCE) == 0xB6607917


def test_empty_input_returns_reflected_init():
    crc = Crc(8, 0x31, 0xBF, True, True, 0x00)
    assert crc.calc(b"") == 0xFD
    assert crc.null_crc() == 0xFD


def test_custom_crc8_two_bytes():
    assert Crc(8, 0x9B, 0x00, False, False, 0x00).calc(bytes([0xFF, 0x01])) == 0x2A


def test_custom_crc8_one_byte():
    assert Crc(8, 0x9B, 0xFF, False, False, 0x00).calc(bytes([0x01])) == 0xE0


@pytest.mark.parametrize(
    "crc",
    [
        Crc(8, 0x12, 0x34, True, True, 0xFF),
        Crc(16, 0x1021, 0xFFFF, False, False, 0x0000),
        Crc(32, 0x4C11DB7, 0xAB111FF, True, False, 0xFFFFFFFF),
        Crc(64, 0x42F0E1EBA9EA3693, 0xFFFFFFFFFFFFFFFF, True, True, 0xFFFFFFFFFFFFFFFF),
    ],
)
def test_chunked_equals_single_pass(crc):
    whole = crc.calc(TEST_SEQUENCE)
    partial = crc.calc(TEST_SEQUENCE[:10])
    assert crc.calc(TEST_SEQUENCE[10:], partial) == whole
    assert crc.calc(TEST_SEQUENCE, crc.null_crc()) == whole


def test_table_shape_and_first_entries():
    table = Crc(8, 0x07, 0x00, False, False, 0x00).table()
    assert len(table) == 256
    assert table[0] == 0x00
    assert table[1] == 0x07


def test_table_entries_fit_width():
    crc = Crc(16, 0x8005, 0x0000, True, True, 0x0000)
    assert all(0 <= entry <= 0xFFFF for entry in crc.table())


def test_accepts_bytearray_memoryview_and_list():
    crc = Crc(8, 0x07, 0x00, False, False, 0x00)
    data = [0x12, 0x5A, 0x23, 0x19, 0x92, 0xF3, 0xDE, 0xC2, 0x5A, 0x1F, 0x91, 0xA3]
    assert crc.calc(data) == 0x71
    assert crc.calc(bytearray(data)) == 0x71
    assert crc.calc(memoryview(bytes(data))) == 0x71


def test_rejects_int_data():
    with pytest.raises(TypeError):
        Crc(8, 0x07, 0x00, False, False, 0x00).calc(5)


def test_rejects_oversized_prior_crc():
    with pytest.raises(ValueError):
        Crc(8, 0x07, 0x00, False, False, 0x00).calc(b"a", 0x1FF)


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(width=12, poly=0x07, init=0, refl_in=False, refl_out=False, xor_out=0),
        dict(width=8, poly=0x107, init=0, refl_in=False, refl_out=False, xor_out=0),
        dict(width=8, poly=0x07, init=0x100, refl_in=False, refl_out=False, xor_out=0),
        dict(width=8, poly=0x07, init=0, refl_in=False, refl_out=False, xor_out=-1),
    ],
)
def test_invalid_parameters_raise(kwargs):
    with pytest.raises(ValueError):
        Crc(**kwargs)


def test_reflection_flags_must_be_bool():
    with pytest.raises(TypeError):
        Crc(8, 0x07, 0x00, 1, False, 0x00)