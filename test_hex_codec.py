import pytest

from algorithms.hex_codec import HexCodec, HexFormatError


def test_to_hex_is_lowercase_and_padded():
    assert HexCodec.to_hex(b"") == ""
    assert HexCodec.to_hex(bytes([0, 10, 171, 255])) == "000aabff"


def test_from_hex_parses_pairs():
    assert HexCodec.from_hex("") == b""
    assert HexCodec.from_hex("03610162") == bytes([3, 0x61, 1, 0x62])


def test_from_hex_is_case_insensitive():
    assert HexCodec.from_hex("ABcdEF") == bytes([0xAB, 0xCD, 0xEF])
    assert HexCodec.to_hex(HexCodec.from_hex("ABcdEF")) == "abcdef"


def test_roundtrip_all_byte_values():
    data = bytes(range(256))
    assert HexCodec.from_hex(HexCodec.to_hex(data)) == data


def test_odd_length_is_rejected():
    with pytest.raises(HexFormatError, match="even"):
        HexCodec.from_hex("abc")


@pytest.mark.parametrize(
    "text, position",
    [("zz", 0), ("0g", 1), ("00 1", 2), ("0x10", 1)],
)
def test_invalid_characters_report_position(text, position):
    with pytest.raises(HexFormatError, match=f"position {position}"):
        HexCodec.from_hex(text)


def test_non_ascii_digits_are_rejected():
    # Arabic-Indic digits
    with pytest.raises(HexFormatError):
        HexCodec.from_hex("١٢")


def test_to_hex_accepts_memoryview():
    assert HexCodec.to_hex(memoryview(b"\x01\xfe").cast("H")) == "01fe"


def test_whitespace_between_pairs_is_rejected():
    with pytest.raises(HexFormatError, match="position 2"):
        HexCodec.from_hex("01 ff ")
