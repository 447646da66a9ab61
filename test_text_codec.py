import pytest

from algorithms.hex_codec import HexFormatError
from algorithms.RLE import RleFormatError
from algorithms.text_codec import TextCodec


def test_encode_text():
    assert TextCodec.encode_text("aaab") == "03610162"
    assert TextCodec.encode_text("") == ""


def test_decode_text():
    assert TextCodec.decode_text("03610162") == "aaab"
    assert TextCodec.decode_text("") == ""


def test_roundtrip_unicode():
    text = "λaé\n  tabs\t\tand ✓✓✓"
    assert TextCodec.decode_text(TextCodec.encode_text(text)) == text


def test_invalid_utf8_is_replaced_by_default():
    # a lone continuation byte
    assert TextCodec.decode_text("0180") == "�"
    with pytest.raises(UnicodeDecodeError):
        TextCodec.decode_text("0180", errors="strict")


def test_errors_propagate_unchanged():
    with pytest.raises(HexFormatError):
        TextCodec.decode_text("zz")
    with pytest.raises(RleFormatError):
        TextCodec.decode_text("036101")


def test_unencodable_characters_are_replaced_by_default():
    # lone surrogate becomes "?"
    assert TextCodec.encode_text("a\ud800") == "0161013f"
    with pytest.raises(UnicodeEncodeError):
        TextCodec.encode_text("\ud800", errors="strict")
