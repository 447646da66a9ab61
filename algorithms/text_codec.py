"""RLE + hex encoding for text typed by the user"""

from algorithms.hex_codec import HexCodec
from algorithms.RLE import RLECompressor


class TextCodec:
    """
    Composes RLE with the hex representation so that encoded data can be
    shown, copied and pasted as plain text.
    """

    ENCODING = "utf-8"

    @staticmethod
    def encode_text(text: str, errors: str = "replace") -> str:
        """
        Encodes text as a hex string of RLE records.

        Args:
            text: Any string
            errors: Codec error handler for characters UTF-8 cannot encode,
                such as lone surrogates

        Returns:
            Lowercase hex string, e.g. "aaab" -> "03610162"
        """
        data = text.encode(TextCodec.ENCODING, errors)
        return HexCodec.to_hex(RLECompressor.compress(data))

    @staticmethod
    def decode_text(hex_text: str, errors: str = "replace") -> str:
        """
        Decodes a hex string of RLE records back into text.

        Args:
            hex_text: Output of ``encode_text``
            errors: Codec error handler for bytes that are not valid UTF-8

        Returns:
            Decoded text

        Raises:
            HexFormatError: If hex_text is not a valid hex string
            RleFormatError: If the decoded records are malformed
        """
        encoded = HexCodec.from_hex(hex_text)
        return RLECompressor.decompress(encoded).decode(TextCodec.ENCODING, errors)
