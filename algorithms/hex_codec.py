"""Hexadecimal text representation of byte buffers"""

import string

from algorithms.compressor_ABC import BytesLike


class HexFormatError(ValueError):
    """Raised when a string is not a valid sequence of hex digit pairs."""


class HexCodec:
    """Converts bytes to lowercase hex strings and back."""

    HEX_DIGITS = frozenset(string.hexdigits)

    @staticmethod
    def to_hex(data: BytesLike) -> str:
        """Renders every byte as two lowercase hex digits."""
        return bytes(data).hex()

    @staticmethod
    def from_hex(text: str) -> bytes:
        """
        Parses a hex string, two digits per byte. Case-insensitive.

        Args:
            text: Hex string without separators or prefix

        Returns:
            Parsed bytes

        Raises:
            HexFormatError: On odd length or a non-hex character
        """
        if len(text) % 2 != 0:
            raise HexFormatError(
                f"Hex string length must be even, got {len(text)} characters"
            )

        for pos, char in enumerate(text):
            if char not in HexCodec.HEX_DIGITS:
                raise HexFormatError(
                    f"Invalid hex character {char!r} at position {pos}"
                )

        # fromhex alone would skip whitespace
        return bytes.fromhex(text)
