"""
Run-Length Encoding (RLE) Compression Module

Encoded data is a sequence of two-byte records: a count byte followed by
the value byte. Runs longer than MAX_RUN are split into several records.
"""

from algorithms.compressor_ABC import BytesLike, Compressor


class RleFormatError(ValueError):
    """Raised when RLE-encoded data cannot be decoded."""


class RLECompressor(Compressor):
    """Class for RLE compression and decompression"""

    MAX_RUN = 255

    @staticmethod
    def runs(data: BytesLike) -> list[tuple[int, int]]:
        """
        Splits data into runs of equal bytes.

        Args:
            data: Input data as bytes

        Returns:
            List of (count, value) tuples, every count in 1..MAX_RUN
        """
        data = bytes(data)
        if not data:
            return []

        result = []
        current_byte = data[0]
        count = 1

        for byte in data[1:]:
            if byte == current_byte and count < RLECompressor.MAX_RUN:
                count += 1
            else:
                result.append((count, current_byte))
                current_byte = byte
                count = 1

        # Add the last run
        result.append((count, current_byte))

        return result

    @staticmethod
    def compress(data: BytesLike) -> bytes:
        """Encodes bytes as (count, value) byte pairs."""
        result = bytearray()
        for count, value in RLECompressor.runs(data):
            result.append(count)
            result.append(value)
        return bytes(result)

    @staticmethod
    def decompress(data: BytesLike) -> bytes:
        """
        Decompresses RLE data.

        Args:
            data: Sequence of (count, value) byte pairs

        Returns:
            Decompressed data as bytes

        Raises:
            RleFormatError: If the data length is odd
        """
        data = bytes(data)
        if len(data) % 2 != 0:
            raise RleFormatError(
                f"RLE data length must be even, got {len(data)} bytes"
            )

        result = bytearray()
        for pos in range(0, len(data), 2):
            count, value = data[pos], data[pos + 1]
            result.extend(bytes([value]) * count)
        return bytes(result)
