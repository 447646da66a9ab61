from abc import ABC, abstractmethod
import os
from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


class Compressor(ABC):
    """
    Interface for byte-to-byte compression algorithms.

    Subclasses implement ``compress`` and ``decompress`` over whole buffers;
    the file helpers below read the input completely, run the algorithm and
    only then open the destination file.
    """

    ENCODED_SUFFIX = ".encoded"
    DECODED_SUFFIX = ".decoded"

    @staticmethod
    @abstractmethod
    def compress(data: BytesLike) -> bytes:
        """
        Compresses a byte buffer.

        Args:
            data: Input bytes

        Returns:
            Compressed bytes
        """

    @staticmethod
    @abstractmethod
    def decompress(data: BytesLike) -> bytes:
        """
        Decompresses a byte buffer produced by ``compress``.

        Args:
            data: Compressed bytes

        Returns:
            Original bytes

        Raises:
            ValueError: If the compressed data is malformed
        """

    @classmethod
    def compress_file(
        cls, input_file: str, output_file: Optional[str] = None, verbose: bool = False
    ) -> str:
        """
        Helper for compressing a file.

        Args:
            input_file: Path to the input file
            output_file: Path to the output file, ``<input_file>.encoded`` by default
            verbose: Whether to print size information

        Returns:
            Information about the compression
        """
        if output_file is None:
            output_file = input_file + cls.ENCODED_SUFFIX
        return cls._process_file(cls.compress, input_file, output_file, verbose)

    @classmethod
    def decompress_file(
        cls, input_file: str, output_file: Optional[str] = None, verbose: bool = False
    ) -> str:
        """
        Helper for decompressing a file.

        Args:
            input_file: Path to the compressed file
            output_file: Path to the output file, ``<input_file>.decoded`` by default
            verbose: Whether to print size information

        Returns:
            Information about the decompression
        """
        if output_file is None:
            output_file = input_file + cls.DECODED_SUFFIX
        return cls._process_file(cls.decompress, input_file, output_file, verbose)

    @staticmethod
    def _process_file(transform, input_file: str, output_file: str, verbose: bool) -> str:
        with open(input_file, "rb") as f:
            data = f.read()

        # transform raises before the destination is touched
        result = transform(data)

        with open(output_file, "wb") as f:
            f.write(result)

        info = Compressor.describe(len(data), len(result), os.path.basename(output_file))
        if verbose:
            print(info)
        return info

    @staticmethod
    def describe(original_size: int, result_size: int, name: str = "") -> str:
        """Formats a one-line size summary."""
        if original_size:
            ratio = f"{result_size / original_size * 100:.2f}%"
        else:
            ratio = "n/a"
        prefix = f"{name}: " if name else ""
        return (
            f"{prefix}{original_size} bytes -> {result_size} bytes (ratio {ratio})"
        )
