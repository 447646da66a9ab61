"""
Command handlers behind the GUI buttons
"""
import os
from enum import Enum
from typing import Optional

from algorithms.RLE import RLECompressor
from algorithms.text_codec import TextCodec


class Action(Enum):
    ENCODE = "encode"
    DECODE = "decode"


class CodecCommands:
    """
    Context object holding everything the window needs to run a command.
    Codec errors (ValueError subclasses) and file errors (OSError) are
    left for the caller to report.
    """

    ENCODED_SUFFIX = RLECompressor.ENCODED_SUFFIX
    DECODED_SUFFIX = RLECompressor.DECODED_SUFFIX

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.last_report = ""

    def text_action(self, action: Action, text: str) -> str:
        """Encodes text to hex RLE or decodes hex RLE back to text."""
        if action is Action.ENCODE:
            result = TextCodec.encode_text(text)
        elif action is Action.DECODE:
            result = TextCodec.decode_text(text)
        else:
            raise ValueError(f"Invalid action type: {action!r}")

        if self.verbose:
            print(f"{action.value} text: {len(text)} -> {len(result)} characters")
        return result

    def output_path_for(self, action: Action, input_path: str) -> str:
        if action is Action.ENCODE:
            return input_path + self.ENCODED_SUFFIX
        if action is Action.DECODE:
            return input_path + self.DECODED_SUFFIX
        raise ValueError(f"Invalid action type: {action!r}")

    def file_action(
        self, action: Action, input_path: str, output_path: Optional[str] = None
    ) -> str:
        """
        Encodes or decodes a whole file into a sibling file.

        Args:
            action: Action.ENCODE or Action.DECODE
            input_path: File to read
            output_path: Destination, derived from input_path when omitted.
                An existing file is overwritten.

        Returns:
            Path of the written file
        """
        if output_path is None:
            output_path = self.output_path_for(action, input_path)

        if action is Action.ENCODE:
            report = RLECompressor.compress_file(input_path, output_path, self.verbose)
        elif action is Action.DECODE:
            report = RLECompressor.decompress_file(input_path, output_path, self.verbose)
        else:
            raise ValueError(f"Invalid action type: {action!r}")

        self.last_report = report
        return output_path

    def file_summary(self, output_path: str) -> str:
        """Message shown after a file command: written file plus size report."""
        return f"Saved to {os.path.basename(output_path)}\n{self.last_report}"
