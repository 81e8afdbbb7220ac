"""
File handling utilities for Fibonacci results.
Writes the exact decimal value of a result to disk and reads it back.
"""

import logging
from pathlib import Path
from typing import Union

from core.bigint import to_decimal, parse_decimal
from core.errors import OutputWriteFailure
from core.timing import Stopwatch, TimingRecord

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class ResultFileHandler:
    def __init__(self, encoding: str = 'utf-8'):
        """
        Initialize result file handler.

        Args:
            encoding: Text encoding of output files
        """
        self.encoding = encoding

    def write_result(self, value: int, output_path: PathLike) -> TimingRecord:
        """
        Write value as base-10 digits followed by a newline.

        Only the write itself is timed; opening the file is not.

        Args:
            value: Integer to write
            output_path: Destination file (overwritten)

        Returns:
            TimingRecord of the write

        Raises:
            OutputWriteFailure: If the file cannot be opened or written
        """
        output_path = Path(output_path)
        text = to_decimal(value) + "\n"

        try:
            with open(output_path, 'w', encoding=self.encoding) as f:
                with Stopwatch() as watch:
                    f.write(text)
        except OSError as e:
            logger.error(f"Cannot write {output_path}: {e}")
            raise OutputWriteFailure(output_path, str(e)) from e

        logger.info(f"Wrote {len(text) - 1} digits to {output_path}")
        return watch.record

    def read_result(self, input_path: PathLike) -> int:
        """
        Read an integer previously written by write_result().

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file does not hold a decimal integer
        """
        with open(Path(input_path), 'r', encoding=self.encoding) as f:
            return parse_decimal(f.read())
