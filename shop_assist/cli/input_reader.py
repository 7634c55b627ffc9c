# shop_assist/cli/input_reader.py

"""Line-oriented terminal input with re-prompting number parsing."""

import logging
import math
import sys
from typing import TextIO

from shop_assist.services.exceptions import InputExhaustedError
from shop_assist.ui.formatter import Formatter, MessageStyle

logger = logging.getLogger("shop_assist.input")


class InputReader:
    """Prompt through a formatter and read one line per prompt.

    ``read_number`` and ``read_int`` never return an invalid value: bad
    input is reported and the prompt repeats. The only way out of a
    prompt without a value is end-of-input, which raises
    :class:`InputExhaustedError`.
    """

    def __init__(self, formatter: Formatter, stream: TextIO | None = None) -> None:
        self.formatter = formatter
        self.stream = stream or sys.stdin

    def read_line(self, prompt: str) -> str:
        """Show *prompt* and return the next input line, stripped."""
        self.formatter.prompt(prompt)
        line = self.stream.readline()
        if line == "":
            raise InputExhaustedError(prompt)
        return line.strip()

    def read_number(self, prompt: str) -> float:
        """Read a finite float, re-prompting until one is entered."""
        while True:
            raw = self.read_line(prompt)
            try:
                value = float(raw)
            except ValueError:
                value = math.nan
            if math.isfinite(value):
                return value
            logger.debug("Rejected numeric input %r", raw)
            self.formatter.emit(
                "Invalid input. Please enter a valid number.",
                MessageStyle.ERROR,
                icon="⚠️ ",
            )

    def read_int(self, prompt: str) -> int:
        """Read a whole number, re-prompting until one is entered."""
        while True:
            raw = self.read_line(prompt)
            try:
                return int(raw)
            except ValueError:
                logger.debug("Rejected integer input %r", raw)
                self.formatter.emit(
                    "Invalid input. Please enter a valid number.",
                    MessageStyle.ERROR,
                    icon="⚠️ ",
                )
