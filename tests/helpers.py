# tests/helpers.py

"""Scripted terminal helpers shared by the session tests."""

import io

from shop_assist.cli.input_reader import InputReader
from shop_assist.ui.formatter import PlainFormatter


def scripted(*lines: str) -> tuple[InputReader, PlainFormatter, io.StringIO]:
    """Build a reader fed with *lines* and a formatter writing to a buffer."""
    out = io.StringIO()
    formatter = PlainFormatter(out)
    stdin = io.StringIO("".join(f"{line}\n" for line in lines))
    return InputReader(formatter, stdin), formatter, out
