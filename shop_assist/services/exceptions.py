# shop_assist/services/exceptions.py

"""Fatal error types for a shopping session.

Recoverable input mistakes (an unparsable price, an out-of-range menu
choice) are handled by re-prompting and never surface here.
"""

from pathlib import Path


class ShopAssistError(Exception):
    """Base exception for shop_assist failures that end the run."""


class InputExhaustedError(ShopAssistError):
    """Raised when standard input reaches end-of-file during a prompt."""

    def __init__(self, prompt: str) -> None:
        self.prompt = prompt
        super().__init__(f"Input ended while waiting for: {prompt!r}")


class ReceiptWriteError(ShopAssistError):
    """Raised when the receipt file cannot be created or written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Unable to write receipt {path}: {reason}")
