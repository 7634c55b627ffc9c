# shop_assist/cli/main.py

"""Entry point for the shop_assist interactive shopping assistant."""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.text import Text

from shop_assist.cli.input_reader import InputReader
from shop_assist.cli.runner import SessionOptions, ShoppingSession
from shop_assist.config.logging_config import setup_logging
from shop_assist.config.settings import Settings
from shop_assist.services.exceptions import (
    InputExhaustedError,
    ReceiptWriteError,
)
from shop_assist.ui.formatter import make_formatter

logger = logging.getLogger("shop_assist.main")

_err = Console(stderr=True)


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="shop_assist",
        description=(
            "Interactive shopping assistant: compare your list "
            "against a budget and write a receipt."
        ),
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        default=Settings.PLAIN_OUTPUT,
        help="Plain text output without colours or emoji.",
    )
    parser.add_argument(
        "--ask-count",
        action="store_true",
        default=False,
        dest="ask_count",
        help="Ask how many products up front instead of reading until 'done'.",
    )
    parser.add_argument(
        "--verify-withdrawal",
        action="store_true",
        default=Settings.VERIFY_WITHDRAWAL,
        dest="verify_withdrawal",
        help="Require a withdrawal amount that covers the shortfall.",
    )
    parser.add_argument(
        "-o",
        "--receipts-dir",
        default=None,
        dest="receipts_dir",
        help="Directory for receipt files (default: current directory).",
    )
    return parser


def run(argv: list[str] | None = None) -> int:
    """Parse *argv*, run one session and return the process exit code.

    Fatal session errors are logged here, once, and turned into exit
    code 1. Tracebacks go to the log file only.
    """
    args = _build_parser().parse_args(argv)

    formatter = make_formatter(args.plain)
    options = SessionOptions(
        ask_count=args.ask_count,
        verify_withdrawal=args.verify_withdrawal,
        receipts_dir=Path(args.receipts_dir) if args.receipts_dir else None,
    )
    session = ShoppingSession(formatter, InputReader(formatter), options=options)

    try:
        return session.run()
    except InputExhaustedError as exc:
        logger.error("Aborting: %s", exc)
        _err.print("\n[red]Input ended unexpectedly. Exiting.[/red]")
        return 1
    except ReceiptWriteError as exc:
        logger.error("Aborting: %s", exc)
        logger.debug("Receipt failure details", exc_info=True)
        _err.print()
        _err.print(Text(str(exc), style="red"))
        return 1


def main() -> None:
    """Set up logging, run a session and exit with its status."""
    try:
        log_file = setup_logging()
    except OSError as exc:
        _err.print(
            Text(f"Cannot create log directory {Settings.LOGS_DIR}: {exc}", style="red")
        )
        _err.print("[dim]Set SHOP_ASSIST_LOGS_DIR to a writable directory.[/dim]")
        sys.exit(1)
    logger.info("shop_assist starting, log file: %s", log_file)

    exit_code = run()
    logger.info("shop_assist finished with exit code %d", exit_code)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
