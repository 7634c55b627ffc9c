# shop_assist/config/logging_config.py

"""Session audit log for the shopping assistant.

A shopping session is interactive, so the terminal is reserved for
prompts and the plan table. What the user typed and what the tool
decided (products added, rejected numbers, the greedy plan, the
shortfall, the chosen payment method, the receipt path) is recorded
in ``<logs dir>/run_<YYYYMMDD_HHMMSS>.log`` instead.

The logs directory defaults to ``./logs`` under the working directory
and can be moved with ``SHOP_ASSIST_LOGS_DIR``. Only warnings and errors
reach stderr; a fatal error is logged once, by the entry point.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from shop_assist.config.settings import Settings

_DETAILED_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | %(module)s:%(funcName)s:%(lineno)d | "
    "%(message)s"
)

_CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(logs_dir: Path | None = None) -> Path:
    """Initialise the root ``shop_assist`` logger for the current run.

    Args:
        logs_dir: Directory for the log file. Defaults to
            ``Settings.LOGS_DIR``.

    Returns:
        The :class:`~pathlib.Path` to the log file created for this run.
    """
    target_dir: Path = logs_dir if logs_dir is not None else Settings.LOGS_DIR
    target_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = target_dir / f"run_{timestamp}.log"

    root_logger = logging.getLogger("shop_assist")
    root_logger.setLevel(logging.DEBUG)

    # Prevent duplicate handlers on repeated calls (e.g. tests)
    if root_logger.handlers:
        return log_file

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(_DETAILED_FORMAT, datefmt=_DATE_FORMAT)
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(
        logging.Formatter(_CONSOLE_FORMAT, datefmt=_DATE_FORMAT)
    )

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    root_logger.info("Logging initialised, log file: %s", log_file)

    return log_file
