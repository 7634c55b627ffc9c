# shop_assist/storage/receipt_writer.py

"""Writes the end-of-session text receipt to disk."""

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from shop_assist.config.settings import Settings
from shop_assist.models.payment import PaymentMethod
from shop_assist.models.product import Product
from shop_assist.services.exceptions import ReceiptWriteError

logger = logging.getLogger("shop_assist.receipt")


def format_receipt(
    products: list[Product],
    total: float,
    method: PaymentMethod | None,
    issued_at: datetime,
) -> str:
    """Build the fixed-width receipt text (trailing newline included)."""
    name_w = Settings.RECEIPT_NAME_WIDTH
    price_w = Settings.RECEIPT_PRICE_WIDTH
    separator = "-" * Settings.RECEIPT_RULE_WIDTH

    lines = [
        f"Receipt - {issued_at.strftime('%Y-%m-%d %H:%M:%S')}",
        separator,
    ]
    lines.extend(
        f"{p.name:<{name_w}} {p.price:>{price_w}.2f}" for p in products
    )
    lines.append(separator)
    lines.append(f"{'TOTAL':<{name_w}} {total:>{price_w}.2f}")
    if method is not None:
        lines.append(f"Payment Method: {method.label}")

    return "\n".join(lines) + "\n"


class ReceiptWriter:
    """Saves receipts as ``receipt_YYYYMMDD_HHMMSS.txt`` files."""

    def __init__(
        self,
        receipts_dir: Path | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.receipts_dir: Path = (
            receipts_dir if receipts_dir is not None else Settings.RECEIPTS_DIR
        )
        self.clock = clock
        logger.debug("ReceiptWriter initialised, receipts_dir=%s", self.receipts_dir)

    def write(
        self,
        products: list[Product],
        total: float,
        method: PaymentMethod | None = None,
    ) -> Path:
        """Write the receipt and return its path.

        A file with the same timestamped name is overwritten. Any I/O
        failure is raised as :class:`ReceiptWriteError`.
        """
        issued_at = self.clock()
        filepath = (
            self.receipts_dir
            / f"receipt_{issued_at.strftime('%Y%m%d_%H%M%S')}.txt"
        )
        text = format_receipt(products, total, method, issued_at)

        try:
            self.receipts_dir.mkdir(parents=True, exist_ok=True)
            with open(filepath, "w", encoding="utf-8") as f:
                f.write(text)
        except OSError as exc:
            raise ReceiptWriteError(filepath, str(exc)) from exc

        logger.info(
            "Saved receipt for %d products (total %.2f) to %s",
            len(products),
            total,
            filepath,
        )
        return filepath
