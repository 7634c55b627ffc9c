# shop_assist/cli/runner.py

"""Interactive shopping session: catalog, budget, plan, payment, receipt."""

import logging
from dataclasses import dataclass
from pathlib import Path

from shop_assist.cli.input_reader import InputReader
from shop_assist.config.settings import Settings
from shop_assist.models.payment import (
    PaymentApproved,
    PaymentCancelled,
    PaymentDeclined,
    PaymentMethod,
)
from shop_assist.models.product import Product
from shop_assist.services.catalog_builder import (
    build_catalog,
    build_counted_catalog,
)
from shop_assist.services.payment import PaymentSimulator
from shop_assist.services.planner import (
    catalog_total,
    plan_purchases,
    shortfall,
)
from shop_assist.storage.receipt_writer import ReceiptWriter
from shop_assist.ui.formatter import Formatter, MessageStyle, format_money

logger = logging.getLogger("shop_assist.cli")


@dataclass
class SessionOptions:
    """Per-run switches, usually filled from the command line."""

    ask_count: bool = False
    verify_withdrawal: bool = Settings.VERIFY_WITHDRAWAL
    receipts_dir: Path | None = None


class ShoppingSession:
    """Runs one pass of the shopping workflow and returns an exit code."""

    def __init__(
        self,
        formatter: Formatter,
        reader: InputReader,
        receipt_writer: ReceiptWriter | None = None,
        options: SessionOptions | None = None,
    ) -> None:
        self.formatter = formatter
        self.reader = reader
        self.options = options or SessionOptions()
        self.receipt_writer = receipt_writer or ReceiptWriter(
            self.options.receipts_dir
        )
        self.payments = PaymentSimulator(
            reader,
            formatter,
            verify_withdrawal=self.options.verify_withdrawal,
        )

    def _welcome(self) -> None:
        self.formatter.emit("")
        self.formatter.emit(
            "Welcome to the Shopping Assistant!", MessageStyle.SUCCESS, icon="🛒"
        )
        self.formatter.emit(
            "Add your items one by one and we'll help you manage your budget.",
            MessageStyle.MUTED,
        )
        self.formatter.rule()

    def _collect(self) -> list[Product]:
        if self.options.ask_count:
            return build_counted_catalog(self.reader, self.formatter)
        return build_catalog(self.reader, self.formatter)

    def _save_receipt(
        self,
        products: list[Product],
        total: float,
        method: PaymentMethod | None = None,
    ) -> Path:
        path = self.receipt_writer.write(products, total, method)
        self.formatter.emit("")
        self.formatter.emit(f"Receipt saved as {path}", MessageStyle.SUCCESS)
        return path

    def run(self) -> int:
        """Execute the workflow. Fatal errors propagate to the caller."""
        self._welcome()

        products = self._collect()
        if not products:
            self.formatter.emit("")
            self.formatter.emit(
                "No items added. Goodbye!", MessageStyle.WARNING, icon="⚠️ "
            )
            logger.info("Session ended with an empty catalog")
            return 0

        budget = self.reader.read_number(
            f"Enter your budget ({Settings.CURRENCY_SYMBOL}):"
        )

        self.formatter.emit("")
        self.formatter.emit(
            "Shopping List Analysis", MessageStyle.HEADING, icon="🔍"
        )
        self.formatter.rule("═")
        self.formatter.show_plan(plan_purchases(products, budget))

        total = catalog_total(products)
        need_to_cover = shortfall(products, budget)
        if need_to_cover <= 0:
            self.formatter.emit("")
            self.formatter.emit(
                "Great news! You can afford all items!",
                MessageStyle.SUCCESS,
                icon="🎉",
            )
            self._save_receipt(products, total)
            return 0

        logger.info(
            "Shortfall of %.2f (total %.2f, budget %.2f)",
            need_to_cover,
            total,
            budget,
        )
        self.formatter.emit("")
        self.formatter.emit("Budget Alert!", MessageStyle.ERROR, icon="⚠️ ")
        self.formatter.emit(
            f"You cannot afford all items. Shortfall: {format_money(need_to_cover)}",
            MessageStyle.ERROR,
        )
        self.formatter.emit(
            "Would you like to use an alternative payment method "
            "for the remaining amount?",
            MessageStyle.WARNING,
        )
        self.formatter.emit(
            f"Amount needing coverage: {format_money(need_to_cover)}",
            MessageStyle.WARNING,
        )

        outcome = self.payments.process(need_to_cover)
        match outcome:
            case PaymentApproved(method=method):
                self.formatter.emit("")
                self.formatter.emit(
                    "Payment successful! Completing purchase...",
                    MessageStyle.SUCCESS,
                    icon="✅",
                )
                self._save_receipt(products, total, method)
                return 0
            case PaymentDeclined(withdrawn=withdrawn):
                self.formatter.emit("")
                self.formatter.emit(
                    f"Payment declined: {format_money(withdrawn)} does not "
                    f"cover {format_money(need_to_cover)}.",
                    MessageStyle.ERROR,
                    icon="❌",
                )
            case PaymentCancelled():
                self.formatter.emit("")
                self.formatter.emit(
                    "Payment cancelled.", MessageStyle.ERROR, icon="❌"
                )

        self.formatter.emit(
            f"Available budget: {format_money(budget)}", MessageStyle.WARNING
        )
        self.formatter.emit(
            "Consider removing some items or try again later.",
            MessageStyle.MUTED,
        )
        return 0
