# shop_assist/services/payment.py

"""Simulated payment for the part of the list the budget cannot cover.

No money moves anywhere. The simulator walks ``SelectingMethod ->
Processing -> Approved | Declined | Cancelled`` and returns the terminal
state as a :data:`PaymentOutcome`.

By default any method other than *Cancel* is approved. With
``verify_withdrawal`` enabled the user must also type a withdrawal
amount, and the payment is declined when it falls short.
"""

import logging

from shop_assist.cli.input_reader import InputReader
from shop_assist.config.settings import Settings
from shop_assist.models.payment import (
    PaymentApproved,
    PaymentCancelled,
    PaymentDeclined,
    PaymentMethod,
    PaymentOutcome,
)
from shop_assist.ui.formatter import Formatter, MessageStyle, format_money

logger = logging.getLogger("shop_assist.payment")


class PaymentSimulator:
    """Menu-driven payment simulation."""

    def __init__(
        self,
        reader: InputReader,
        formatter: Formatter,
        verify_withdrawal: bool = Settings.VERIFY_WITHDRAWAL,
        methods: list[PaymentMethod] | None = None,
    ) -> None:
        self.reader = reader
        self.formatter = formatter
        self.verify_withdrawal = verify_withdrawal
        self.methods = methods if methods is not None else Settings.PAYMENT_MENU

    @property
    def cancel_choice(self) -> int:
        return len(self.methods) + 1

    def _show_menu(self) -> None:
        self.formatter.emit("")
        self.formatter.emit("Payment Methods:", MessageStyle.WARNING, icon="💳")
        for number, method in enumerate(self.methods, 1):
            self.formatter.emit(f"  {number}. {method.label}", icon="•")
        self.formatter.emit(
            f"  {self.cancel_choice}. Cancel transaction",
            MessageStyle.ERROR,
            icon="•",
        )

    def select_method(self) -> PaymentMethod | None:
        """Loop on the menu until a method or *Cancel* (``None``) is chosen."""
        last = self.cancel_choice
        while True:
            self._show_menu()
            choice = self.reader.read_int(f"Enter your choice (1-{last}):")
            if 1 <= choice < last:
                return self.methods[choice - 1]
            if choice == last:
                return None
            logger.debug("Menu choice %d out of range", choice)
            self.formatter.emit(
                f"Invalid choice. Please select 1-{last}.",
                MessageStyle.ERROR,
                icon="⚠️ ",
            )

    def process(self, amount: float) -> PaymentOutcome:
        """Cover *amount* with a user-selected method."""
        method = self.select_method()
        if method is None:
            logger.info("Payment of %.2f cancelled at method selection", amount)
            return PaymentCancelled()

        self.formatter.emit("")
        self.formatter.emit(
            f"Processing payment of {format_money(amount)} via {method.label}...",
            MessageStyle.WARNING,
            icon="💰",
        )

        if self.verify_withdrawal:
            withdrawn = self.reader.read_number(
                f"Enter withdrawal amount ({Settings.CURRENCY_SYMBOL}):"
            )
            if withdrawn < amount:
                logger.info(
                    "Payment declined: withdrew %.2f of %.2f via %s",
                    withdrawn,
                    amount,
                    method.label,
                )
                return PaymentDeclined(
                    method=method, amount=amount, withdrawn=withdrawn
                )

        logger.info("Payment of %.2f approved via %s", amount, method.label)
        return PaymentApproved(method=method, amount=amount)
