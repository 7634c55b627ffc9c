# shop_assist/models/payment.py

"""Payment method enumeration and simulated payment outcomes."""

from dataclasses import dataclass
from enum import Enum


class PaymentMethod(str, Enum):
    """Payment methods offered when the budget falls short."""

    VISA = "Visa"
    MASTERCARD = "Mastercard"
    PAYPAL = "PayPal"

    @property
    def label(self) -> str:
        """Human-readable name used in menus and receipts."""
        return self.value


@dataclass(frozen=True)
class PaymentApproved:
    """The shortfall was covered with ``method``."""

    method: PaymentMethod
    amount: float


@dataclass(frozen=True)
class PaymentDeclined:
    """The withdrawal entered for ``method`` did not cover ``amount``."""

    method: PaymentMethod
    amount: float
    withdrawn: float


@dataclass(frozen=True)
class PaymentCancelled:
    """The user backed out at the method menu."""


PaymentOutcome = PaymentApproved | PaymentDeclined | PaymentCancelled
