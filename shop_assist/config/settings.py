# shop_assist/config/settings.py

"""Central configuration for the shop_assist shopping assistant."""

import os
from pathlib import Path

from dotenv import load_dotenv

from shop_assist.models.payment import PaymentMethod

load_dotenv()


def _env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean flag such as ``1``/``true``/``yes`` from the environment."""
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


class Settings:
    """Central configuration for the shop_assist shopping assistant."""

    # --- Catalog entry ---
    SENTINEL: str = "done"              # Product name that ends entry

    # --- Money ---
    CURRENCY_SYMBOL: str = "$"

    # --- Layout ---
    RULE_WIDTH: int = 60                # Console separator width
    PLAN_NAME_WIDTH: int = 30           # Name column in the plan table
    RECEIPT_NAME_WIDTH: int = 20
    RECEIPT_PRICE_WIDTH: int = 15
    RECEIPT_RULE_WIDTH: int = 40

    # --- Payment ---
    PAYMENT_MENU: list[PaymentMethod] = [
        PaymentMethod.VISA,
        PaymentMethod.MASTERCARD,
        PaymentMethod.PAYPAL,
    ]
    VERIFY_WITHDRAWAL: bool = _env_flag("SHOP_ASSIST_VERIFY_WITHDRAWAL")

    # --- Presentation ---
    PLAIN_OUTPUT: bool = _env_flag("SHOP_ASSIST_PLAIN")

    # --- Paths ---
    # Relative to the working directory so installed copies never write
    # into site-packages.
    RECEIPTS_DIR: Path = Path(os.getenv("SHOP_ASSIST_RECEIPTS_DIR", "."))
    LOGS_DIR: Path = Path(os.getenv("SHOP_ASSIST_LOGS_DIR", "logs"))
