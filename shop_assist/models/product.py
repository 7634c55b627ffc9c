# shop_assist/models/product.py

"""Product data model shared by catalog entry, planning and receipts."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Product:
    """A single item on the shopping list."""

    name: str
    price: float
