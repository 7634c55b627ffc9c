# shop_assist/services/catalog_builder.py

"""Interactive shopping-list entry."""

import logging

from shop_assist.cli.input_reader import InputReader
from shop_assist.config.settings import Settings
from shop_assist.models.product import Product
from shop_assist.ui.formatter import Formatter, MessageStyle

logger = logging.getLogger("shop_assist.catalog")


def _read_product(reader: InputReader, name: str) -> Product:
    price = reader.read_number(
        f"Enter product price ({Settings.CURRENCY_SYMBOL}):"
    )
    logger.debug("Added product %r at %.2f", name, price)
    return Product(name=name, price=price)


def build_catalog(
    reader: InputReader,
    formatter: Formatter,
    sentinel: str = Settings.SENTINEL,
) -> list[Product]:
    """Collect products until the user types *sentinel* as a name.

    The sentinel match is case-insensitive. Giving it straight away
    returns an empty list.
    """
    products: list[Product] = []
    while True:
        if products:
            formatter.emit("")
            formatter.emit(
                f"Current items: {len(products)}",
                MessageStyle.WARNING,
                icon="📝",
            )

        name = reader.read_line(
            f"Enter product name (or '{sentinel}' to finish):"
        )
        if name.lower() == sentinel.lower():
            break

        products.append(_read_product(reader, name))
        formatter.emit("Item added successfully!", MessageStyle.SUCCESS, icon="✅")

    logger.info("Catalog complete with %d products", len(products))
    return products


def build_counted_catalog(
    reader: InputReader,
    formatter: Formatter,
    count: int | None = None,
) -> list[Product]:
    """Collect exactly *count* products, asking for the count if not given."""
    while count is None or count < 0:
        count = reader.read_int("How many products?")
        if count < 0:
            formatter.emit(
                "Please enter zero or a positive number.", MessageStyle.ERROR
            )

    products: list[Product] = []
    for index in range(1, count + 1):
        name = reader.read_line(f"Enter name of product {index}:")
        products.append(_read_product(reader, name))

    logger.info("Counted catalog complete with %d products", len(products))
    return products
