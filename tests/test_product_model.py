# tests/test_product_model.py

"""Tests for the Product dataclass."""

import dataclasses
import unittest

from shop_assist.models.product import Product


class TestProductModel(unittest.TestCase):
    """Product dataclass unit tests."""

    def test_fields(self) -> None:
        """Name and price are stored as given."""
        product = Product(name="Book", price=10.0)
        self.assertEqual(product.name, "Book")
        self.assertEqual(product.price, 10.0)

    def test_equality(self) -> None:
        """Two products with identical fields are equal."""
        self.assertEqual(Product("A", 1.0), Product("A", 1.0))
        self.assertNotEqual(Product("A", 1.0), Product("A", 2.0))

    def test_immutable(self) -> None:
        """Products cannot be changed after entry."""
        product = Product("A", 1.0)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            product.price = 0.5  # type: ignore[misc]

    def test_edge_negative_price(self) -> None:
        """Negative prices are stored (no range validation)."""
        self.assertEqual(Product("Refund", -5.0).price, -5.0)

    def test_hashable(self) -> None:
        """Frozen products can be used in sets."""
        self.assertEqual(len({Product("A", 1.0), Product("A", 1.0)}), 1)


if __name__ == "__main__":
    unittest.main()
