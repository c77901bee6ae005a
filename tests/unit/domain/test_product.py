"""Unit tests for the Product aggregate."""

import pytest

from storefront.domain import events
from storefront.domain.aggregates import Product
from storefront.domain.errors import InvalidEntityError

# pylint: disable=magic-value-comparison


def test_fields():
    """A product keeps its id, name and price."""
    product = Product("p-1", "Product 1", 10)
    assert (product.id, product.name, product.price) == ("p-1", "Product 1", 10)


def test_zero_price_is_allowed():
    """Free products are valid."""
    assert Product("p-1", "Freebie", 0).price == 0


@pytest.mark.parametrize(
    ("name", "price", "message"),
    [
        ("", 10, "name is required"),
        ("  ", 10, "name is required"),
        ("Product 1", -1, "price cannot be negative"),
    ],
)
def test_invalid_products_are_rejected(name, price, message):
    """Blank names and negative prices are rejected."""
    with pytest.raises(InvalidEntityError, match=message):
        Product("p-1", name, price)


def test_create_records_product_created():
    """The create path records a ProductCreated event."""
    product = Product.create("p-1", "Product 1", 10)

    (event,) = product.dequeue_uncommitted()
    assert isinstance(event, events.ProductCreated)
    assert event.event_data == {"id": "p-1", "name": "Product 1", "price": 10}


def test_change_name_and_price(make_product):
    """Name and price can be changed."""
    product = make_product()
    product.change_name("Product 2")
    product.change_price(25.5)
    assert product == Product("123", "Product 2", 25.5)


def test_change_price_rejects_negative(make_product):
    """A failed reprice keeps the old price."""
    product = make_product()
    with pytest.raises(InvalidEntityError):
        product.change_price(-5)
    assert product.price == 10
