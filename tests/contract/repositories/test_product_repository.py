"""Contract tests for ProductRepository adapters."""

import pytest

from storefront.interfaces.repositories import NotFoundError, PersistenceError

# pylint: disable=magic-value-comparison


def test_create_then_find(uow, make_product):
    """A created product is found structurally equal."""
    product = make_product("p1", "Product 1", 12.5)
    uow.products.create(product)
    assert uow.products.find("p1") == product


def test_find_missing_product(uow):
    """Looking up an unknown id raises NotFoundError."""
    with pytest.raises(NotFoundError, match="^Product not found$"):
        uow.products.find("nope")


def test_update(uow, make_product):
    """Name and price changes are written back."""
    product = make_product("p1")
    uow.products.create(product)

    product.change_name("Product 2")
    product.change_price(30)
    uow.products.update(product)

    assert uow.products.find("p1") == product


def test_update_missing_product(uow, make_product):
    """Updating an unknown product raises NotFoundError."""
    with pytest.raises(NotFoundError, match="Product not found"):
        uow.products.update(make_product("nope"))


def test_duplicate_id_is_rejected(uow, make_product):
    """Creating the same id twice raises PersistenceError."""
    uow.products.create(make_product("p1"))
    with pytest.raises(PersistenceError):
        uow.products.create(make_product("p1"))


def test_find_all(uow, make_product):
    """find_all returns one product per create."""
    products = [make_product(f"p{n}", f"Product {n}", n) for n in range(1, 4)]
    for product in products:
        uow.products.create(product)

    found = list(uow.products.find_all())
    assert len(found) == len(products)
    for product in products:
        assert product in found
