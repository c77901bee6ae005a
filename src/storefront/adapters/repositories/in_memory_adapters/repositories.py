"""In-memory repositories for customers, products and orders."""

from storefront.domain.aggregates import Customer, Order, Product
from storefront.interfaces.repositories import (
    CustomerRepository,
    OrderRepository,
    PersistenceError,
    ProductRepository,
)

from .base import InMemoryRepositoryBase


class InMemoryCustomerRepository(InMemoryRepositoryBase[Customer], CustomerRepository):
    """In-memory repository for `Customer` aggregates."""

    ENTITY_NAME = "Customer"
    BUCKET_ATTR = "customers"


class InMemoryProductRepository(InMemoryRepositoryBase[Product], ProductRepository):
    """In-memory repository for `Product` aggregates."""

    ENTITY_NAME = "Product"
    BUCKET_ATTR = "products"


class InMemoryOrderRepository(InMemoryRepositoryBase[Order], OrderRepository):
    """In-memory repository for `Order` aggregates.

    Mirrors the database keys: the customer and every item's product must
    already be stored, and item ids are unique across all stored orders.
    """

    ENTITY_NAME = "Order"
    BUCKET_ATTR = "orders"

    def _check_references(self, entity: Order) -> None:
        if entity.customer_id not in self._data.customers:
            raise PersistenceError(
                f"Cannot store Order {entity.id}: "
                f"unknown customer {entity.customer_id}"
            )
        for item in entity.items:
            if item.product_id not in self._data.products:
                raise PersistenceError(
                    f"Cannot store Order {entity.id}: "
                    f"unknown product {item.product_id}"
                )
        seen: set[str] = set()
        for item in entity.items:
            if item.id in seen:
                raise PersistenceError(
                    f"Cannot store Order {entity.id}: duplicate item id {item.id}"
                )
            seen.add(item.id)
        for other in self._data.orders.values():
            if other.id == entity.id:
                continue
            if taken := seen.intersection(item.id for item in other.items):
                raise PersistenceError(
                    f"Cannot store Order {entity.id}: item id {min(taken)} "
                    f"already belongs to Order {other.id}"
                )
