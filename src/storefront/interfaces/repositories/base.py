"""Repository interfaces for STOREFRONT.

One repository per aggregate root. Repositories translate between in-memory
aggregates and storage; they never commit. Transaction boundaries belong to
the unit of work that hands them out.

Contract overview
-----------------
- `create(entity)`: persist a new entity. Storage failures (duplicate id,
  dangling foreign key, driver errors) raise `PersistenceError`.
- `update(entity)`: overwrite the stored state of an existing entity. Missing
  id raises `NotFoundError`.
- `find(entity_id)`: rebuild the entity. Missing id raises `NotFoundError`
  whose message is `"<Entity> not found"`.
- `find_all()`: every stored entity, one per stored root row, in a stable
  order (ascending id).
"""

import abc
from collections.abc import Sequence
from typing import Generic, TypeVar

from storefront.domain.aggregates import Customer, Order, Product

T = TypeVar("T")


class Repository(abc.ABC, Generic[T]):
    """Generic repository contract."""

    @abc.abstractmethod
    def create(self, entity: T) -> None:
        """Persist a new entity.

        Raises:
            PersistenceError: If the storage rejects the write.
        """

    @abc.abstractmethod
    def update(self, entity: T) -> None:
        """Persist the current state of an existing entity.

        Raises:
            NotFoundError: If no entity with the same id is stored.
            PersistenceError: If the storage rejects the write.
        """

    @abc.abstractmethod
    def find(self, entity_id: str) -> T:
        """Load an entity by id.

        Raises:
            NotFoundError: If no entity with this id is stored.
        """

    @abc.abstractmethod
    def find_all(self) -> Sequence[T]:
        """Load every stored entity, ordered by id."""


class CustomerRepository(Repository[Customer], abc.ABC):
    """Repository contract for `Customer` aggregates."""


class ProductRepository(Repository[Product], abc.ABC):
    """Repository contract for `Product` aggregates."""


class OrderRepository(Repository[Order], abc.ABC):
    """Repository contract for `Order` aggregates.

    `update` replaces the whole stored item set of the order with the
    in-memory one, and refreshes the stored total.
    """
