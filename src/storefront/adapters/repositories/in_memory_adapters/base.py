"""Defines the in-memory base class for repositories."""

from __future__ import annotations

import copy
from collections.abc import Sequence
from typing import Generic, TypeVar

from storefront.domain.aggregates import Aggregate
from storefront.interfaces.repositories import NotFoundError, PersistenceError

from .store import InMemoryStoreData

T = TypeVar("T", bound=Aggregate)


class InMemoryRepositoryBase(Generic[T]):
    """Shared mechanics for in-memory repositories: create, update, find.

    Entities are deep-copied on the way in and out, so callers never share
    state with the store and pending events are not carried over.
    """

    ENTITY_NAME: str  # e.g., "Customer", "Order", ...
    BUCKET_ATTR: str  # e.g., "customers", "orders", ...

    def __init__(self, data: InMemoryStoreData) -> None:
        self._data = data

    @property
    def _bucket(self) -> dict[str, T]:
        return getattr(self._data, self.BUCKET_ATTR)

    def create(self, entity: T) -> None:
        """Store a new entity.

        Raises:
            PersistenceError: If the id is already taken or a reference is dangling.
        """
        if entity.id in self._bucket:
            raise PersistenceError(
                f"Cannot create {self.ENTITY_NAME} {entity.id}: duplicate id"
            )
        self._check_references(entity)
        self._bucket[entity.id] = self._detached(entity)

    def update(self, entity: T) -> None:
        """Replace a stored entity.

        Raises:
            NotFoundError: If no entity with the same id is stored.
            PersistenceError: If a reference is dangling.
        """
        if entity.id not in self._bucket:
            raise NotFoundError(self.ENTITY_NAME, entity.id)
        self._check_references(entity)
        self._bucket[entity.id] = self._detached(entity)

    def find(self, entity_id: str) -> T:
        """Return a copy of the stored entity.

        Raises:
            NotFoundError: If no entity with this id is stored.
        """
        if (entity := self._bucket.get(entity_id)) is None:
            raise NotFoundError(self.ENTITY_NAME, entity_id)
        return self._detached(entity)

    def find_all(self) -> Sequence[T]:
        """Return copies of all stored entities, ordered by id."""
        return [self._detached(self._bucket[key]) for key in sorted(self._bucket)]

    def _check_references(self, entity: T) -> None:
        """Hook for subclasses to enforce foreign-key-like checks."""

    @staticmethod
    def _detached(entity: T) -> T:
        clone = copy.deepcopy(entity)
        clone.dequeue_uncommitted()
        return clone
