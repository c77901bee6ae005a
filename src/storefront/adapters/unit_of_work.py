"""Unit of Work adapters for STOREFRONT.

Provides a context-managed UnitOfWork using a SQLAlchemy Connection and the
SQLAlchemy repositories, plus an in-memory counterpart.
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING

from storefront.adapters.repositories.in_memory_adapters import (
    InMemoryCustomerRepository,
    InMemoryOrderRepository,
    InMemoryProductRepository,
    InMemoryStoreData,
)
from storefront.adapters.repositories.sqlalchemy_adapters import (
    SqlAlchemyCustomerRepository,
    SqlAlchemyOrderRepository,
    SqlAlchemyProductRepository,
)
from storefront.interfaces.unit_of_work import AbstractUnitOfWork

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """SQLAlchemy-backed Unit of Work.

    Each ``with`` block opens one connection (and so one transaction); the
    repositories share it. Leaving the block rolls back whatever was not
    committed and closes the connection, on every exit path.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self.connection: Connection

    def __enter__(self):
        self.connection = self.engine.connect()
        self.customers = SqlAlchemyCustomerRepository(self.connection)
        self.products = SqlAlchemyProductRepository(self.connection)
        self.orders = SqlAlchemyOrderRepository(self.connection)
        return super().__enter__()

    def __exit__(self, *args):
        try:
            super().__exit__(*args)
        finally:
            self.connection.close()

    def commit(self):
        self.connection.commit()

    def rollback(self):
        self.connection.rollback()


class InMemoryUnitOfWork(AbstractUnitOfWork):
    """Dict-backed Unit of Work.

    Repositories write to a working copy of the shared store; `commit`
    publishes the working copy and `rollback` discards it.
    """

    def __init__(self, data: InMemoryStoreData | None = None):
        self.data = data if data is not None else InMemoryStoreData()
        self.committed = False
        self._working = copy.deepcopy(self.data)
        self._bind(self._working)

    def __enter__(self):
        self._working = copy.deepcopy(self.data)
        self._bind(self._working)
        return super().__enter__()

    def commit(self):
        self.data.customers = self._working.customers
        self.data.products = self._working.products
        self.data.orders = self._working.orders
        self._working = copy.deepcopy(self.data)
        self._bind(self._working)
        self.committed = True

    def rollback(self):
        self._working = copy.deepcopy(self.data)
        self._bind(self._working)

    def _bind(self, data: InMemoryStoreData) -> None:
        self.customers = InMemoryCustomerRepository(data)
        self.products = InMemoryProductRepository(data)
        self.orders = InMemoryOrderRepository(data)
