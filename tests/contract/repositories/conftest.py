"""Pytest fixtures for repository contract tests.

Provided fixtures
-----------------
- **uow**: Parametrized fixture yielding an *entered* unit of work per test.
  Its ``customers``, ``products`` and ``orders`` repositories share one
  store (in-memory) or one connection (SQLite), so cross-aggregate
  references behave the same way in both backends.
- **stored_customer** / **stored_products**: seed data most order tests need.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

import pytest

from storefront.adapters.repositories.in_memory_adapters import InMemoryStoreData
from storefront.adapters.unit_of_work import InMemoryUnitOfWork, SqlAlchemyUnitOfWork

if TYPE_CHECKING:
    from storefront.domain.aggregates import Customer, Product
    from storefront.interfaces.unit_of_work import AbstractUnitOfWork

# pylint: disable=redefined-outer-name


@pytest.fixture(params=["memory", "sqlite"])
def uow(request: pytest.FixtureRequest) -> Iterator[AbstractUnitOfWork]:
    """Yield an entered unit of work for the requested backend.

    Current params:
      - `"memory"` → `InMemoryUnitOfWork` (non-durable, in-memory)
      - `"sqlite"` → `SqlAlchemyUnitOfWork` over an in-memory SQLite engine

    Nothing is committed; leaving the block rolls every write back.
    """

    match request.param:
        case "memory":
            unit: AbstractUnitOfWork = InMemoryUnitOfWork(InMemoryStoreData())
        case "sqlite":
            unit = SqlAlchemyUnitOfWork(
                request.getfixturevalue("sqlite_engine_memory")
            )
        case _:
            raise ValueError(f"unknown repository backend: {request.param}")

    with unit:
        yield unit


@pytest.fixture
def stored_customer(uow, make_customer) -> Customer:
    """A customer already stored in `uow`."""
    customer = make_customer("c1")
    uow.customers.create(customer)
    return customer


@pytest.fixture
def stored_products(uow, make_product) -> dict[str, Product]:
    """Two products already stored in `uow`, keyed by id."""
    products = {
        "p1": make_product("p1", "Product 1", 12),
        "p2": make_product("p2", "Product 2", 18),
    }
    for product in products.values():
        uow.products.create(product)
    return products
