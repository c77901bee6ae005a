"""Defines the in-memory repository adapter package.

Dict-backed implementations of the repository ports, used by the service
layer's unit tests and anywhere a database is not wanted.
"""

from .repositories import (
    InMemoryCustomerRepository,
    InMemoryOrderRepository,
    InMemoryProductRepository,
)
from .store import InMemoryStoreData

__all__ = [
    "InMemoryCustomerRepository",
    "InMemoryOrderRepository",
    "InMemoryProductRepository",
    "InMemoryStoreData",
]
