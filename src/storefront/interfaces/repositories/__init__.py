"""Repository ports and their errors."""

from .base import CustomerRepository, OrderRepository, ProductRepository, Repository
from .errors import NotFoundError, PersistenceError, RepositoryError

__all__ = [
    "CustomerRepository",
    "NotFoundError",
    "OrderRepository",
    "PersistenceError",
    "ProductRepository",
    "Repository",
    "RepositoryError",
]
