"""Defines the SQLAlchemy repository adapter package.

Each repository is bound to a single SQLAlchemy ``Connection`` handed out by
the unit of work. Repositories issue SQLAlchemy Core statements against the
tables in ``storefront.adapters.db.schema`` and never commit themselves.
"""

from .customer import SqlAlchemyCustomerRepository
from .order import SqlAlchemyOrderRepository, order_to_rows, rows_to_orders
from .product import SqlAlchemyProductRepository

__all__ = [
    "SqlAlchemyCustomerRepository",
    "SqlAlchemyOrderRepository",
    "SqlAlchemyProductRepository",
    "order_to_rows",
    "rows_to_orders",
]
