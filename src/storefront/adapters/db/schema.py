"""Relational schema.

Defines the tables backing the STOREFRONT repositories. Table creation is done
with ``metadata.create_all``; schema migrations are not managed here.

Constraints (enforced here):

| Constraint                                | Purpose                              |
|-------------------------------------------|--------------------------------------|
| FK orders.customer_id -> customers.id     | an order belongs to a known customer |
| FK order_items.order_id -> orders.id      | items cascade with their order       |
| FK order_items.product_id -> products.id  | items reference a known product      |
| UNIQUE(order_id, position)                | one item per slot of an order        |
| CHECK(quantity > 0)                       | positive quantities                  |
| CHECK(price >= 0)                         | non-negative prices                  |
| CHECK(reward_points >= 0)                 | reward points never go negative      |
"""

from __future__ import annotations

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Table,
    UniqueConstraint,
)

from .metadata import metadata

__all__ = ["customers", "order_items", "orders", "products"]

customers = Table(
    "customers",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("name", String(255), nullable=False),
    Column("active", Boolean, nullable=False, default=False),
    Column("reward_points", Integer, nullable=False, default=0),
    # Address columns; all NULL when the customer has no address.
    Column("street", String(255), nullable=True),
    Column("number", Integer, nullable=True),
    Column("zipcode", String(32), nullable=True),
    Column("city", String(255), nullable=True),
    CheckConstraint("reward_points >= 0", name="non_negative_reward_points"),
    comment="One row per Customer aggregate; address stored inline.",
)

products = Table(
    "products",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("name", String(255), nullable=False),
    Column("price", Float, nullable=False),
    CheckConstraint("price >= 0", name="non_negative_price"),
    comment="One row per Product aggregate.",
)

orders = Table(
    "orders",
    metadata,
    Column("id", String(64), primary_key=True),
    Column(
        "customer_id",
        String(64),
        ForeignKey("customers.id"),
        nullable=False,
    ),
    Column(
        "total",
        Float,
        nullable=False,
        comment="Derived from the items; rewritten on every create/update.",
    ),
    Index(None, "customer_id"),
    comment="One row per Order aggregate root.",
)

order_items = Table(
    "order_items",
    metadata,
    Column("id", String(64), primary_key=True),
    Column(
        "order_id",
        String(64),
        ForeignKey("orders.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "product_id",
        String(64),
        ForeignKey("products.id"),
        nullable=False,
    ),
    Column("name", String(255), nullable=False, comment="Product name snapshot."),
    Column("price", Float, nullable=False, comment="Product price snapshot."),
    Column("quantity", Integer, nullable=False),
    Column(
        "position",
        Integer,
        nullable=False,
        comment="Index of the item within its order (0-based).",
    ),
    UniqueConstraint("order_id", "position"),
    CheckConstraint("quantity > 0", name="positive_quantity"),
    CheckConstraint("price >= 0", name="non_negative_price"),
    comment="Child rows of orders; replaced wholesale on order update.",
)
