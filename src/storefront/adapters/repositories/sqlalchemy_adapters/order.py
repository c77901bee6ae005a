"""SQLAlchemy-backed Order repository.

The Order aggregate spans two tables: one ``orders`` row for the root and one
``order_items`` row per item. This module owns the mapping in both
directions:

- `order_to_rows` flattens an aggregate into its parent row and child rows.
  The parent's ``total`` column is computed from `Order.total()` at write time.
- `rows_to_orders` takes the flat rows of an ``orders LEFT JOIN order_items``
  read, groups child rows by order id and rebuilds one aggregate per group.

Updates use a cascade replace: the order's child rows are deleted and the
current in-memory items re-inserted, so after `update` the stored rows mirror
the aggregate exactly without diffing item lists.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from sqlalchemy import Select, delete, insert, select, update
from sqlalchemy.engine import Connection

from storefront.domain.aggregates import Order, OrderItem
from storefront.interfaces.repositories import NotFoundError, OrderRepository

from ...db.schema import order_items, orders
from .errors import storage_errors

logger = logging.getLogger(__name__)

ENTITY_NAME = "Order"

# Labels for the joined read; item columns are prefixed to avoid clashes.
_JOINED_COLUMNS = (
    orders.c.id.label("order_id"),
    orders.c.customer_id.label("customer_id"),
    orders.c.total.label("total"),
    order_items.c.id.label("item_id"),
    order_items.c.name.label("item_name"),
    order_items.c.price.label("item_price"),
    order_items.c.product_id.label("item_product_id"),
    order_items.c.quantity.label("item_quantity"),
)


class SqlAlchemyOrderRepository(OrderRepository):
    """Order repository over the ``orders`` and ``order_items`` tables.

    All statements of one call run on the bound connection, inside the
    transaction owned by the unit of work. A failure part-way raises
    `PersistenceError` and leaves the commit decision to the caller, which
    rolls back, so no partial aggregate is ever committed.
    """

    def __init__(self, connection: Connection):
        self.connection = connection

    # --------------------------------------------------------------------- #
    # Writes
    # --------------------------------------------------------------------- #

    def create(self, entity: Order) -> None:
        order_row, item_rows = order_to_rows(entity)
        with storage_errors(f"create {ENTITY_NAME} {entity.id}"):
            self.connection.execute(insert(orders).values(**order_row))
            self.connection.execute(insert(order_items), item_rows)
        logger.debug(
            "Created order %s with %d item(s), total=%s",
            entity.id,
            len(item_rows),
            order_row["total"],
        )

    def update(self, entity: Order) -> None:
        order_row, item_rows = order_to_rows(entity)
        with storage_errors(f"update {ENTITY_NAME} {entity.id}"):
            result = self.connection.execute(
                update(orders)
                .where(orders.c.id == entity.id)
                .values(
                    customer_id=order_row["customer_id"], total=order_row["total"]
                )
            )
            if result.rowcount == 0:
                raise NotFoundError(ENTITY_NAME, entity.id)

            # Cascade replace of the child rows.
            self.connection.execute(
                delete(order_items).where(order_items.c.order_id == entity.id)
            )
            self.connection.execute(insert(order_items), item_rows)
        logger.debug(
            "Updated order %s: replaced items with %d row(s), total=%s",
            entity.id,
            len(item_rows),
            order_row["total"],
        )

    # --------------------------------------------------------------------- #
    # Reads
    # --------------------------------------------------------------------- #

    def find(self, entity_id: str) -> Order:
        stmt = self._joined_select().where(orders.c.id == entity_id)
        with storage_errors(f"find {ENTITY_NAME} {entity_id}"):
            rows = self.connection.execute(stmt).mappings().all()
        if not rows:
            raise NotFoundError(ENTITY_NAME, entity_id)
        return rows_to_orders(rows)[0]

    def find_all(self) -> Sequence[Order]:
        with storage_errors(f"list {ENTITY_NAME} rows"):
            rows = self.connection.execute(self._joined_select()).mappings().all()
        return rows_to_orders(rows)

    # --------------------------------------------------------------------- #
    # Internals
    # --------------------------------------------------------------------- #

    @staticmethod
    def _joined_select() -> Select:
        return (
            select(*_JOINED_COLUMNS)
            .select_from(
                orders.outerjoin(order_items, order_items.c.order_id == orders.c.id)
            )
            .order_by(orders.c.id.asc(), order_items.c.position.asc())
        )


# --------------------------------------------------------------------------- #
# Mapping
# --------------------------------------------------------------------------- #


def order_to_rows(order: Order) -> tuple[dict[str, Any], list[dict[str, Any]]]:
    """Flatten an order into its ``orders`` row and ``order_items`` rows.

    Args:
        order: The aggregate to flatten.

    Returns:
        A ``(order_row, item_rows)`` pair. Item rows carry their position in
        the aggregate so reads can restore the item order.
    """
    order_row = {
        "id": order.id,
        "customer_id": order.customer_id,
        "total": order.total(),
    }
    item_rows = [
        {
            "id": item.id,
            "order_id": order.id,
            "product_id": item.product_id,
            "name": item.name,
            "price": item.price,
            "quantity": item.quantity,
            "position": position,
        }
        for position, item in enumerate(order.items)
    ]
    return order_row, item_rows


def rows_to_orders(rows: Iterable[Mapping[str, Any]]) -> list[Order]:
    """Rebuild Order aggregates from the flat rows of the joined read.

    Rows are grouped by ``order_id`` in the order they arrive; rows whose
    ``item_id`` is NULL (an order row without any item, which only a corrupt
    store can produce) contribute no item.

    Args:
        rows: Mappings labelled as in the repository's joined select.

    Returns:
        One aggregate per distinct ``order_id``, in first-seen order.

    Raises:
        InvalidAggregateState: If a stored order has no item rows.
    """
    groups: dict[str, dict[str, Any]] = {}
    for row in rows:
        group = groups.setdefault(
            row["order_id"],
            {"customer_id": row["customer_id"], "total": row["total"], "items": []},
        )
        if row["item_id"] is None:
            continue
        group["items"].append(
            OrderItem(
                id=row["item_id"],
                name=row["item_name"],
                price=row["item_price"],
                product_id=row["item_product_id"],
                quantity=row["item_quantity"],
            )
        )

    result = []
    for order_id, group in groups.items():
        order = Order(order_id, group["customer_id"], group["items"])
        if not math.isclose(order.total(), group["total"]):
            logger.warning(
                "Stored total %s of order %s does not match computed total %s",
                group["total"],
                order_id,
                order.total(),
            )
        result.append(order)
    return result
