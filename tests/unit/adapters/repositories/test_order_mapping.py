"""Unit tests for the Order row mapping functions."""

from storefront.adapters.repositories.sqlalchemy_adapters import (
    order_to_rows,
    rows_to_orders,
)
from storefront.domain.aggregates import Order, OrderItem

# pylint: disable=magic-value-comparison


def _row(order_id, item_id, *, customer_id="c1", total=0.0, price=10.0, quantity=1):
    return {
        "order_id": order_id,
        "customer_id": customer_id,
        "total": total,
        "item_id": item_id,
        "item_name": f"Item {item_id}",
        "item_price": price,
        "item_product_id": "p1",
        "item_quantity": quantity,
    }


def test_order_to_rows():
    """The parent row carries the computed total; items carry their position."""
    order = Order(
        "o1",
        "c1",
        [
            OrderItem("i1", "Item 1", 10, "p1", 2),
            OrderItem("i2", "Item 2", 25, "p2", 3),
        ],
    )

    order_row, item_rows = order_to_rows(order)

    assert order_row == {"id": "o1", "customer_id": "c1", "total": 95}
    assert item_rows == [
        {
            "id": "i1",
            "order_id": "o1",
            "product_id": "p1",
            "name": "Item 1",
            "price": 10,
            "quantity": 2,
            "position": 0,
        },
        {
            "id": "i2",
            "order_id": "o1",
            "product_id": "p2",
            "name": "Item 2",
            "price": 25,
            "quantity": 3,
            "position": 1,
        },
    ]


def test_rows_to_orders_groups_by_order_id():
    """Consecutive rows of the same order become one aggregate."""
    rows = [
        _row("o1", "i1", total=30.0, price=10.0, quantity=1),
        _row("o1", "i2", total=30.0, price=20.0, quantity=1),
        _row("o2", "i3", customer_id="c2", total=10.0),
    ]

    orders = rows_to_orders(rows)

    assert [o.id for o in orders] == ["o1", "o2"]
    assert [i.id for i in orders[0].items] == ["i1", "i2"]
    assert orders[0].total() == 30
    assert orders[1].customer_id == "c2"


def test_rows_to_orders_on_no_rows():
    """No rows give no orders."""
    assert rows_to_orders([]) == []


def test_rows_to_orders_warns_on_total_mismatch(caplog):
    """A stored total that disagrees with the items is logged."""
    rows = [_row("o1", "i1", total=99.0, price=10.0, quantity=1)]

    with caplog.at_level("WARNING"):
        (order,) = rows_to_orders(rows)

    assert order.total() == 10
    assert (
        "Stored total 99.0 of order o1 does not match computed total 10.0"
        in caplog.messages
    )


def test_round_trip_preserves_the_aggregate():
    """Flattening then rebuilding yields an equal order."""
    order = Order(
        "o1",
        "c1",
        [OrderItem("i2", "B", 5, "p2", 1), OrderItem("i1", "A", 7, "p1", 2)],
    )
    order_row, item_rows = order_to_rows(order)
    joined = [
        {
            "order_id": order_row["id"],
            "customer_id": order_row["customer_id"],
            "total": order_row["total"],
            "item_id": r["id"],
            "item_name": r["name"],
            "item_price": r["price"],
            "item_product_id": r["product_id"],
            "item_quantity": r["quantity"],
        }
        for r in item_rows
    ]
    assert rows_to_orders(joined) == [order]
