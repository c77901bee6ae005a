"""Handlers relating to the order aggregate."""

from collections.abc import Callable

from storefront.domain.aggregates import Order, OrderItem
from storefront.interfaces.repositories import ProductRepository
from storefront.interfaces.unit_of_work import AbstractUnitOfWork
from storefront.service_layer import commands


def place_order(cmd: commands.PlaceOrder, uow: AbstractUnitOfWork) -> None:
    """Place a new order, snapshotting product names and prices.

    Raises:
        NotFoundError: If the customer or one of the products does not exist.
        InvalidAggregateState: If the command carries no lines.
    """

    with uow:
        uow.customers.find(cmd.customer_id)
        items = [_item_for_line(line, uow.products) for line in cmd.lines]
        order = Order(cmd.order_id, cmd.customer_id, items)
        uow.orders.create(order)
        uow.commit()


def add_order_item(cmd: commands.AddOrderItem, uow: AbstractUnitOfWork) -> None:
    """Append a line to an existing order and store the new item set."""

    with uow:
        order = uow.orders.find(cmd.order_id)
        order.add_item(_item_for_line(cmd.line, uow.products))
        uow.orders.update(order)
        uow.commit()


def _item_for_line(line: commands.OrderLine, products: ProductRepository) -> OrderItem:
    product = products.find(line.product_id)
    return OrderItem(
        id=line.item_id,
        name=product.name,
        price=product.price,
        product_id=product.id,
        quantity=line.quantity,
    )


COMMAND_HANDLERS: dict[type, Callable[..., None]] = {
    commands.PlaceOrder: place_order,
    commands.AddOrderItem: add_order_item,
}
