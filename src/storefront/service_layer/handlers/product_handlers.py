"""Handlers relating to the product aggregate."""

from collections.abc import Callable

from storefront.domain.aggregates import Product
from storefront.interfaces.unit_of_work import AbstractUnitOfWork
from storefront.service_layer import commands
from storefront.service_layer.event_dispatcher import EventDispatcher

from .publishing import publish_events


def create_product(
    cmd: commands.CreateProduct,
    uow: AbstractUnitOfWork,
    dispatcher: EventDispatcher,
) -> None:
    """Add a product to the catalogue."""

    product = Product.create(cmd.product_id, cmd.name, cmd.price)

    with uow:
        uow.products.create(product)
        uow.commit()

    publish_events(product, dispatcher)


COMMAND_HANDLERS: dict[type, Callable[..., None]] = {
    commands.CreateProduct: create_product,
}
