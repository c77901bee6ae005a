"""Handlers relating to the customer aggregate."""

from collections.abc import Callable

from storefront.domain.aggregates import Customer
from storefront.interfaces.unit_of_work import AbstractUnitOfWork
from storefront.service_layer import commands
from storefront.service_layer.event_dispatcher import EventDispatcher

from .publishing import publish_events


def create_customer(
    cmd: commands.CreateCustomer,
    uow: AbstractUnitOfWork,
    dispatcher: EventDispatcher,
) -> None:
    """Register a new customer."""

    customer = Customer.create(cmd.customer_id, cmd.name, cmd.address)

    with uow:
        uow.customers.create(customer)
        uow.commit()

    publish_events(customer, dispatcher)


def change_customer_address(
    cmd: commands.ChangeCustomerAddress,
    uow: AbstractUnitOfWork,
    dispatcher: EventDispatcher,
) -> None:
    """Move a customer to a new address."""

    with uow:
        customer = uow.customers.find(cmd.customer_id)
        customer.change_address(cmd.address)
        uow.customers.update(customer)
        uow.commit()

    publish_events(customer, dispatcher)


def activate_customer(cmd: commands.ActivateCustomer, uow: AbstractUnitOfWork) -> None:
    """Activate a customer. The customer must have an address."""

    with uow:
        customer = uow.customers.find(cmd.customer_id)
        customer.activate()
        uow.customers.update(customer)
        uow.commit()


def add_reward_points(cmd: commands.AddRewardPoints, uow: AbstractUnitOfWork) -> None:
    """Credit reward points to a customer."""

    with uow:
        customer = uow.customers.find(cmd.customer_id)
        customer.add_reward_points(cmd.points)
        uow.customers.update(customer)
        uow.commit()


COMMAND_HANDLERS: dict[type, Callable[..., None]] = {
    commands.CreateCustomer: create_customer,
    commands.ChangeCustomerAddress: change_customer_address,
    commands.ActivateCustomer: activate_customer,
    commands.AddRewardPoints: add_reward_points,
}
