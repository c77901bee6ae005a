"""Unit tests for the concrete domain event handlers."""

import pytest

from storefront.domain import events
from storefront.domain.value_objects import Address
from storefront.service_layer import event_handlers
from storefront.service_layer.event_dispatcher import EventDispatcher

# pylint: disable=magic-value-comparison


def test_customer_created_loggers(caplog):
    """Both CustomerCreated handlers log the event type."""
    event = events.CustomerCreated(event_data={"id": "1", "name": "Customer 1"})
    with caplog.at_level("INFO"):
        event_handlers.LogWhenCustomerIsCreatedFirst().handle(event)
        event_handlers.LogWhenCustomerIsCreatedSecond().handle(event)

    assert caplog.messages == [
        "This is the first console.log of the event: CustomerCreated",
        "This is the second console.log of the event: CustomerCreated",
    ]


def test_customer_address_changed_logger(caplog):
    """The address handler logs id, name and the new address."""
    address = Address("Street 2", 2, "Zipcode 2", "City 2")
    event = events.CustomerAddressChanged(
        event_data={"id": "1", "name": "Customer 1", "address": address}
    )
    with caplog.at_level("INFO"):
        event_handlers.LogWhenCustomerAddressChanged().handle(event)

    assert caplog.messages == [
        "Address of customer 1, Customer 1 changed to: Street 2, 2, Zipcode 2 City 2"
    ]


def test_product_created_email(caplog):
    """The product handler announces the new product."""
    event = events.ProductCreated(
        event_data={"id": "p1", "name": "Product 1", "price": 10}
    )
    with caplog.at_level("INFO"):
        event_handlers.SendEmailWhenProductIsCreated().handle(event)

    assert caplog.messages == [
        "Sending email to subscribers about new product Product 1"
    ]


@pytest.mark.parametrize(
    ("event_type", "expected"),
    [
        (
            "CustomerCreated",
            [
                event_handlers.LogWhenCustomerIsCreatedFirst,
                event_handlers.LogWhenCustomerIsCreatedSecond,
            ],
        ),
        ("CustomerAddressChanged", [event_handlers.LogWhenCustomerAddressChanged]),
        ("ProductCreated", [event_handlers.SendEmailWhenProductIsCreated]),
    ],
)
def test_default_wiring(event_type, expected):
    """The default wiring maps each event type to its handlers, in order."""
    assert event_handlers.EVENT_HANDLERS[event_type] == expected


def test_dispatching_customer_created_runs_both_loggers_in_order(caplog):
    """Through a dispatcher, the two loggers fire once each, first then second."""
    dispatcher = EventDispatcher()
    for factory in event_handlers.EVENT_HANDLERS["CustomerCreated"]:
        dispatcher.register(events.CustomerCreated, factory())

    with caplog.at_level("INFO", logger="storefront.service_layer.event_handlers"):
        dispatcher.notify(
            events.CustomerCreated(event_data={"id": "1", "name": "Customer 1"})
        )

    logged = [
        r.getMessage()
        for r in caplog.records
        if r.name == "storefront.service_layer.event_handlers"
    ]
    assert logged == [
        "This is the first console.log of the event: CustomerCreated",
        "This is the second console.log of the event: CustomerCreated",
    ]
