"""Concrete domain event handlers.

These handlers only produce side effects through logging; they stand in for
real notifications (emails, audit trails, ...).
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from storefront.domain import events
from storefront.interfaces.event_handler import EventHandler

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


# --- Customer ---


class LogWhenCustomerIsCreatedFirst(EventHandler[events.CustomerCreated]):
    """First of two loggers reacting to `CustomerCreated`."""

    def handle(self, event: events.CustomerCreated) -> None:
        logger.info("This is the first console.log of the event: %s", event.event_type)


class LogWhenCustomerIsCreatedSecond(EventHandler[events.CustomerCreated]):
    """Second of two loggers reacting to `CustomerCreated`."""

    def handle(self, event: events.CustomerCreated) -> None:
        logger.info(
            "This is the second console.log of the event: %s", event.event_type
        )


class LogWhenCustomerAddressChanged(EventHandler[events.CustomerAddressChanged]):
    """Log the new address of a customer."""

    def handle(self, event: events.CustomerAddressChanged) -> None:
        data = event.event_data
        logger.info(
            "Address of customer %s, %s changed to: %s",
            data["id"],
            data["name"],
            data["address"],
        )


# --- Product ---


class SendEmailWhenProductIsCreated(EventHandler[events.ProductCreated]):
    """Notify subscribers that a new product is available."""

    def handle(self, event: events.ProductCreated) -> None:
        logger.info(
            "Sending email to subscribers about new product %s",
            event.event_data["name"],
        )


# Default wiring used by bootstrap: event type name -> handler factories,
# registered in list order.
EVENT_HANDLERS: dict[str, list[Callable[[], EventHandler]]] = {
    "CustomerCreated": [
        LogWhenCustomerIsCreatedFirst,
        LogWhenCustomerIsCreatedSecond,
    ],
    "CustomerAddressChanged": [LogWhenCustomerAddressChanged],
    "ProductCreated": [SendEmailWhenProductIsCreated],
}
