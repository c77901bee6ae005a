"""Fixtures for the command handler unit tests."""

import pytest

from storefront.adapters.unit_of_work import InMemoryUnitOfWork
from storefront.domain.events import DomainEvent
from storefront.interfaces.event_handler import EventHandler
from storefront.service_layer.event_dispatcher import EventDispatcher

# pylint: disable=too-few-public-methods


class EventSink(EventHandler[DomainEvent]):
    """Collects every event it is handed."""

    def __init__(self) -> None:
        self.events: list[DomainEvent] = []

    def handle(self, event: DomainEvent) -> None:
        self.events.append(event)


@pytest.fixture
def uow() -> InMemoryUnitOfWork:
    """A fresh in-memory unit of work."""
    return InMemoryUnitOfWork()


@pytest.fixture
def sink() -> EventSink:
    """An event handler that records what it receives."""
    return EventSink()


@pytest.fixture
def dispatcher(sink) -> EventDispatcher:
    """A dispatcher routing every known event type to `sink`."""
    dispatcher = EventDispatcher()
    for event_type in ("CustomerCreated", "CustomerAddressChanged", "ProductCreated"):
        dispatcher.register(event_type, sink)
    return dispatcher
