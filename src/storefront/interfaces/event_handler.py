"""Interface for domain event handlers."""

import abc
from typing import Generic, TypeVar

from storefront.domain.events import DomainEvent

# pylint: disable=too-few-public-methods

E = TypeVar("E", bound=DomainEvent)


class EventHandler(abc.ABC, Generic[E]):
    """Contract for a consumer of domain events.

    Handlers are side-effecting only (logging, notifications, ...). They are
    registered on an `EventDispatcher` under an event type name and invoked
    synchronously when a matching event is published.
    """

    @abc.abstractmethod
    def handle(self, event: E) -> None:
        """React to a published event."""
