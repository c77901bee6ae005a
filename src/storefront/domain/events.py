"""Events"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class DomainEvent:
    """Base class for all domain events.

    The dispatcher routes on `event_type`, which is the concrete class name.
    `event_data` is opaque to the dispatcher; only handlers interpret it.
    """

    event_data: Any
    occurred_at: datetime = field(default_factory=_utc_now)

    @property
    def event_type(self) -> str:
        """Name used as the dispatch key for this event."""
        return type(self).__name__


@dataclass(frozen=True)
class CustomerCreated(DomainEvent):
    """Event indicating that a customer has been created.

    `event_data` holds the customer `id` and `name`.
    """


@dataclass(frozen=True)
class CustomerAddressChanged(DomainEvent):
    """Event indicating that a customer's address has changed.

    `event_data` holds the customer `id`, `name` and new `address`.
    """


@dataclass(frozen=True)
class ProductCreated(DomainEvent):
    """Event indicating that a product has been created.

    `event_data` holds the product `id`, `name` and `price`.
    """
