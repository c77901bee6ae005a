"""Base class for all aggregates."""

import abc

from storefront.domain.errors import InvalidEntityError
from storefront.domain.events import DomainEvent


class Aggregate(abc.ABC):
    """Generic base class for all aggregates.

    Aggregates are identified by `id` but compared structurally: two instances
    are equal when they are of the same type and `_state()` matches. Pending
    events never take part in equality, so an aggregate rebuilt from storage
    equals the one that was saved.
    """

    def __init__(self, aggregate_id: str) -> None:
        if not aggregate_id or not aggregate_id.strip():
            raise InvalidEntityError(type(self).__name__, "id is required")
        self.id: str = aggregate_id
        self._pending_events: list[DomainEvent] = []

    # --- Equality ---

    @abc.abstractmethod
    def _state(self) -> tuple[object, ...]:
        """Return the fields that define structural equality."""

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._state() == other._state()  # type: ignore[attr-defined]

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}{self._state()!r}"

    # --- Plumbing ---

    def _enqueue(self, event: DomainEvent) -> None:
        self._pending_events.append(event)

    def dequeue_uncommitted(self) -> list[DomainEvent]:
        """Dequeue all uncommitted events.

        Returns:
            A list of all events recorded since the last call to this method.

        Note: This is NOT thread-safe. It is the caller's responsibility to ensure
        that no other operations are performed on the aggregate between calls to this
        method.
        """

        uncommitted_events = self._pending_events
        self._pending_events = []
        return uncommitted_events
