"""Synchronous in-process dispatcher for domain events."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from storefront.domain.events import DomainEvent

if TYPE_CHECKING:
    from storefront.interfaces.event_handler import EventHandler

logger = logging.getLogger(__name__)


class EventHandlerError(RuntimeError):
    """Raised by `EventDispatcher.notify` when one or more handlers failed.

    Attributes:
        event: The event being dispatched.
        failures: ``(handler, exception)`` pairs in the order they occurred.
    """

    def __init__(
        self,
        event: DomainEvent,
        failures: list[tuple[EventHandler, Exception]],
    ) -> None:
        names = ", ".join(type(handler).__name__ for handler, _ in failures)
        super().__init__(
            f"{len(failures)} handler(s) failed for event {event.event_type}: {names}"
        )
        self.event = event
        self.failures = failures


class EventDispatcher:
    """Publish/subscribe registry mapping event type names to handlers.

    Handlers are kept per event type in registration order and invoked
    synchronously on the calling thread. The same handler registered twice is
    invoked twice.

    Failure policy is continue-on-error: a handler that raises is logged, the
    remaining handlers still run, and once all of them have been called an
    `EventHandlerError` listing every failure is raised. The registry itself
    is never modified by `notify`.

    There is no shared instance; create one per application (see
    `storefront.bootstrap`) or per test and pass it to whoever needs it.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = {}

    # --- Registration ---

    def register(
        self, event_type: str | type[DomainEvent], handler: EventHandler
    ) -> None:
        """Append `handler` to the handlers of `event_type`.

        Args:
            event_type: Event type name, or the event class itself.
            handler: The handler to invoke for events of that type.
        """
        key = self._key(event_type)
        self._handlers.setdefault(key, []).append(handler)
        logger.debug("Registered handler %s for %s", type(handler).__name__, key)

    def unregister(
        self, event_type: str | type[DomainEvent], handler: EventHandler
    ) -> None:
        """Remove the first registration of `handler` for `event_type`.

        Matching is by identity. Does nothing if the handler is not registered.
        """
        key = self._key(event_type)
        handlers = self._handlers.get(key, [])
        for index, registered in enumerate(handlers):
            if registered is handler:
                del handlers[index]
                logger.debug(
                    "Unregistered handler %s for %s", type(handler).__name__, key
                )
                break
        if not handlers:
            self._handlers.pop(key, None)

    def unregister_all(self) -> None:
        """Forget every registered handler."""
        self._handlers.clear()

    def handlers_for(self, event_type: str | type[DomainEvent]) -> list[EventHandler]:
        """Return a copy of the handlers registered for `event_type`, in order."""
        return list(self._handlers.get(self._key(event_type), []))

    @property
    def registered_event_types(self) -> list[str]:
        """Event type names that have at least one handler."""
        return list(self._handlers)

    # --- Dispatch ---

    def notify(self, event: DomainEvent) -> None:
        """Invoke every handler registered for the event's type.

        Does nothing when no handler is registered for the type.

        Raises:
            EventHandlerError: After all handlers ran, if any of them raised.
        """
        # Snapshot so handlers (un)registering during dispatch do not affect this run.
        handlers = list(self._handlers.get(event.event_type, []))
        if not handlers:
            logger.debug("No handlers registered for %s", event.event_type)
            return

        failures: list[tuple[EventHandler, Exception]] = []
        for handler in handlers:
            handler_name = type(handler).__name__
            logger.debug("Dispatching %s to %s", event.event_type, handler_name)
            try:
                handler.handle(event)
            except Exception as e:  # pylint: disable=broad-except
                logger.exception(
                    "Handler %s failed for event %s", handler_name, event.event_type
                )
                failures.append((handler, e))

        if failures:
            raise EventHandlerError(event, failures) from failures[0][1]

    @staticmethod
    def _key(event_type: str | type[DomainEvent]) -> str:
        return event_type if isinstance(event_type, str) else event_type.__name__
