"""Helpers shared by command handlers."""

from storefront.domain.aggregates import Aggregate
from storefront.service_layer.event_dispatcher import EventDispatcher, EventHandlerError


def publish_events(aggregate: Aggregate, dispatcher: EventDispatcher) -> None:
    """Hand every pending event of `aggregate` to the dispatcher, oldest first.

    Called after the unit of work committed, so handlers only ever see events
    for state that was persisted. Every event is dispatched even when handlers
    of an earlier one failed.

    Raises:
        EventHandlerError: The first dispatch failure, once all events were
            dispatched. Later failures are already logged by the dispatcher.
    """
    errors: list[EventHandlerError] = []
    for event in aggregate.dequeue_uncommitted():
        try:
            dispatcher.notify(event)
        except EventHandlerError as e:
            errors.append(e)
    if errors:
        raise errors[0]
