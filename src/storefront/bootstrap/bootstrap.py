"""Bootstrap the message bus with handlers, unit of work and event dispatcher."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING

from storefront import config
from storefront.adapters.db.engine import make_engine
from storefront.adapters.db.metadata import metadata
from storefront.adapters.unit_of_work import SqlAlchemyUnitOfWork
from storefront.logging import configure_logging
from storefront.service_layer.event_dispatcher import EventDispatcher
from storefront.service_layer.event_handlers import EVENT_HANDLERS
from storefront.service_layer.handlers import COMMAND_HANDLERS
from storefront.service_layer.messagebus import MessageBus

if TYPE_CHECKING:
    from storefront.interfaces.event_handler import EventHandler
    from storefront.interfaces.unit_of_work import AbstractUnitOfWork
    from storefront.service_layer.commands import Command

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    message_bus: MessageBus
    dispatcher: EventDispatcher


def build_write_uow(url: str, *, create_schema: bool = False) -> SqlAlchemyUnitOfWork:
    """Build a new unit of work for write operations.

    Args:
        url: SQLAlchemy database URL.
        create_schema: Create any missing table with `metadata.create_all`.
    """
    engine = make_engine(url)
    if create_schema:
        metadata.create_all(engine)
    return SqlAlchemyUnitOfWork(engine)


def build_dispatcher(
    event_handlers: Mapping[str, Sequence[Callable[[], EventHandler]]],
) -> EventDispatcher:
    """Build an event dispatcher and register one instance of each handler."""
    dispatcher = EventDispatcher()
    for event_type, factories in event_handlers.items():
        for factory in factories:
            dispatcher.register(event_type, factory())
    return dispatcher


def build_message_bus(
    uow: AbstractUnitOfWork,
    dispatcher: EventDispatcher,
    command_handlers: dict[type[Command], Callable[..., None]],
) -> MessageBus:
    """Build a message bus with injected dependencies."""
    dependencies = {"uow": uow, "dispatcher": dispatcher}
    injected_command_handlers = {
        command_type: inject_dependencies(handler, dependencies)
        for command_type, handler in command_handlers.items()
    }

    return MessageBus(
        uow,
        dispatcher,
        command_handlers=injected_command_handlers,
    )


def bootstrap(
    db_url: str | None = None,
    *,
    create_schema: bool = False,
    event_handlers: Mapping[str, Sequence[Callable[[], EventHandler]]] | None = None,
    log_level: int | None = None,
) -> AppContainer:
    """Bootstrap the message bus with handlers, unit of work and dispatcher.

    Args:
        db_url: SQLAlchemy database URL; read from the environment when None.
        create_schema: Create missing tables on startup.
        event_handlers: Event handler wiring; defaults to `EVENT_HANDLERS`.
        log_level: When given, configure application logging with this
            console level before anything else is built.

    Raises:
        DatabaseUrlNotSetError: If no URL is given and none is configured.
    """
    if log_level is not None:
        configure_logging(level=log_level)

    uow = build_write_uow(
        db_url if db_url is not None else config.get_db_url(),
        create_schema=create_schema,
    )
    dispatcher = build_dispatcher(
        EVENT_HANDLERS if event_handlers is None else event_handlers
    )
    message_bus = build_message_bus(uow, dispatcher, COMMAND_HANDLERS)
    logger.debug(
        "Bootstrapped message bus with %d command handler(s) and handlers for %s",
        len(COMMAND_HANDLERS),
        dispatcher.registered_event_types,
    )

    return AppContainer(
        message_bus=message_bus,
        dispatcher=dispatcher,
    )


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Inject dependencies into a handler function based on its parameters."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return partial(handler, **deps)
