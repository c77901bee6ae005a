"""Message bus implementation for handling commands."""

import logging
from collections.abc import Callable

from storefront.interfaces.unit_of_work import AbstractUnitOfWork

from .commands import Command
from .event_dispatcher import EventDispatcher

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class NoHandlerForCommand(LookupError):
    """Exception raised when no handler is found for a command."""

    def __init__(self, cmd: Command) -> None:
        super().__init__(f"No handler found for command {type(cmd).__name__}")


class MessageBus:
    """A simple message bus for handling commands.

    The main responsibility of the message bus is to route commands to their
    appropriate handlers. It also manages logging and error handling during the
    dispatch process. Additionally, it exposes the unit of work and the event
    dispatcher the handlers were wired with, for convenience.

    Args:
        uow: An instance of AbstractUnitOfWork for managing transactional operations.
            This uow should still have been injected into the command handlers, it is
            just also available here for convenience.
        dispatcher: The EventDispatcher command handlers publish domain events to.
        command_handlers: A mapping of command types to their handlers.
            Note that handlers should be callables that accept a single command argument.
            Additional dependencies (i.e. uow, dispatcher) should be injected via
            closures or other means.

    Note:
        Domain events are not routed through the bus: command handlers hand them
        to the dispatcher once their unit of work has committed.
    """

    def __init__(
        self,
        uow: AbstractUnitOfWork,
        dispatcher: EventDispatcher,
        command_handlers: dict[type[Command], Callable[..., None]],
    ) -> None:
        self.uow = uow
        self.dispatcher = dispatcher
        self._command_handlers = command_handlers

    def handle(self, cmd: Command) -> None:
        """Handle a command by dispatching it to the appropriate handler.

        Args:
            cmd: The command to handle.

        Raises:
            NoHandlerForCommand: If no handler is found for the command type.
            Exception: If the handler raises an exception.
        """

        if handler := self._command_handlers.get(type(cmd)):
            handler_name = self._get_handler_name(handler)
            logger.debug("Handling command %s with handler %s", cmd, handler_name)
            try:
                handler(cmd)
            except Exception:  # pylint: disable=broad-except
                logger.exception(
                    "Exception handling command %s with handler %s", cmd, handler_name
                )
                raise
        else:
            logger.error("No handler found for command %s", type(cmd).__name__)
            raise NoHandlerForCommand(cmd)

    @staticmethod
    def _get_handler_name(fn: Callable[..., None]) -> str:
        if hasattr(fn, "__name__"):
            return fn.__name__
        if hasattr(fn, "func") and hasattr(fn.func, "__name__"):
            return fn.func.__name__
        return repr(fn)
