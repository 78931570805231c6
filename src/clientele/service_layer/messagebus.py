"""Synchronous command dispatch."""

import logging
from collections.abc import Callable

from clientele.domain.commands import Command
from clientele.interfaces.unit_of_work import AbstractUnitOfWork

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods

Handler = Callable[[Command], None]


class NoHandlerForCommand(LookupError):
    """No handler is registered for the command's type."""

    def __init__(self, cmd: Command) -> None:
        super().__init__(f"No handler found for command {type(cmd).__name__}")
        self.command = cmd


class MessageBus:
    """Routes each command to the one handler registered for its exact type.

    The bus runs handlers inline and does not queue or serialize them:
    callers must not hand it two commands for the same customer at once.

    Args:
        uow: The unit of work the handlers were bound to. Kept here so
            callers and tests can reach the event store.
        command_handlers: Command type → handler taking only the command
            (see `clientele.bootstrap.bootstrap.inject_dependencies`).
    """

    def __init__(
        self,
        uow: AbstractUnitOfWork,
        command_handlers: dict[type[Command], Callable[..., None]],
    ) -> None:
        self.uow = uow
        self._command_handlers = command_handlers

    def handle(self, cmd: Command) -> None:
        """Run the handler for `cmd`.

        Raises:
            NoHandlerForCommand: If `type(cmd)` has no handler.
            Exception: Anything the handler raises, logged first.
        """
        handler = self._handler_for(cmd)
        name = _describe(handler)
        logger.debug("Handling command %s with handler %s", cmd, name)
        try:
            handler(cmd)
        except Exception:
            logger.exception("Exception handling command %s with handler %s", cmd, name)
            raise

    def _handler_for(self, cmd: Command) -> Handler:
        try:
            return self._command_handlers[type(cmd)]
        except KeyError:
            logger.error("No handler found for command %s", type(cmd).__name__)
            raise NoHandlerForCommand(cmd) from None


def _describe(handler: Handler) -> str:
    # bootstrap binds dependencies with functools.partial
    for candidate in (handler, getattr(handler, "func", None)):
        if name := getattr(candidate, "__name__", None):
            return name
    return repr(handler)
