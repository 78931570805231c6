"""Service layer handlers."""

from collections.abc import Callable

from .customer_handlers import COMMAND_HANDLERS as CUSTOMER_COMMAND_HANDLERS

__all__ = ["COMMAND_HANDLERS"]

COMMAND_HANDLERS: dict[type, Callable[..., None]] = {
    **CUSTOMER_COMMAND_HANDLERS,
}
