"""Composition root: pick adapters from configuration and bind them to handlers."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING

from clientele import config
from clientele.adapters.hash_generators import TokenHashGenerator
from clientele.adapters.id_generators import ULIDGenerator, UUIDv4Generator
from clientele.adapters.unit_of_work import InMemoryUnitOfWork
from clientele.service_layer.handlers import COMMAND_HANDLERS
from clientele.service_layer.messagebus import MessageBus

if TYPE_CHECKING:
    from clientele.domain.commands import Command
    from clientele.interfaces.hash_generator import HashGenerator
    from clientele.interfaces.id_generator import IdGenerator
    from clientele.interfaces.unit_of_work import AbstractUnitOfWork

logger = logging.getLogger(__name__)

ID_GENERATORS: dict[str, type[IdGenerator]] = {
    "ulid": ULIDGenerator,
    "uuid4": UUIDv4Generator,
}


@dataclass(frozen=True)
class AppContainer:
    """The wired application.

    Callers registering customers need the generators too, because
    `RegisterCustomer.build` mints the customer ID and first hash.
    """

    message_bus: MessageBus
    id_generator: IdGenerator
    hash_generator: HashGenerator


def build_id_generator(kind: str) -> IdGenerator:
    """Instantiate the ID generator registered under `kind`.

    Raises:
        ValueError: If `kind` is not in `ID_GENERATORS`.
    """
    if (cls := ID_GENERATORS.get(kind)) is None:
        raise ValueError(f"unknown id generator type: {kind}")
    return cls()


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Bind to `handler` each dependency it declares a parameter for.

    The result takes the command as its only argument.
    """
    wanted = inspect.signature(handler).parameters
    return partial(
        handler, **{name: dep for name, dep in dependencies.items() if name in wanted}
    )


def build_message_bus(
    uow: AbstractUnitOfWork,
    command_handlers: dict[type[Command], Callable[..., None]],
    **dependencies: object,
) -> MessageBus:
    """Bind `uow` and the extra `dependencies` into every handler.

    Typical extras are `event_id_generator` and `hash_generator`.
    """
    available = {"uow": uow, **dependencies}
    return MessageBus(
        uow,
        command_handlers={
            command_type: inject_dependencies(handler, available)
            for command_type, handler in command_handlers.items()
        },
    )


def bootstrap() -> AppContainer:
    """Wire the application from `CLIENTELE_*` environment configuration.

    Raises:
        InvalidConfigError: If the environment holds an unusable value.
    """
    kind = config.get_id_generator_kind()
    nbytes = config.get_hash_bytes()
    logger.debug("Bootstrapping with %s IDs and %d-byte hashes", kind, nbytes)

    id_generator = build_id_generator(kind)
    hash_generator = TokenHashGenerator(nbytes)
    message_bus = build_message_bus(
        InMemoryUnitOfWork(),
        COMMAND_HANDLERS,
        event_id_generator=id_generator,
        hash_generator=hash_generator,
    )
    return AppContainer(
        message_bus=message_bus,
        id_generator=id_generator,
        hash_generator=hash_generator,
    )
