"""The unit of work a command handler runs inside."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from types import TracebackType

    from .eventstore import EventStore


class AbstractUnitOfWork(abc.ABC):
    """One command's worth of event store access.

    Handlers do their reads and appends inside ``with uow:`` and call
    `commit` once at the end. Leaving the block always calls `rollback`,
    which must drop whatever was appended since the last commit and do
    nothing otherwise.
    """

    eventstore: EventStore

    def __enter__(self) -> AbstractUnitOfWork:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.rollback()

    @abc.abstractmethod
    def commit(self) -> None:
        """Make the appends since the last commit permanent."""

    @abc.abstractmethod
    def rollback(self) -> None:
        """Drop the appends since the last commit."""
