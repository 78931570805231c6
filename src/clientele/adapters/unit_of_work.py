"""In-memory Unit of Work for CLIENTELE.

Provides a context-managed UnitOfWork over an InMemoryEventStore. Appends made
inside a `with uow:` block become permanent only when `commit()` is called;
otherwise they are discarded when the block exits.
"""

from __future__ import annotations

from clientele.adapters.eventstore.in_memory_adapters import InMemoryEventStore
from clientele.interfaces.unit_of_work import AbstractUnitOfWork


class InMemoryUnitOfWork(AbstractUnitOfWork):
    """Unit of Work backed by a (shared) in-memory event store."""

    eventstore: InMemoryEventStore

    def __init__(self, eventstore: InMemoryEventStore | None = None) -> None:
        self.eventstore = eventstore if eventstore is not None else InMemoryEventStore()
        self._checkpoint = self.eventstore.checkpoint()

    def __enter__(self):
        self._checkpoint = self.eventstore.checkpoint()
        return super().__enter__()

    def commit(self):
        self._checkpoint = self.eventstore.checkpoint()

    def rollback(self):
        self.eventstore.discard_after(self._checkpoint)
