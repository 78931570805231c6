"""In-memory event store adapters."""

from .eventstore import InMemoryEventStore

__all__ = ["InMemoryEventStore"]
