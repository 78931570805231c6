"""Event-sourced aggregate base class."""

import abc
from collections.abc import Sequence
from typing import ClassVar, TypeVar

from clientele.domain.errors import AggregateIdMismatchError
from clientele.domain.events import DomainEvent

A = TypeVar("A", bound="Aggregate")


class Aggregate(abc.ABC):
    """An aggregate whose state is a left fold over its own events.

    Two paths lead through `_apply`:

    - replay (`rehydrate`), which counts the events into `version` and
      records nothing;
    - commands, which call `_begin_command` and then `_enqueue` each new
      event, so the event both mutates state and lands in the buffer
      returned by `recorded_events`.

    Subclasses implement `_apply` with one ``case`` per event type they own.
    """

    STREAM_TYPE: ClassVar[str]
    """Name under which this aggregate's streams are stored, e.g. "Customer"."""

    def __init__(self, aggregate_id: str) -> None:
        self.aggregate_id: str = aggregate_id
        self._replayed: int = 0
        self._pending: list[DomainEvent] = []

    @classmethod
    def rehydrate(
        cls: type[A], aggregate_id: str, event_stream: Sequence[DomainEvent]
    ) -> A:
        """Build an aggregate by replaying `event_stream` oldest first.

        Raises:
            InvalidHistoryError: If `_check_history` rejects the stream.
            AggregateIdMismatchError: If an event belongs to another aggregate.
            ValueError: If an event type is not handled by `_apply`.
        """
        cls._check_history(event_stream)
        aggregate = cls(aggregate_id)
        for event in event_stream:
            aggregate._mutate(event)
            aggregate._replayed += 1
        return aggregate

    @classmethod
    def _check_history(cls, event_stream: Sequence[DomainEvent]) -> None:
        """Hook to reject a history before replay; accepts anything by default."""

    def _mutate(self, event: DomainEvent) -> None:
        if event.aggregate_id != self.aggregate_id:
            raise AggregateIdMismatchError(self.aggregate_id, event.aggregate_id)
        self._apply(event)

    @abc.abstractmethod
    def _apply(self, event: DomainEvent) -> None:
        """Change state according to `event`.

        The aggregate ID has already been checked. Unknown event types must
        raise ``ValueError("Unhandled event type: <Name>")``.
        """

    # --- Recorded events ---

    def _begin_command(self) -> None:
        """Forget what the previous command recorded."""
        self._pending = []

    def _enqueue(self, event: DomainEvent) -> None:
        self._mutate(event)
        self._pending.append(event)

    @property
    def recorded_events(self) -> tuple[DomainEvent, ...]:
        """Events recorded by the latest command, oldest first."""
        return tuple(self._pending)

    def dequeue_uncommitted(self) -> list[DomainEvent]:
        """Hand over the recorded events and empty the buffer.

        Not thread-safe; an aggregate instance belongs to one command at a time.
        """
        pending, self._pending = self._pending, []
        return pending

    @property
    def version(self) -> int:
        """How many stored events the aggregate was rebuilt from."""
        return self._replayed
