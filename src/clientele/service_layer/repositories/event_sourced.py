"""Event-sourced repositories.

A repository turns a stream of envelopes into an aggregate and an
aggregate's recorded events back into envelopes. It holds no state of its
own: handlers create one per unit of work.
"""

from __future__ import annotations

import logging
from typing import Generic, TypeVar

from clientele.domain.aggregates import Aggregate, Customer
from clientele.interfaces.eventstore import EventEnvelope, EventStore
from clientele.interfaces.id_generator import IdGenerator

from .errors import AggregateNotFoundError, StreamTypeMismatchError
from .event_mapper import EventMapper

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods

T = TypeVar("T", bound=Aggregate)


class EventSourcedRepository(Generic[T]):
    """Loads and stores aggregates of one type through an EventStore.

    Args:
        event_store: Where the streams live.
        event_id_generator: Source of IDs for new envelopes.
        event_mapper: Serializer for events; the default knows every
            customer event.
        aggregate_cls: The aggregate type this repository rebuilds.
    """

    def __init__(
        self,
        event_store: EventStore,
        event_id_generator: IdGenerator,
        event_mapper: EventMapper | None = None,
        *,
        aggregate_cls: type[T],
    ) -> None:
        self.event_store = event_store
        self.event_id_generator = event_id_generator
        self.event_mapper = event_mapper or EventMapper()
        self.aggregate_cls = aggregate_cls

    def load(self, aggregate_id: str) -> T:
        """Rebuild the aggregate stored under `aggregate_id`.

        Raises:
            AggregateNotFoundError: If the stream is empty.
            StreamTypeMismatchError: If the stream belongs to another aggregate type.
        """
        stream = list(self.event_store.read_stream(aggregate_id))
        if not stream:
            raise AggregateNotFoundError(self.aggregate_cls.__name__, aggregate_id)

        expected = self.aggregate_cls.STREAM_TYPE
        if (found := stream[0].stream_type) != expected:
            raise StreamTypeMismatchError(aggregate_id, expected, found)

        history = [self.event_mapper.to_domain_event(envelope) for envelope in stream]
        return self.aggregate_cls.rehydrate(aggregate_id, history)

    def store_events(self, aggregate: T) -> int:
        """Append what the aggregate recorded, right after the loaded version.

        Returns:
            How many events were appended; 0 means the command was a no-op.

        Raises:
            VersionConflictError: If the stream moved on since the aggregate was loaded.
        """
        envelopes = self._to_envelopes(aggregate)
        if not envelopes:
            return 0

        self.event_store.append(envelopes)
        logger.debug(
            "Appended %s to %s stream %s",
            [envelope.event_type for envelope in envelopes],
            aggregate.STREAM_TYPE,
            aggregate.aggregate_id,
        )
        return len(envelopes)

    def _to_envelopes(self, aggregate: T) -> list[EventEnvelope]:
        first_version = aggregate.version + 1
        return [
            self.event_mapper.to_envelope(
                stream_id=aggregate.aggregate_id,
                stream_type=aggregate.STREAM_TYPE,
                version=version,
                event_id=self.event_id_generator.new_id(),
                event=event,
            )
            for version, event in enumerate(
                aggregate.dequeue_uncommitted(), start=first_version
            )
        ]


class CustomerRepository(EventSourcedRepository[Customer]):
    """Repository for Customer aggregates, one stream per customer ID."""

    def __init__(
        self,
        event_store: EventStore,
        event_id_generator: IdGenerator,
        event_mapper: EventMapper | None = None,
    ) -> None:
        super().__init__(
            event_store, event_id_generator, event_mapper, aggregate_cls=Customer
        )
