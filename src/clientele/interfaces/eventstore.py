"""Event store port for CLIENTELE.

Every customer owns one stream, keyed by the customer ID, holding the
serialized history of that customer (`CustomerRegistered` first). The store
only ever grows: envelopes are appended, never updated or deleted.

Appending
  A call appends one batch to one stream, all or nothing. The batch must
  continue the stream exactly where it ends (version = tip + 1), and every
  `event_id` must be new to the whole store. The store stamps each envelope
  with the next `global_seq` and the UTC `recorded_at` of the append, and
  hands the envelopes back in the order received.

Reading
  `read_stream` walks one stream by version, bounds inclusive. `read_since`
  walks the whole store by `global_seq`, strictly after the cursor. Unknown
  streams and exhausted cursors read as empty; nonsensical bounds raise
  `ValueError`.
"""

import abc
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any

# --- Errors ---


class EventStoreError(Exception):
    """Base class for CLIENTELE event store errors."""


class VersionConflictError(EventStoreError):
    """The batch does not continue the stream at its current tip.

    Usually another command for the same customer was stored first.
    """


class DuplicateEventIdError(EventStoreError):
    """An event_id of the batch is already stored."""


class InvalidEnvelopeError(EventStoreError):
    """An envelope, or a batch of them, breaks a structural rule."""


# --- Envelopes ---


@dataclass(frozen=True, slots=True)
class EventEnvelope:
    """One domain event in storable form.

    `payload` holds the event's fields as plain data. `global_seq` and
    `recorded_at` stay None until the store has accepted the envelope.
    """

    # pylint: disable=too-many-instance-attributes

    stream_id: str
    stream_type: str
    version: int
    event_id: str
    event_type: str
    payload: dict[str, Any]
    metadata: dict[str, Any] | None = None
    recorded_at: datetime | None = None
    global_seq: int | None = None

    def __post_init__(self) -> None:
        if not self.event_id.strip():
            raise InvalidEnvelopeError("event_id must be non-empty.")
        if any(
            not name.strip()
            for name in (self.stream_id, self.stream_type, self.event_type)
        ):
            raise InvalidEnvelopeError(
                "stream_id, stream_type, and event_type must be non-empty."
            )
        if self.version < 1:
            raise InvalidEnvelopeError("version must be >= 1")
        if self.global_seq is not None and self.global_seq < 1:
            raise InvalidEnvelopeError("global_seq must be >= 1 when set")
        self._check_recorded_at()

    def _check_recorded_at(self) -> None:
        if self.recorded_at is None:
            return
        offset = self.recorded_at.utcoffset()
        if offset is None:
            raise InvalidEnvelopeError("recorded_at must be tz-aware.")
        if offset != timedelta(0):
            raise InvalidEnvelopeError("recorded_at must be UTC.")

    @property
    def is_persisted(self) -> bool:
        """True once the store has assigned a global sequence number."""
        return self.global_seq is not None


@dataclass(frozen=True, slots=True)
class EventEnvelopeBatch:
    """Envelopes appended to one stream in a single, atomic call.

    A batch is never empty, never spans two streams, holds only unpersisted
    envelopes with distinct event IDs, and numbers them consecutively.
    """

    stream_id: str
    stream_type: str
    events: Sequence[EventEnvelope]

    def __post_init__(self) -> None:
        if not self.events:
            raise InvalidEnvelopeError("Empty batch is not allowed.")

        stream = (self.stream_id, self.stream_type)
        if any((e.stream_id, e.stream_type) != stream for e in self.events):
            raise InvalidEnvelopeError("Mixed streams in a single batch.")
        if any(e.is_persisted for e in self.events):
            raise InvalidEnvelopeError("global_seq must be None before persistence.")
        if len({e.event_id for e in self.events}) != len(self.events):
            raise InvalidEnvelopeError("Duplicate event_id within batch.")

        first = self.starting_version
        if any(e.version != first + i for i, e in enumerate(self.events)):
            raise InvalidEnvelopeError(
                "Versions in batch must be contiguous and ordered."
            )

    @property
    def starting_version(self) -> int:
        """Version of the first envelope."""
        return self.events[0].version

    @classmethod
    def from_events(cls, events: Sequence[EventEnvelope]) -> "EventEnvelopeBatch":
        """Wrap `events`, taking the stream from the first of them.

        Raises:
            InvalidEnvelopeError: If `events` is empty or breaks a batch rule.
        """
        if not events:
            raise InvalidEnvelopeError("Empty batch is not allowed.")
        head = events[0]
        return cls(stream_id=head.stream_id, stream_type=head.stream_type, events=events)


# --- Port ---


class EventStore(abc.ABC):
    """Append-only storage of customer event streams."""

    @abc.abstractmethod
    def append(
        self, events: EventEnvelopeBatch | Sequence[EventEnvelope]
    ) -> Sequence[EventEnvelope]:
        """Store one batch atomically and return it as persisted.

        Raises:
            InvalidEnvelopeError: If the envelopes do not form a valid batch.
            VersionConflictError: If the batch does not start at tip + 1.
            DuplicateEventIdError: If any event_id is already stored.
        """

    @abc.abstractmethod
    def read_stream(
        self, stream_id: str, from_version: int = 1, to_version: int | None = None
    ) -> Iterable[EventEnvelope]:
        """Yield one stream's envelopes by ascending version.

        Raises:
            ValueError: If from_version < 1 or to_version < from_version.
        """

    @abc.abstractmethod
    def read_since(
        self, global_seq: int = 0, limit: int | None = None
    ) -> Iterable[EventEnvelope]:
        """Yield up to `limit` envelopes stored after `global_seq`, in order.

        Raises:
            ValueError: If global_seq < 0 or limit < 1.
        """
