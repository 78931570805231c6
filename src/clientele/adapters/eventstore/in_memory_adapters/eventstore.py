"""In-memory event store.

Nothing survives the instance. Suitable for tests, the CLI and any process
that rebuilds its customers from another source on startup.
"""

from collections import defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import replace
from datetime import datetime, timezone

from clientele.interfaces.eventstore import (
    DuplicateEventIdError,
    EventEnvelope,
    EventEnvelopeBatch,
    EventStore,
    VersionConflictError,
)


class InMemoryEventStore(EventStore):
    """EventStore keeping every envelope in process memory.

    The global log is a list whose position doubles as the sequence number
    (``global_seq == index + 1``), so `read_since` is a slice. Each stream
    keeps its own list for version lookups.

    `checkpoint` / `discard_after` let an in-memory unit of work undo appends.
    """

    def __init__(self) -> None:
        self._log: list[EventEnvelope] = []
        self._streams: defaultdict[str, list[EventEnvelope]] = defaultdict(list)
        self._event_ids: set[str] = set()

    def append(
        self, events: Sequence[EventEnvelope] | EventEnvelopeBatch
    ) -> Sequence[EventEnvelope]:
        if not isinstance(events, EventEnvelopeBatch):
            events = EventEnvelopeBatch.from_events(events)

        expected = len(self._streams.get(events.stream_id, ())) + 1
        if events.starting_version != expected:
            raise VersionConflictError(
                f"expected first version {expected}, got {events.starting_version}"
            )
        for envelope in events.events:
            if envelope.event_id in self._event_ids:
                raise DuplicateEventIdError(f"duplicate event_id {envelope.event_id}")

        now = datetime.now(timezone.utc)
        stored = [
            replace(envelope, global_seq=len(self._log) + i, recorded_at=now)
            for i, envelope in enumerate(events.events, start=1)
        ]
        self._log.extend(stored)
        self._streams[events.stream_id].extend(stored)
        self._event_ids.update(e.event_id for e in stored)
        return stored

    def read_stream(
        self, stream_id: str, from_version: int = 1, to_version: int | None = None
    ) -> Iterable[EventEnvelope]:
        if from_version < 1:
            raise ValueError("from_version must be >= 1")
        if to_version is not None and to_version < from_version:
            raise ValueError("to_version must be >= from_version")

        # versions are 1-based and gapless, so they index the stream directly
        stream = self._streams.get(stream_id, [])
        yield from stream[from_version - 1 : to_version]

    def read_since(
        self, global_seq: int = 0, limit: int | None = None
    ) -> Iterable[EventEnvelope]:
        if global_seq < 0:
            raise ValueError("global_seq must be >= 0")
        if limit is not None and limit <= 0:
            raise ValueError("limit cannot be <= 0")

        end = None if limit is None else global_seq + limit
        yield from self._log[global_seq:end]

    # --- Transaction support ---

    def checkpoint(self) -> int:
        """Return the global_seq of the newest envelope (0 when empty)."""
        return len(self._log)

    def discard_after(self, checkpoint: int) -> None:
        """Forget every envelope appended after `checkpoint`.

        Args:
            checkpoint: A value returned earlier by `checkpoint()`.
        """
        for envelope in self._log[checkpoint:]:
            del self._streams[envelope.stream_id][envelope.version - 1 :]
            self._event_ids.discard(envelope.event_id)
        del self._log[checkpoint:]
