"""Serialization of domain events into store envelopes and back."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING, Any

from clientele.domain.events import DOMAIN_EVENT_REGISTRY
from clientele.domain.utils import dict_to_dataclass
from clientele.interfaces.eventstore import EventEnvelope

if TYPE_CHECKING:
    from clientele.domain.events import DomainEvent


class EventMapper:
    """Two-way translation keyed by event class name.

    An event's payload is its ``asdict`` form, so value objects nest as
    dicts. Decoding looks the class up in `event_registry` and rebuilds the
    value objects, which re-runs their validation: a stored payload that no
    longer satisfies today's rules fails to load instead of loading wrong.
    """

    def __init__(
        self, event_registry: dict[str, type[DomainEvent]] | None = None
    ) -> None:
        self.event_registry = (
            DOMAIN_EVENT_REGISTRY if event_registry is None else event_registry
        )

    @staticmethod
    def to_envelope(
        stream_id: str,
        stream_type: str,
        version: int,
        event_id: str,
        event: DomainEvent,
    ) -> EventEnvelope:
        """Wrap `event` for storage at `version` of `stream_id`."""
        return EventEnvelope(
            event_type=type(event).__name__,
            payload=asdict(event),
            stream_id=stream_id,
            stream_type=stream_type,
            version=version,
            event_id=event_id,
        )

    def to_domain_event(self, envelope: EventEnvelope) -> DomainEvent:
        """Unwrap a stored envelope."""
        return self.from_record(envelope.event_type, envelope.payload)

    def from_record(self, event_type: str, payload: dict[str, Any]) -> DomainEvent:
        """Rebuild an event from its class name and payload.

        Also used for histories read from JSON, which carry no envelope.

        Raises:
            ValueError: If `event_type` is not in the registry.
            KeyError: If `payload` lacks a field the event requires.
            InvalidFormatError: If a value fails value-object validation.
        """
        event_cls = self.event_registry.get(event_type)
        if event_cls is None:
            raise ValueError(f"Unknown event type: {event_type}")
        return dict_to_dataclass(event_cls, payload)
