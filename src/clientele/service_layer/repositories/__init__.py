"""Package for repository implementations."""

from .event_mapper import EventMapper
from .event_sourced import CustomerRepository, EventSourcedRepository

__all__ = ["CustomerRepository", "EventMapper", "EventSourcedRepository"]
