"""Fixtures for EventStore contract tests."""

from collections.abc import Iterable

import pytest

from clientele.adapters.eventstore.in_memory_adapters import InMemoryEventStore
from clientele.interfaces.eventstore import EventStore


@pytest.fixture(params=["memory"])
def eventstore(request: pytest.FixtureRequest) -> Iterable[EventStore]:
    """Yield a fresh EventStore for each backend under contract.

    Add a backend by extending `params` and the match below.
    """
    match request.param:
        case "memory":
            yield InMemoryEventStore()
        case _:
            raise ValueError(f"unknown store type: {request.param}")
