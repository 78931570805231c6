"""Global pytest fixtures for CLIENTELE.

Also marks every test with the name of the top-level test directory it lives
in (`unit`, `contract`, `integration`, `e2e`), so that e.g. ``pytest -m unit``
selects the fast suite.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from clientele.adapters.hash_generators import SimpleHashGenerator
from clientele.adapters.id_generators import SimpleIdGenerator
from clientele.domain import commands
from clientele.interfaces.eventstore import EventEnvelope

# pylint: disable=redefined-outer-name,unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()
SUITE_MARKERS = frozenset({"unit", "contract", "integration", "e2e"})


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the suite mark (directory name under `tests/`) to each item."""
    for item in items:
        try:
            suite = item.path.resolve().relative_to(TESTS_ROOT).parts[0]
        except ValueError:
            continue
        if suite in SUITE_MARKERS and not any(
            marker.name == suite for marker in item.iter_markers()
        ):
            item.add_marker(getattr(pytest.mark, suite))


# --- Generators ---


@pytest.fixture
def id_generator() -> SimpleIdGenerator:
    """Deterministic sequential ID generator."""
    return SimpleIdGenerator()


@pytest.fixture
def hash_generator() -> SimpleHashGenerator:
    """Deterministic sequential hash generator ("hash-0001", ...)."""
    return SimpleHashGenerator()


# --- Customers ---


@pytest.fixture
def make_register_command(
    id_generator: SimpleIdGenerator, hash_generator: SimpleHashGenerator
) -> Callable[..., commands.RegisterCustomer]:
    """Factory fixture: build a RegisterCustomer command with sensible defaults.

    Example:
        ```py
        cmd = make_register_command(email_address="john@example.com")
        ```
    """

    def _make(
        email_address: str = "jane.doe@example.com",
        given_name: str = "Jane",
        family_name: str = "Doe",
    ) -> commands.RegisterCustomer:
        return commands.RegisterCustomer.build(
            email_address,
            given_name,
            family_name,
            id_generator=id_generator,
            hash_generator=hash_generator,
        )

    return _make


# --- Envelopes ---

_event_ids = itertools.count(1)


@pytest.fixture
def make_envelope() -> Callable[..., EventEnvelope]:
    """Factory for valid, pre-persist envelopes with sensible defaults.

    Defaults: stream "S1" of type "TestStream", version 1, event type
    "TestEvent", an auto-generated 26-character event_id, an empty payload,
    and no metadata, recorded_at or global_seq. Any field can be overridden.
    """

    def _make(**overrides: Any) -> EventEnvelope:
        fields: dict[str, Any] = {
            "stream_id": "S1",
            "stream_type": "TestStream",
            "version": 1,
            "event_id": f"{next(_event_ids):026d}",
            "event_type": "TestEvent",
            "payload": {},
        }
        fields.update(overrides)
        return EventEnvelope(**fields)

    return _make
