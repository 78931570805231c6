"""Fixtures for IdGenerator contract tests."""

from collections.abc import Iterable

import pytest

from clientele.adapters.id_generators import (
    SimpleIdGenerator,
    ULIDGenerator,
    UUIDv4Generator,
)
from clientele.interfaces.id_generator import IdGenerator

GENERATORS = {
    "ulid": ULIDGenerator,
    "uuid4": UUIDv4Generator,
    "simple": SimpleIdGenerator,
}


@pytest.fixture(params=sorted(GENERATORS))
def id_generator(request: pytest.FixtureRequest) -> Iterable[IdGenerator]:
    """Yield a fresh instance of every IdGenerator under contract."""
    yield GENERATORS[request.param]()


@pytest.fixture(params=["ulid", "simple"])
def ordered_id_generator(request: pytest.FixtureRequest) -> Iterable[IdGenerator]:
    """Yield generators whose IDs sort in generation order."""
    yield GENERATORS[request.param]()
