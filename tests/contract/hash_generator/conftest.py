"""Fixtures for HashGenerator contract tests."""

from collections.abc import Iterable

import pytest

from clientele.adapters.hash_generators import SimpleHashGenerator, TokenHashGenerator
from clientele.interfaces.hash_generator import HashGenerator


@pytest.fixture(params=["token", "token-short", "simple"])
def hash_generator(request: pytest.FixtureRequest) -> Iterable[HashGenerator]:
    """Yield a fresh instance of every HashGenerator under contract."""
    match request.param:
        case "token":
            yield TokenHashGenerator()
        case "token-short":
            yield TokenHashGenerator(nbytes=8)
        case "simple":
            yield SimpleHashGenerator()
        case _:
            raise ValueError(f"unknown hash generator type: {request.param}")
