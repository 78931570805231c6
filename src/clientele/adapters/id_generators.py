"""Identifier sources for customers and events."""

import itertools
import threading
import uuid

from ulid import monotonic

from clientele.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class ULIDGenerator(IdGenerator):
    """Monotonic ULIDs from ``ulid-py``; the default.

    A ULID sorts by creation time, so customer and event IDs minted in one
    process come out in increasing order. Calls are serialized with a lock.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def new_id(self) -> str:
        with self._lock:
            return monotonic.new().str


class UUIDv4Generator(IdGenerator):
    """Random UUIDs. Unique but unordered."""

    def new_id(self) -> str:
        return str(uuid.uuid4())


class SimpleIdGenerator(IdGenerator):
    """Counter-based IDs left-padded with zeros: ``0...01``, ``0...02``.

    Deterministic output for tests and demos. `length` is the minimum width.
    """

    def __init__(self, length: int = 26) -> None:
        self._lock = threading.Lock()
        self._numbers = itertools.count(1)
        self._width = length

    def new_id(self) -> str:
        with self._lock:
            number = next(self._numbers)
        return str(number).zfill(self._width)
