"""Errors raised by repositories when loading aggregates."""


class RepositoryError(Exception):
    """Base class for repository errors."""


class AggregateNotFoundError(RepositoryError):
    """No events are stored for the requested aggregate."""

    def __init__(self, aggregate_type_name: str, aggregate_id: str):
        super().__init__(f"{aggregate_type_name} with ID {aggregate_id} not found.")
        self.aggregate_type_name = aggregate_type_name
        self.aggregate_id = aggregate_id


class StreamTypeMismatchError(RepositoryError):
    """The stream exists but belongs to another kind of aggregate."""

    def __init__(self, aggregate_id: str, expected: str, found: str):
        super().__init__(
            f"Stream {aggregate_id} holds {found} events, not {expected} events."
        )
        self.aggregate_id = aggregate_id
        self.expected = expected
        self.found = found
