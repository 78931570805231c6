"""Interface for ID generators."""

import abc

# pylint: disable=too-few-public-methods


class IdGenerator(abc.ABC):
    """Contract for an ID generator.

    Used both for aggregate identities (customer IDs) and for event IDs.
    Implementations must return non-empty strings that are unique across calls,
    including calls from several threads.
    """

    @abc.abstractmethod
    def new_id(self) -> str:
        """Generate a new unique identifier."""
