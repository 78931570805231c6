"""Interface for hash generators."""

import abc

# pylint: disable=too-few-public-methods


class HashGenerator(abc.ABC):
    """Contract for a generator of opaque random tokens.

    Generated hashes confirm email addresses, so collisions between any two
    hashes ever issued must be negligibly unlikely. A hash must never be
    derived from existing customer state.
    """

    @abc.abstractmethod
    def new_hash(self) -> str:
        """Generate a new unique hash."""
