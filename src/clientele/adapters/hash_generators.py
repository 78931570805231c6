"""Hash generators for CLIENTELE."""

import secrets
import threading

from clientele.interfaces.hash_generator import HashGenerator

# pylint: disable=too-few-public-methods

DEFAULT_HASH_BYTES = 32


class TokenHashGenerator(HashGenerator):
    """Cryptographically random hex tokens from the `secrets` module.

    With the default 32 bytes of entropy, collisions between issued hashes are
    negligible.
    """

    def __init__(self, nbytes: int = DEFAULT_HASH_BYTES) -> None:
        if nbytes < 1:
            raise ValueError("nbytes must be >= 1")
        self._nbytes = nbytes

    def new_hash(self) -> str:
        """Generate a new random hex token of `2 * nbytes` characters."""
        return secrets.token_hex(self._nbytes)


class SimpleHashGenerator(HashGenerator):
    """Predictable sequential hashes ("hash-0001", "hash-0002", ...).

    Note:
        Not suitable for production use; primarily for testing and demos.
    """

    def __init__(self, prefix: str = "hash") -> None:
        self._lock = threading.Lock()
        self._counter = 0
        self._prefix = prefix

    def new_hash(self) -> str:
        """Generate the next sequential hash."""
        with self._lock:
            self._counter += 1
            return f"{self._prefix}-{self._counter:04d}"
