"""Configuration utilities for CLIENTELE.

This module centralizes small helpers and constants related to application
configuration, which is read from environment variables.
"""

import os

ID_GENERATOR_ENV = "CLIENTELE_ID_GENERATOR"  # pragma: no mutate
HASH_BYTES_ENV = "CLIENTELE_HASH_BYTES"  # pragma: no mutate

ID_GENERATOR_KINDS = ("ulid", "uuid4")
DEFAULT_ID_GENERATOR = "ulid"
DEFAULT_HASH_BYTES = 32


class ConfigError(Exception):
    """Base class for configuration errors."""


class InvalidConfigError(ConfigError):
    """Raised when an environment variable holds an unusable value."""

    def __init__(self, name: str, value: str, expected: str) -> None:
        super().__init__(f"Invalid value {value!r} for {name}: expected {expected}.")
        self.name = name
        self.value = value


def get_id_generator_kind() -> str:
    """Get the kind of ID generator to use for customer and event IDs.

    Returns:
        The lower-cased value of `CLIENTELE_ID_GENERATOR`, or "ulid" if unset.

    Raises:
        InvalidConfigError: If the value is not one of `ID_GENERATOR_KINDS`.
    """
    if not (kind := os.environ.get(ID_GENERATOR_ENV, "").strip().lower()):
        return DEFAULT_ID_GENERATOR
    if kind not in ID_GENERATOR_KINDS:
        raise InvalidConfigError(
            ID_GENERATOR_ENV, kind, f"one of {', '.join(ID_GENERATOR_KINDS)}"
        )
    return kind


def get_hash_bytes() -> int:
    """Get the number of random bytes in each confirmation hash.

    Returns:
        The value of `CLIENTELE_HASH_BYTES`, or 32 if unset.

    Raises:
        InvalidConfigError: If the value is not a positive integer.
    """
    if not (raw := os.environ.get(HASH_BYTES_ENV, "").strip()):
        return DEFAULT_HASH_BYTES
    try:
        nbytes = int(raw)
    except ValueError as e:
        raise InvalidConfigError(HASH_BYTES_ENV, raw, "a positive integer") from e
    if nbytes < 1:
        raise InvalidConfigError(HASH_BYTES_ENV, raw, "a positive integer")
    return nbytes
