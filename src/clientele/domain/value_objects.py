"""Module including value objects used across the domain layer.

Value objects are immutable and compared by value. Each validates its contents
on construction, so an invalid instance can never exist; the `build` factories
additionally normalize raw user input (surrounding whitespace) before
validation.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from clientele.domain.errors import InvalidFormatError

if TYPE_CHECKING:
    from clientele.interfaces.hash_generator import HashGenerator
    from clientele.interfaces.id_generator import IdGenerator

MAX_EMAIL_LENGTH = 254

# Deliberately permissive: one "@", no whitespace, a dotted domain whose labels
# do not start or end with a hyphen.
_EMAIL_PATTERN = re.compile(
    r"^[^@\s]+@(?!-)[A-Za-z0-9-]+(?<!-)(?:\.(?!-)[A-Za-z0-9-]+(?<!-))+$"
)


def _require_text(value_type: str, value: object) -> None:
    if not isinstance(value, str) or not value.strip():
        raise InvalidFormatError(value_type, value)


@dataclass(frozen=True, slots=True)
class CustomerId:
    """Opaque unique identifier of a customer."""

    value: str

    def __post_init__(self) -> None:
        _require_text("customer ID", self.value)

    @classmethod
    def build(cls, raw: str) -> CustomerId:
        """Build a customer ID from its string form."""
        _require_text("customer ID", raw)
        return cls(raw.strip())

    @classmethod
    def generate(cls, id_generator: IdGenerator) -> CustomerId:
        """Generate a fresh customer ID using the given ID generator."""
        return cls(id_generator.new_id())

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class EmailAddress:
    """A syntactically valid email address."""

    value: str

    def __post_init__(self) -> None:
        _require_text("email address", self.value)
        if len(self.value) > MAX_EMAIL_LENGTH or not _EMAIL_PATTERN.match(
            self.value
        ):
            raise InvalidFormatError("email address", self.value)
        local_part, domain_part = self.value.split("@", 1)
        if ".." in local_part or ".." in domain_part:
            raise InvalidFormatError("email address", self.value)
        if local_part.startswith(".") or local_part.endswith("."):
            raise InvalidFormatError("email address", self.value)

    @classmethod
    def build(cls, raw: str) -> EmailAddress:
        """Parse and validate an email address.

        Raises:
            InvalidFormatError: If `raw` is not a valid email address.
        """
        if not isinstance(raw, str):
            raise InvalidFormatError("email address", raw)
        return cls(raw.strip())

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Hash:
    """Opaque random token, e.g. the hash confirming an email address."""

    value: str

    def __post_init__(self) -> None:
        _require_text("hash", self.value)

    @classmethod
    def build(cls, raw: str) -> Hash:
        """Build a hash from its string form."""
        _require_text("hash", raw)
        return cls(raw.strip())

    @classmethod
    def generate(cls, hash_generator: HashGenerator) -> Hash:
        """Generate a fresh hash using the given hash generator."""
        return cls(hash_generator.new_hash())

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class PersonName:
    """Given and family name of a person."""

    given_name: str
    family_name: str

    def __post_init__(self) -> None:
        _require_text("given name", self.given_name)
        _require_text("family name", self.family_name)

    @classmethod
    def build(cls, given_name: str, family_name: str) -> PersonName:
        """Build a person name; both parts must be non-blank."""
        _require_text("given name", given_name)
        _require_text("family name", family_name)
        return cls(given_name.strip(), family_name.strip())

    @property
    def full_name(self) -> str:
        """Given and family name separated by a space."""
        return f"{self.given_name} {self.family_name}"

    def __str__(self) -> str:
        return self.full_name
