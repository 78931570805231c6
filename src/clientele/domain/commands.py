"""Module defining Commands.

Commands are immutable requests to change state. Their `build` factories take
raw primitives (as they would arrive from a form or an API), reject missing
ones with `MissingFieldError`, and parse identifiers and hashes into value
objects. An aggregate may accept a command (emitting an event), ignore it, or
reject it by emitting a failure event.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from clientele.domain.errors import MissingFieldError
from clientele.domain.value_objects import CustomerId, EmailAddress, Hash

if TYPE_CHECKING:
    from clientele.interfaces.hash_generator import HashGenerator
    from clientele.interfaces.id_generator import IdGenerator


def _require(command_name: str, **values: str | None) -> None:
    for field_name, value in values.items():
        if value is None or not str(value).strip():
            raise MissingFieldError(command_name, field_name)


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


@dataclass(frozen=True)
class RegisterCustomer(Command):
    """Command to register a new customer.

    The email address and name are kept as raw primitives; the aggregate parses
    them into value objects when it handles the command.
    """

    customer_id: CustomerId
    confirmation_hash: Hash
    email_address: str
    given_name: str
    family_name: str

    @classmethod
    def build(
        cls,
        email_address: str,
        given_name: str,
        family_name: str,
        *,
        id_generator: IdGenerator,
        hash_generator: HashGenerator,
    ) -> RegisterCustomer:
        """Build the command, generating a fresh customer ID and confirmation hash.

        Raises:
            MissingFieldError: If any of the primitives is missing or blank.
        """
        _require(
            cls.__name__,
            email_address=email_address,
            given_name=given_name,
            family_name=family_name,
        )
        return cls(
            customer_id=CustomerId.generate(id_generator),
            confirmation_hash=Hash.generate(hash_generator),
            email_address=email_address,
            given_name=given_name,
            family_name=family_name,
        )


@dataclass(frozen=True)
class ConfirmCustomerEmailAddress(Command):
    """Command to confirm a customer's email address with a confirmation hash."""

    customer_id: CustomerId
    confirmation_hash: Hash

    @classmethod
    def build(
        cls, customer_id: str, confirmation_hash: str
    ) -> ConfirmCustomerEmailAddress:
        """Build the command from raw primitives.

        Raises:
            MissingFieldError: If any of the primitives is missing or blank.
        """
        _require(
            cls.__name__, customer_id=customer_id, confirmation_hash=confirmation_hash
        )
        return cls(
            customer_id=CustomerId.build(customer_id),
            confirmation_hash=Hash.build(confirmation_hash),
        )


@dataclass(frozen=True)
class ChangeCustomerEmailAddress(Command):
    """Command to replace a customer's email address."""

    customer_id: CustomerId
    email_address: EmailAddress

    @classmethod
    def build(
        cls, customer_id: str, email_address: str
    ) -> ChangeCustomerEmailAddress:
        """Build the command from raw primitives.

        Raises:
            MissingFieldError: If any of the primitives is missing or blank.
            InvalidFormatError: If the email address is malformed.
        """
        _require(cls.__name__, customer_id=customer_id, email_address=email_address)
        return cls(
            customer_id=CustomerId.build(customer_id),
            email_address=EmailAddress.build(email_address),
        )
