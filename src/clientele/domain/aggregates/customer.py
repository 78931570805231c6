"""Customer Aggregate"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, ClassVar

from clientele.domain import errors, events
from clientele.domain.value_objects import (
    CustomerId,
    EmailAddress,
    Hash,
    PersonName,
)

from .base import Aggregate

if TYPE_CHECKING:
    from clientele.domain.commands import (
        ChangeCustomerEmailAddress,
        ConfirmCustomerEmailAddress,
        RegisterCustomer,
    )
    from clientele.interfaces.hash_generator import HashGenerator


class Customer(Aggregate):
    """Aggregate root representing a registered customer.

    Business outcomes never raise: a wrong confirmation hash is recorded as a
    `CustomerEmailAddressConfirmationFailed` event, while repeated confirmations
    and unchanged email addresses are silent no-ops.

    Exactly one confirmation hash is live at a time: the one issued with the
    most recent registration or email change.
    """

    STREAM_TYPE: ClassVar[str] = "Customer"

    def __init__(self, aggregate_id: str) -> None:
        """Blank instance for `register` and `rehydrate` to fill.

        Until a `CustomerRegistered` event has been applied it accepts no
        commands; use `register` or `reconstitute` instead.
        """
        super().__init__(aggregate_id)
        self._customer_id: CustomerId | None = None
        self._email_address: EmailAddress | None = None
        self._confirmation_hash: Hash | None = None
        self._is_email_address_confirmed: bool = False
        self._name: PersonName | None = None

    # --- Construction Paths ---

    @classmethod
    def register(cls, command: RegisterCustomer) -> Customer:
        """Register a new customer.

        Args:
            command: The registration command. Its raw email address and name
                are parsed into value objects here.

        Returns:
            Customer: The new aggregate with one recorded `CustomerRegistered` event.

        Raises:
            InvalidFormatError: If the email address or name is malformed.
        """
        customer = cls(command.customer_id.value)
        event = events.CustomerRegistered(
            customer_id=command.customer_id,
            email_address=EmailAddress.build(command.email_address),
            confirmation_hash=command.confirmation_hash,
            name=PersonName.build(command.given_name, command.family_name),
        )
        customer._enqueue(event)
        return customer

    @classmethod
    def reconstitute(cls, history: Sequence[events.DomainEvent]) -> Customer:
        """Rebuild a customer from its event history.

        Args:
            history: The customer's events, oldest first. The first one must be
                `CustomerRegistered`.

        Returns:
            Customer: The rebuilt aggregate, with no recorded events.

        Raises:
            InvalidHistoryError: If the history is empty or not rooted in a registration.
            AggregateIdMismatchError: If the history mixes events of several customers.
        """
        # rehydrate rejects an empty history before the id is used
        root_id = history[0].aggregate_id if history else ""
        return cls.rehydrate(root_id, history)

    @classmethod
    def _check_history(cls, event_stream: Sequence[events.DomainEvent]) -> None:
        if not event_stream:
            raise errors.InvalidHistoryError("Customer history is empty.")
        root, *rest = event_stream
        if not isinstance(root, events.CustomerRegistered):
            raise errors.InvalidHistoryError(
                "Customer history must start with CustomerRegistered, "
                f"got {type(root).__name__}."
            )
        if any(isinstance(event, events.CustomerRegistered) for event in rest):
            raise errors.InvalidHistoryError(
                "CustomerRegistered may only appear as the first event."
            )

    # --- State Transitions ---

    def confirm_email_address(self, command: ConfirmCustomerEmailAddress) -> None:
        """Confirm the current email address.

        Records nothing when the address is already confirmed, whatever the
        hash. Otherwise records `CustomerEmailAddressConfirmed` when the hash
        matches the live confirmation hash, and
        `CustomerEmailAddressConfirmationFailed` when it does not.

        Raises:
            CommandTargetMismatchError: If the command addresses another customer.
            UnregisteredAggregateError: If no registration has been applied.
        """
        self._begin_command()
        self._check_target(command.customer_id)

        if self._is_email_address_confirmed:
            return  # Idempotent

        event: events.DomainEvent
        if command.confirmation_hash != self._confirmation_hash:
            event = events.CustomerEmailAddressConfirmationFailed(
                customer_id=command.customer_id
            )
        else:
            event = events.CustomerEmailAddressConfirmed(
                customer_id=command.customer_id
            )
        self._enqueue(event)

    def change_email_address(
        self, command: ChangeCustomerEmailAddress, hash_generator: HashGenerator
    ) -> None:
        """Replace the email address.

        A new confirmation hash is issued, which supersedes every earlier one
        and leaves the new address unconfirmed. Changing to the current
        address records nothing.

        Args:
            command: The change command.
            hash_generator: Source of the new confirmation hash.

        Raises:
            CommandTargetMismatchError: If the command addresses another customer.
            UnregisteredAggregateError: If no registration has been applied.
        """
        self._begin_command()
        self._check_target(command.customer_id)

        if command.email_address == self._email_address:
            return  # Idempotent

        event = events.CustomerEmailAddressChanged(
            customer_id=command.customer_id,
            email_address=command.email_address,
            confirmation_hash=Hash.generate(hash_generator),
        )
        self._enqueue(event)

    # --- Read-only State ---

    @property
    def customer_id(self) -> CustomerId | None:
        """The customer's identity."""
        return self._customer_id

    @property
    def email_address(self) -> EmailAddress | None:
        """The current email address."""
        return self._email_address

    @property
    def confirmation_hash(self) -> Hash | None:
        """The only hash that can confirm the current email address."""
        return self._confirmation_hash

    @property
    def is_email_address_confirmed(self) -> bool:
        """Whether the current email address has been confirmed."""
        return self._is_email_address_confirmed

    @property
    def name(self) -> PersonName | None:
        """The customer's name."""
        return self._name

    # --- Event Application ---

    def _apply(self, event: events.DomainEvent) -> None:
        match event:
            case events.CustomerRegistered():
                self._customer_id = event.customer_id
                self._email_address = event.email_address
                self._confirmation_hash = event.confirmation_hash
                self._name = event.name
                self._is_email_address_confirmed = False
            case events.CustomerEmailAddressConfirmed():
                self._is_email_address_confirmed = True
            case events.CustomerEmailAddressConfirmationFailed():
                pass
            case events.CustomerEmailAddressChanged():
                self._email_address = event.email_address
                self._confirmation_hash = event.confirmation_hash
                self._is_email_address_confirmed = False
            case _:
                raise ValueError(f"Unhandled event type: {type(event).__name__}")

    # --- Internal Helpers ---

    def _check_target(self, customer_id: CustomerId) -> None:
        if self._customer_id is None:
            raise errors.UnregisteredAggregateError(self.aggregate_id)
        if customer_id.value != self.aggregate_id:
            raise errors.CommandTargetMismatchError(self.aggregate_id, customer_id.value)
