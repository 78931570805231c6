"""Customer domain events.

Events are immutable facts, named in the past tense. Every event a customer
stream can hold is listed in `DOMAIN_EVENT_REGISTRY` under its class name,
which is also the ``event_type`` it is stored with.
"""

import abc
from dataclasses import dataclass

from clientele.domain.value_objects import CustomerId, EmailAddress, Hash, PersonName


@dataclass(frozen=True, slots=True)
class DomainEvent(abc.ABC):
    """Something that happened to one aggregate."""

    @property
    @abc.abstractmethod
    def aggregate_id(self) -> str:
        """ID of the aggregate whose stream the event belongs to."""


@dataclass(frozen=True, slots=True)
class CustomerEvent(DomainEvent):
    """An event in a customer's stream, keyed by `customer_id`."""

    customer_id: CustomerId

    @property
    def aggregate_id(self) -> str:
        return self.customer_id.value


@dataclass(frozen=True, slots=True)
class CustomerRegistered(CustomerEvent):
    """First event of every customer stream.

    The address starts unconfirmed; `confirmation_hash` is the secret that
    confirms it.
    """

    email_address: EmailAddress
    confirmation_hash: Hash
    name: PersonName


@dataclass(frozen=True, slots=True)
class CustomerEmailAddressConfirmed(CustomerEvent):
    """The current address was confirmed with the right hash."""


@dataclass(frozen=True, slots=True)
class CustomerEmailAddressConfirmationFailed(CustomerEvent):
    """A confirmation attempt used the wrong hash. Changes no state."""


@dataclass(frozen=True, slots=True)
class CustomerEmailAddressChanged(CustomerEvent):
    """The address was replaced and needs confirming again with the new hash."""

    email_address: EmailAddress
    confirmation_hash: Hash


DOMAIN_EVENT_REGISTRY: dict[str, type[DomainEvent]] = {
    cls.__name__: cls
    for cls in (
        CustomerRegistered,
        CustomerEmailAddressConfirmed,
        CustomerEmailAddressConfirmationFailed,
        CustomerEmailAddressChanged,
    )
}
