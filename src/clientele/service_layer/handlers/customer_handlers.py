"""Handlers for the customer aggregate.

Each handler executes exactly one command: it reconstitutes a fresh aggregate
from the event store (except for registration), lets the aggregate decide, and
appends whatever was recorded. Commands for the same customer must not be
handled concurrently.
"""

import logging
from collections.abc import Callable

from clientele.domain import commands
from clientele.domain.aggregates import Customer
from clientele.interfaces.hash_generator import HashGenerator
from clientele.interfaces.id_generator import IdGenerator
from clientele.interfaces.unit_of_work import AbstractUnitOfWork
from clientele.service_layer import repositories as repos

logger = logging.getLogger(__name__)


def register_customer(
    cmd: commands.RegisterCustomer,
    uow: AbstractUnitOfWork,
    event_id_generator: IdGenerator,
) -> None:
    """Register a new customer."""

    customer = Customer.register(cmd)

    with uow:
        customer_repo = repos.CustomerRepository(
            event_store=uow.eventstore,
            event_id_generator=event_id_generator,
        )
        customer_repo.store_events(customer)
        uow.commit()

    logger.info("Registered customer %s", customer.aggregate_id)


def confirm_customer_email_address(
    cmd: commands.ConfirmCustomerEmailAddress,
    uow: AbstractUnitOfWork,
    event_id_generator: IdGenerator,
) -> None:
    """Confirm a customer's email address (a wrong hash records a failure)."""

    with uow:
        customer_repo = repos.CustomerRepository(
            event_store=uow.eventstore,
            event_id_generator=event_id_generator,
        )
        customer = customer_repo.load(cmd.customer_id.value)
        customer.confirm_email_address(cmd)

        if not customer_repo.store_events(customer):
            logger.debug(
                "ConfirmCustomerEmailAddress %s: already confirmed; noop",
                cmd.customer_id,
            )
            return

        uow.commit()

    if customer.is_email_address_confirmed:
        logger.info("Confirmed email address of customer %s", cmd.customer_id)
    else:
        logger.info("Rejected email confirmation for customer %s", cmd.customer_id)


def change_customer_email_address(
    cmd: commands.ChangeCustomerEmailAddress,
    uow: AbstractUnitOfWork,
    event_id_generator: IdGenerator,
    hash_generator: HashGenerator,
) -> None:
    """Change a customer's email address, issuing a new confirmation hash."""

    with uow:
        customer_repo = repos.CustomerRepository(
            event_store=uow.eventstore,
            event_id_generator=event_id_generator,
        )
        customer = customer_repo.load(cmd.customer_id.value)
        customer.change_email_address(cmd, hash_generator)

        if not customer_repo.store_events(customer):
            logger.debug(
                "ChangeCustomerEmailAddress %s: unchanged email address; noop",
                cmd.customer_id,
            )
            return

        uow.commit()

    logger.info("Changed email address of customer %s", cmd.customer_id)


COMMAND_HANDLERS: dict[type, Callable[..., None]] = {
    commands.RegisterCustomer: register_customer,
    commands.ConfirmCustomerEmailAddress: confirm_customer_email_address,
    commands.ChangeCustomerEmailAddress: change_customer_email_address,
}
