"""CLIENTELE ``replay`` command: rebuild a customer from a recorded history.

Input is a JSON array of records, oldest first::

    [
      {"event_type": "CustomerRegistered", "payload": {...}},
      {"event_type": "CustomerEmailAddressConfirmed", "payload": {...}}
    ]

Payloads use the same shape the event store persists (nested value objects as
objects, e.g. ``{"customer_id": {"value": "..."}}``).

Behavior
- The resulting state goes to **stdout**, as a table or as JSON (``--json``).
- Status lines go to **stderr**.

Failure modes
- Unreadable JSON, unknown event types, malformed payloads and histories that
  do not start with a registration all print an error and exit with status 1.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.table import Table

from clientele.domain.aggregates import Customer
from clientele.domain.errors import DomainError
from clientele.domain.events import DomainEvent
from clientele.service_layer.repositories import EventMapper

from .helpers import error, success

logger = logging.getLogger(__name__)


class HistoryFileError(ValueError):
    """The history file does not hold a JSON array of event records."""


def load_records(path: Path) -> list[dict[str, Any]]:
    """Read the event records stored at `path`.

    Raises:
        HistoryFileError: If the file is not valid JSON or not a list of
            ``{"event_type", "payload"}`` objects.
    """
    try:
        records = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise HistoryFileError(f"{path} is not valid JSON: {e.msg}") from e

    if not isinstance(records, list):
        raise HistoryFileError(f"{path} must hold a JSON array of events.")
    for index, record in enumerate(records):
        if (
            not isinstance(record, dict)
            or not isinstance(record.get("event_type"), str)
            or not isinstance(record.get("payload"), dict)
        ):
            raise HistoryFileError(
                f"Record {index} must be an object with 'event_type' and 'payload'."
            )
    return records


def to_events(
    records: list[dict[str, Any]], mapper: EventMapper | None = None
) -> list[DomainEvent]:
    """Convert raw records to domain events."""
    mapper = mapper or EventMapper()
    return [
        mapper.from_record(record["event_type"], record["payload"])
        for record in records
    ]


def customer_state(customer: Customer) -> dict[str, Any]:
    """Summarize a customer's state as JSON-friendly primitives."""
    return {
        "customer_id": str(customer.customer_id),
        "given_name": customer.name.given_name if customer.name else None,
        "family_name": customer.name.family_name if customer.name else None,
        "email_address": str(customer.email_address),
        "is_email_address_confirmed": customer.is_email_address_confirmed,
        "confirmation_hash": str(customer.confirmation_hash),
        "version": customer.version,
    }


def render_table(state: dict[str, Any]) -> Table:
    """Build a two-column rich table for a customer state summary."""
    table = Table(title="Customer", show_header=True, header_style="bold")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", overflow="fold")
    for key, value in state.items():
        table.add_row(key.replace("_", " "), str(value))
    return table


@click.command()
@click.argument(
    "history",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the customer state as JSON instead of a table.",
)
@click.pass_context
def replay(ctx: click.Context, history: Path, as_json: bool) -> None:
    """Replay a customer's event HISTORY (a JSON file) and show the result."""

    try:
        records = load_records(history)
        customer = Customer.reconstitute(to_events(records))
    except (HistoryFileError, DomainError, KeyError, TypeError, ValueError) as e:
        logger.debug("Replay of %s failed", history, exc_info=True)
        error(f"Invalid customer history: {e}")
        ctx.exit(1)

    logger.info("Replayed %d events for customer %s", len(records), customer.aggregate_id)
    state = customer_state(customer)

    if as_json:
        click.echo(json.dumps(state, indent=2))
        return

    Console().print(render_table(state))
    success(f"Replayed {len(records)} events.")
