"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class AggregateIdMismatchError(DomainError):
    """Raised when an event targets a different aggregate_id than the receiver."""

    def __init__(self, aggregate_id: str, event_aggregate_id: str) -> None:
        super().__init__(
            f"Event aggregate ID '{event_aggregate_id}' does not match "
            f"aggregate ID '{aggregate_id}'."
        )
        self.aggregate_id = aggregate_id
        self.event_aggregate_id = event_aggregate_id


class InvalidHistoryError(DomainError):
    """Raised when an event history cannot be replayed into an aggregate."""


class CommandTargetMismatchError(DomainError):
    """Raised when a command is handed to an aggregate it does not address."""

    def __init__(self, aggregate_id: str, command_aggregate_id: str) -> None:
        super().__init__(
            f"Command targets aggregate ID '{command_aggregate_id}' but was "
            f"handled by aggregate ID '{aggregate_id}'."
        )
        self.aggregate_id = aggregate_id
        self.command_aggregate_id = command_aggregate_id


class UnregisteredAggregateError(DomainError):
    """Raised when a command reaches an aggregate that was never created by an event."""

    def __init__(self, aggregate_id: str) -> None:
        super().__init__(f"Aggregate ID '{aggregate_id}' has no history to act on.")
        self.aggregate_id = aggregate_id


# ============================================================================
#                       Construction (input) errors
# ============================================================================


class InvalidFormatError(DomainError, ValueError):
    """Raised when a value object is built from malformed input."""

    def __init__(self, value_type: str, raw_value: object) -> None:
        super().__init__(f"Invalid {value_type}: {raw_value!r}")
        self.value_type = value_type
        self.raw_value = raw_value


class MissingFieldError(DomainError, ValueError):
    """Raised when a command is built without one of its required fields."""

    def __init__(self, command_name: str, field_name: str) -> None:
        super().__init__(f"{command_name} is missing required field '{field_name}'.")
        self.command_name = command_name
        self.field_name = field_name
