"""Unit tests for domain errors."""

import pytest

from clientele.domain import errors


class TestAggregateIdMismatchError:
    """Tests for the AggregateIdMismatchError domain error."""

    @staticmethod
    def test_attributes() -> None:
        """The error carries both aggregate IDs."""
        error = errors.AggregateIdMismatchError("agg-1", "agg-2")
        assert error.aggregate_id == "agg-1"
        assert error.event_aggregate_id == "agg-2"

    @staticmethod
    def test_error_message() -> None:
        """The message names the event's ID first."""
        error = errors.AggregateIdMismatchError("agg-1", "agg-2")
        assert str(error) == (
            "Event aggregate ID 'agg-2' does not match aggregate ID 'agg-1'."
        )


class TestCommandTargetMismatchError:
    """Tests for the CommandTargetMismatchError domain error."""

    @staticmethod
    def test_attributes_and_message() -> None:
        """The error carries both IDs and explains which is which."""
        error = errors.CommandTargetMismatchError("agg-1", "agg-9")
        assert error.aggregate_id == "agg-1"
        assert error.command_aggregate_id == "agg-9"
        assert str(error) == (
            "Command targets aggregate ID 'agg-9' but was handled by "
            "aggregate ID 'agg-1'."
        )


class TestUnregisteredAggregateError:
    """Tests for the UnregisteredAggregateError domain error."""

    @staticmethod
    def test_attributes_and_message() -> None:
        """The error names the aggregate that has no history."""
        error = errors.UnregisteredAggregateError("agg-1")
        assert error.aggregate_id == "agg-1"
        assert str(error) == "Aggregate ID 'agg-1' has no history to act on."


class TestInvalidFormatError:
    """Tests for the InvalidFormatError domain error."""

    @staticmethod
    def test_attributes_and_message() -> None:
        """The message shows the raw value's repr."""
        error = errors.InvalidFormatError("email address", "jane@")
        assert error.value_type == "email address"
        assert error.raw_value == "jane@"
        assert str(error) == "Invalid email address: 'jane@'"


class TestMissingFieldError:
    """Tests for the MissingFieldError domain error."""

    @staticmethod
    def test_attributes_and_message() -> None:
        """The message names the command and the field."""
        error = errors.MissingFieldError("RegisterCustomer", "given_name")
        assert error.command_name == "RegisterCustomer"
        assert error.field_name == "given_name"
        assert str(error) == "RegisterCustomer is missing required field 'given_name'."


@pytest.mark.parametrize(
    "error",
    [
        errors.AggregateIdMismatchError("a", "b"),
        errors.InvalidHistoryError("empty"),
        errors.CommandTargetMismatchError("a", "b"),
        errors.UnregisteredAggregateError("a"),
        errors.InvalidFormatError("hash", ""),
        errors.MissingFieldError("Cmd", "field"),
    ],
    ids=lambda e: type(e).__name__,
)
def test_all_errors_are_domain_errors(error: Exception) -> None:
    """Every domain error can be caught as DomainError."""
    assert isinstance(error, errors.DomainError)


@pytest.mark.parametrize("error_cls", [errors.InvalidFormatError, errors.MissingFieldError])
def test_input_errors_are_value_errors(error_cls: type[Exception]) -> None:
    """Construction errors are also ValueErrors."""
    assert issubclass(error_cls, ValueError)
