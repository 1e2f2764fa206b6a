"""Tests for domain error classes."""

from tool_rental.domain.errors import (
    ConflictError,
    DomainError,
    NotFoundError,
    ToolUnavailableError,
    ValidationError,
)


class TestDomainError:
    """Tests for base DomainError class."""

    def test_creates_error_with_message(self) -> None:
        """DomainError stores message and has correct error code."""
        error = DomainError("Something went wrong")

        assert error.message == "Something went wrong"
        assert error.error_code == "DOMAIN_ERROR"
        assert error.context == {}

    def test_creates_error_with_context(self) -> None:
        """DomainError stores additional context."""
        error = DomainError("Error occurred", resource="Tool", action="checkout")

        assert error.message == "Error occurred"
        assert error.context == {"resource": "Tool", "action": "checkout"}

    def test_to_dict_returns_structured_format(self) -> None:
        """DomainError.to_dict() returns structured error format."""
        error = DomainError("Test error", field="rental_days", value=0)

        result = error.to_dict()

        assert result == {
            "message": "Test error",
            "code": "DOMAIN_ERROR",
            "field": "rental_days",
            "value": 0,
        }

    def test_str_representation(self) -> None:
        """DomainError string representation is the message."""
        error = DomainError("Test message")

        assert str(error) == "Test message"


class TestValidationError:
    """Tests for ValidationError class."""

    def test_creates_simple_validation_error(self) -> None:
        error = ValidationError("Invalid input")

        assert error.message == "Invalid input"
        assert error.error_code == "VALIDATION_ERROR"
        assert error.errors is None

    def test_creates_validation_error_with_default_message(self) -> None:
        error = ValidationError()

        assert error.message == "Validation error"
        assert error.errors is None

    def test_creates_validation_error_with_field_errors(self) -> None:
        """ValidationError can store multiple field-level errors."""
        errors = [
            {"field": "rental_days", "message": "Must be >= 1", "code": "OUT_OF_RANGE"},
            {"field": "discount_percent", "message": "Must be <= 100", "code": "OUT_OF_RANGE"},
        ]

        error = ValidationError(errors=errors)

        assert error.message == "Validation failed"
        assert error.errors == errors

    def test_creates_validation_error_with_custom_message_and_errors(self) -> None:
        errors = [{"field": "rental_days", "message": "Invalid"}]

        error = ValidationError(message="Custom validation failed", errors=errors)

        assert error.message == "Custom validation failed"
        assert error.errors == errors

    def test_to_dict_includes_field_errors(self) -> None:
        errors = [{"field": "code", "message": "Must not be blank"}]

        error = ValidationError(errors=errors)

        assert error.to_dict() == {
            "message": "Validation failed",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        }

    def test_to_dict_without_field_errors(self) -> None:
        error = ValidationError("Simple error")

        assert error.to_dict() == {
            "message": "Simple error",
            "code": "VALIDATION_ERROR",
        }


class TestNotFoundError:
    """Tests for NotFoundError class."""

    def test_creates_not_found_error_with_identifier(self) -> None:
        """NotFoundError creates message with resource and identifier."""
        error = NotFoundError("Tool", "XXXX")

        assert error.message == "Tool with identifier 'XXXX' not found"
        assert error.error_code == "NOT_FOUND"
        assert error.context["resource"] == "Tool"
        assert error.context["identifier"] == "XXXX"

    def test_creates_not_found_error_without_identifier(self) -> None:
        error = NotFoundError("Tool")

        assert error.message == "Tool not found"
        assert error.context["identifier"] is None

    def test_to_dict_includes_resource_information(self) -> None:
        error = NotFoundError("Tool", "JAKR")

        assert error.to_dict() == {
            "message": "Tool with identifier 'JAKR' not found",
            "code": "NOT_FOUND",
            "resource": "Tool",
            "identifier": "JAKR",
        }


class TestConflictError:
    """Tests for ConflictError class."""

    def test_creates_conflict_error(self) -> None:
        error = ConflictError("Tool is already rented")

        assert error.message == "Tool is already rented"
        assert error.error_code == "CONFLICT"

    def test_is_domain_error(self) -> None:
        assert isinstance(ConflictError("x"), DomainError)


class TestToolUnavailableError:
    """Tests for ToolUnavailableError class."""

    def test_builds_message_from_tool_code(self) -> None:
        error = ToolUnavailableError("JAKR")

        assert error.message == "Tool with tool code: JAKR is not available to rent."
        assert error.error_code == "TOOL_UNAVAILABLE"
        assert error.context == {"tool_code": "JAKR"}

    def test_is_conflict_error(self) -> None:
        assert isinstance(ToolUnavailableError("LADW"), ConflictError)
