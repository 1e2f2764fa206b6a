"""Domain error classes.

Protocol-agnostic errors raised by the rental core and its use cases.
The HTTP entrypoint translates them to status codes and JSON bodies.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Carries a human-readable message plus free-form context (field names,
    offending values) that protocol adapters can expose to clients.
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message
            **context: Additional context for the error (e.g., field, value)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Caller supplied input that breaks a business rule.

    Examples:
        - rental_days < 1
        - discount_percent outside 0..100
        - blank tool code

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "rental_days", "message": "Must be >= 1"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class NotFoundError(DomainError):
    """Resource not found.

    Examples:
        - Tool code not present in the inventory

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Tool")
            identifier: Resource identifier (e.g., tool code)
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class ConflictError(DomainError):
    """Request conflicts with the current state of a resource.

    Examples:
        - Checkout attempted on a tool that is already rented out
        - Concurrent checkouts racing for the same tool

    Protocol mappings:
        - REST: 409 Conflict
    """

    error_code: str = "CONFLICT"


class ToolUnavailableError(ConflictError):
    """Checkout requested for a tool that is already rented out.

    Protocol mappings:
        - REST: 409 Conflict
    """

    error_code: str = "TOOL_UNAVAILABLE"

    def __init__(self, tool_code: str, **context: Any) -> None:
        super().__init__(
            f"Tool with tool code: {tool_code} is not available to rent.",
            tool_code=tool_code,
            **context,
        )
