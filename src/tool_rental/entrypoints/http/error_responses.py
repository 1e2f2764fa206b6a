"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "rental_days",
                "message": "The rental day count must be greater than or equal to 1. Rental day count: 0",
                "code": "OUT_OF_RANGE",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {
                "detail": "Tool with identifier 'XXXX' not found",
                "code": "NOT_FOUND"
            }

        Validation error:
            {
                "detail": "The discount percentage value must be a number from 0 to 100. ...",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "discount_percent",
                        "message": "The discount percentage value must be a number from 0 to 100. ...",
                        "code": "OUT_OF_RANGE"
                    }
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Tool with identifier 'XXXX' not found", "code": "NOT_FOUND"},
                {
                    "detail": "Tool with tool code: JAKR is not available to rent.",
                    "code": "TOOL_UNAVAILABLE",
                },
            ]
        }
    )
