from fastapi import APIRouter, Depends, status

from tool_rental.domain.errors import ToolUnavailableError
from tool_rental.entrypoints.http.dependencies import get_checkout_tool_use_case
from tool_rental.entrypoints.http.dtos.checkout import CheckoutRequestDTO, CheckoutResponseDTO
from tool_rental.entrypoints.http.error_responses import ErrorResponse
from tool_rental.entrypoints.http.mappers.checkout_mapper import CheckoutMapper
from tool_rental.use_cases.checkout_tool import CheckoutTool

router = APIRouter(tags=["Checkouts"])


@router.post(
    "/checkouts",
    response_model=CheckoutResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Check out a tool",
    description="""
    Check out a tool and return the rental agreement.

    ## Charge days
    - The checkout day is not charged; the due date is
    - Weekday / weekend / holiday charging depends on the tool
    - Holidays: Independence Day (observed on Friday/Monday when on a weekend)
      and Labor Day

    ## Monetary Values
    - All monetary values are strings (e.g., "3.58")
    - Rounded half up to cents; the discount is taken from the rounded
      pre-discount charge

    ## Example
    ```
    POST /v1/checkouts
    {
        "tool_code": "LADW",
        "rental_days": 3,
        "discount_percent": 10,
        "checkout_date": "2020-07-02"
    }
    ```
    """,
    responses={
        404: {"model": ErrorResponse, "description": "Unknown tool code"},
        409: {"model": ErrorResponse, "description": "Tool is not available to rent"},
        422: {"model": ErrorResponse, "description": "rental_days or discount_percent out of range"},
    },
)
def checkout_tool(
    payload: CheckoutRequestDTO,
    use_case: CheckoutTool = Depends(get_checkout_tool_use_case),
) -> CheckoutResponseDTO:
    """Parse → execute → map → return."""
    request = CheckoutMapper.to_domain_request(payload)

    agreement = use_case.execute(request)

    if agreement is None:
        raise ToolUnavailableError(payload.tool_code)

    return CheckoutMapper.to_response(agreement)
