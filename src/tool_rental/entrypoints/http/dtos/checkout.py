from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class CheckoutRequestDTO(BaseModel):
    """Request payload for checking out a tool."""

    tool_code: str = Field(
        description="Code of the tool to rent",
        examples=["JAKR"],
        min_length=1,
    )
    rental_days: int = Field(
        description="Number of days to rent the tool. Must be >= 1",
        examples=[4],
    )
    discount_percent: int = Field(
        description="Whole-number discount percentage from 0 to 100",
        examples=[50],
    )
    checkout_date: date = Field(
        description="Checkout date (ISO 8601)",
        examples=["2020-07-02"],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "tool_code": "JAKR",
                "rental_days": 4,
                "discount_percent": 50,
                "checkout_date": "2020-07-02",
            }
        }
    )


class CheckoutResponseDTO(BaseModel):
    """Rental agreement produced by a successful checkout."""

    tool_code: str
    tool_type: str
    tool_brand: str
    rental_days: int
    charge_days: int
    checkout_date: date
    due_date: date
    daily_charge: str = Field(description="Daily rental charge as decimal string")
    pre_discount_charge: str = Field(description="charge_days x daily_charge, rounded half up to cents")
    discount_percent: int
    discount_amount: str = Field(description="Discount on the pre-discount charge, rounded half up to cents")
    final_charge: str = Field(description="pre_discount_charge - discount_amount")
    report: str = Field(description="Printable rental agreement")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "tool_code": "JAKR",
                "tool_type": "Jackhammer",
                "tool_brand": "Ridgid",
                "rental_days": 4,
                "charge_days": 1,
                "checkout_date": "2020-07-02",
                "due_date": "2020-07-06",
                "daily_charge": "2.99",
                "pre_discount_charge": "2.99",
                "discount_percent": 50,
                "discount_amount": "1.50",
                "final_charge": "1.49",
                "report": "Tool code: JAKR\nTool type: Jackhammer\n...",
            }
        }
    )
