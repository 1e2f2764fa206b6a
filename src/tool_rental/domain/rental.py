from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal

from tool_rental.domain.errors import ValidationError
from tool_rental.domain.tool import ToolBrand, ToolType


class InvalidRentalInput(ValidationError):
    def __init__(self, message: str, field: str, value: int) -> None:
        super().__init__(
            message,
            errors=[{"field": field, "message": message, "code": "OUT_OF_RANGE"}],
            field=field,
            value=value,
        )


MIN_RENTAL_DAYS = 1
MIN_DISCOUNT_PERCENT = 0
MAX_DISCOUNT_PERCENT = 100


@dataclass(frozen=True, slots=True)
class RentalRequest:
    tool_code: str
    rental_days: int
    discount_percent: int
    checkout_date: date

    def validate(self) -> None:
        if self.rental_days < MIN_RENTAL_DAYS:
            raise InvalidRentalInput(
                "The rental day count must be greater than or equal to 1. "
                f"Rental day count: {self.rental_days}",
                field="rental_days",
                value=self.rental_days,
            )
        if self.rental_days > (date.max - self.checkout_date).days:
            raise InvalidRentalInput(
                "The rental day count must keep the due date on or before 12/31/9999. "
                f"Rental day count: {self.rental_days}",
                field="rental_days",
                value=self.rental_days,
            )
        if not MIN_DISCOUNT_PERCENT <= self.discount_percent <= MAX_DISCOUNT_PERCENT:
            raise InvalidRentalInput(
                "The discount percentage value must be a number from 0 to 100. "
                f"Discount percentage value: {self.discount_percent}",
                field="discount_percent",
                value=self.discount_percent,
            )

    @property
    def due_date(self) -> date:
        return self.checkout_date + timedelta(days=self.rental_days)


@dataclass(frozen=True, slots=True)
class RentalAgreement:
    tool_code: str
    tool_type: ToolType
    tool_brand: ToolBrand
    rental_days: int
    charge_days: int
    checkout_date: date
    due_date: date
    daily_charge: Decimal
    pre_discount_charge: Decimal
    discount_percent: int
    discount_amount: Decimal
    final_charge: Decimal
