from __future__ import annotations

import dataclasses
from datetime import date
from decimal import Decimal

import pytest

from tool_rental.domain.errors import ValidationError
from tool_rental.domain.rental import InvalidRentalInput, RentalAgreement, RentalRequest
from tool_rental.domain.tool import ToolBrand, ToolType


def make_request(rental_days: int = 5, discount_percent: int = 10) -> RentalRequest:
    return RentalRequest(
        tool_code="JAKR",
        rental_days=rental_days,
        discount_percent=discount_percent,
        checkout_date=date(2015, 9, 3),
    )


# ==============================================================================
# VALIDATION TESTS
# ==============================================================================


def test_rejects_zero_rental_days() -> None:
    with pytest.raises(InvalidRentalInput) as exc_info:
        make_request(rental_days=0).validate()

    assert str(exc_info.value) == (
        "The rental day count must be greater than or equal to 1. Rental day count: 0"
    )


def test_rejects_negative_rental_days() -> None:
    with pytest.raises(InvalidRentalInput, match="Rental day count: -3"):
        make_request(rental_days=-3).validate()


def test_rejects_discount_above_100() -> None:
    with pytest.raises(InvalidRentalInput) as exc_info:
        make_request(discount_percent=101).validate()

    assert str(exc_info.value) == (
        "The discount percentage value must be a number from 0 to 100. "
        "Discount percentage value: 101"
    )


def test_rejects_negative_discount() -> None:
    with pytest.raises(InvalidRentalInput, match="Discount percentage value: -1"):
        make_request(discount_percent=-1).validate()


def test_rental_days_checked_before_discount() -> None:
    with pytest.raises(InvalidRentalInput, match="Rental day count: 0"):
        make_request(rental_days=0, discount_percent=101).validate()


@pytest.mark.parametrize(("rental_days", "discount_percent"), [(1, 0), (1, 100), (730, 50)])
def test_accepts_boundary_values(rental_days: int, discount_percent: int) -> None:
    make_request(rental_days=rental_days, discount_percent=discount_percent).validate()


def test_rejects_due_date_past_last_representable_date() -> None:
    request = RentalRequest(
        tool_code="JAKR",
        rental_days=2,
        discount_percent=0,
        checkout_date=date(9999, 12, 30),
    )

    with pytest.raises(InvalidRentalInput) as exc_info:
        request.validate()

    assert str(exc_info.value) == (
        "The rental day count must keep the due date on or before 12/31/9999. "
        "Rental day count: 2"
    )
    assert exc_info.value.context == {"field": "rental_days", "value": 2}


def test_accepts_due_date_on_last_representable_date() -> None:
    request = RentalRequest(
        tool_code="JAKR",
        rental_days=1,
        discount_percent=0,
        checkout_date=date(9999, 12, 30),
    )

    request.validate()

    assert request.due_date == date(9999, 12, 31)


def test_due_date_adds_rental_days() -> None:
    assert make_request(rental_days=5).due_date == date(2015, 9, 8)


def test_invalid_rental_input_carries_field_and_value() -> None:
    with pytest.raises(InvalidRentalInput) as exc_info:
        make_request(discount_percent=101).validate()

    error = exc_info.value
    assert isinstance(error, ValidationError)
    assert error.context == {"field": "discount_percent", "value": 101}
    assert error.errors == [
        {
            "field": "discount_percent",
            "message": error.message,
            "code": "OUT_OF_RANGE",
        }
    ]


# ==============================================================================
# AGREEMENT
# ==============================================================================


def test_rental_agreement_is_immutable() -> None:
    agreement = RentalAgreement(
        tool_code="LADW",
        tool_type=ToolType.LADDER,
        tool_brand=ToolBrand.WERNER,
        rental_days=3,
        charge_days=2,
        checkout_date=date(2020, 7, 2),
        due_date=date(2020, 7, 5),
        daily_charge=Decimal("1.99"),
        pre_discount_charge=Decimal("3.98"),
        discount_percent=10,
        discount_amount=Decimal("0.40"),
        final_charge=Decimal("3.58"),
    )

    with pytest.raises(dataclasses.FrozenInstanceError):
        agreement.final_charge = Decimal("0.00")  # type: ignore[misc]
