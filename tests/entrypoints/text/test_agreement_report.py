from __future__ import annotations

from datetime import date
from decimal import Decimal

from tool_rental.domain.rental import RentalAgreement
from tool_rental.domain.tool import ToolBrand, ToolType
from tool_rental.entrypoints.text.agreement_report import (
    format_agreement,
    format_currency,
    format_date,
)


def test_format_currency() -> None:
    assert format_currency(Decimal("1.5")) == "$1.50"
    assert format_currency(Decimal("0")) == "$0.00"
    assert format_currency(Decimal("1548.82")) == "$1,548.82"


def test_format_date_is_two_digit_year() -> None:
    assert format_date(date(2020, 7, 2)) == "07/02/20"
    assert format_date(date(2015, 12, 31)) == "12/31/15"


def test_format_agreement() -> None:
    agreement = RentalAgreement(
        tool_code="JAKR",
        tool_type=ToolType.JACKHAMMER,
        tool_brand=ToolBrand.RIDGID,
        rental_days=4,
        charge_days=1,
        checkout_date=date(2020, 7, 2),
        due_date=date(2020, 7, 6),
        daily_charge=Decimal("2.99"),
        pre_discount_charge=Decimal("2.99"),
        discount_percent=50,
        discount_amount=Decimal("1.50"),
        final_charge=Decimal("1.49"),
    )

    assert format_agreement(agreement) == (
        "Tool code: JAKR\n"
        "Tool type: Jackhammer\n"
        "Tool brand: Ridgid\n"
        "Rental days: 4\n"
        "Checkout date: 07/02/20\n"
        "Due date: 07/06/20\n"
        "Daily rental charge: $2.99\n"
        "Charge days: 1\n"
        "Pre-discount charge: $2.99\n"
        "Discount percent: 50%\n"
        "Discount amount: $1.50\n"
        "Final charge: $1.49\n"
    )
