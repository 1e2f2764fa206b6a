"""Printable rendering of a rental agreement.

Currency is shown US style ($9,999.99) and dates as MM/DD/YY.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from tool_rental.domain.rental import RentalAgreement


def format_currency(amount: Decimal) -> str:
    return f"${amount:,.2f}"


def format_date(value: date) -> str:
    return value.strftime("%m/%d/%y")


def format_agreement(agreement: RentalAgreement) -> str:
    lines = [
        ("Tool code", agreement.tool_code),
        ("Tool type", agreement.tool_type.value),
        ("Tool brand", agreement.tool_brand.value),
        ("Rental days", str(agreement.rental_days)),
        ("Checkout date", format_date(agreement.checkout_date)),
        ("Due date", format_date(agreement.due_date)),
        ("Daily rental charge", format_currency(agreement.daily_charge)),
        ("Charge days", str(agreement.charge_days)),
        ("Pre-discount charge", format_currency(agreement.pre_discount_charge)),
        ("Discount percent", f"{agreement.discount_percent}%"),
        ("Discount amount", format_currency(agreement.discount_amount)),
        ("Final charge", format_currency(agreement.final_charge)),
    ]
    return "".join(f"{label}: {value}\n" for label, value in lines)
