from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

CENTS = Decimal("0.01")
ONE_HUNDRED = Decimal("100")


@dataclass(frozen=True, slots=True)
class ChargeBreakdown:
    pre_discount_charge: Decimal
    discount_amount: Decimal
    final_charge: Decimal


def round_to_cents(amount: Decimal) -> Decimal:
    """Round to 2 decimal places using ROUND_HALF_UP."""
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def calculate_charges(charge_days: int, daily_charge: Decimal, discount_percent: int) -> ChargeBreakdown:
    """
    Price a rental using exact decimal arithmetic.

    Rounding policy:
    - Pre-discount charge is rounded to cents (ROUND_HALF_UP)
    - Discount is computed from the rounded pre-discount charge, then rounded to cents
    - Final charge is the difference of the two rounded amounts (not re-rounded)

    Callers must validate discount_percent (0..100) beforehand.
    """
    # Guardrail: prevent float leakage past boundary
    if not isinstance(daily_charge, Decimal):
        raise TypeError("daily_charge must be Decimal (no floats past the boundary)")

    pre_discount_charge = round_to_cents(Decimal(charge_days) * daily_charge)
    discount_amount = round_to_cents(pre_discount_charge * Decimal(discount_percent) / ONE_HUNDRED)

    return ChargeBreakdown(
        pre_discount_charge=pre_discount_charge,
        discount_amount=discount_amount,
        final_charge=pre_discount_charge - discount_amount,
    )
