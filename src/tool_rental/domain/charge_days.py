from __future__ import annotations

from datetime import date, timedelta

from tool_rental.domain.holidays import US_OBSERVED_HOLIDAYS, HolidayCalendar

WEEKDAYS = frozenset({0, 1, 2, 3, 4})
WEEKEND = frozenset({5, 6})


def billable_days_of_week(weekday_charge: bool, weekend_charge: bool) -> frozenset[int]:
    """Days of week (date.weekday() numbering) the daily charge applies to."""
    days: frozenset[int] = frozenset()
    if weekday_charge:
        days |= WEEKDAYS
    if weekend_charge:
        days |= WEEKEND
    return days


def calculate_charge_days(
    checkout_date: date,
    due_date: date,
    weekday_charge: bool,
    weekend_charge: bool,
    holiday_charge: bool,
    holiday_calendar: HolidayCalendar = US_OBSERVED_HOLIDAYS,
) -> int:
    """
    Count the chargeable days of a rental.

    The checkout day itself is never charged; the due date is charged when
    eligible, i.e. the range is (checkout_date, due_date].

    When holidays are not billable, each observed holiday in the range is
    removed once, but only if its day of week was counted in the first place.

    Raises:
        ValueError: If due_date is not after checkout_date
    """
    if due_date <= checkout_date:
        raise ValueError("due_date must be after checkout_date")

    billable = billable_days_of_week(weekday_charge, weekend_charge)
    if not billable:
        return 0

    span = (due_date - checkout_date).days
    charge_days = sum(
        1
        for offset in range(1, span + 1)
        if (checkout_date + timedelta(days=offset)).weekday() in billable
    )

    if not holiday_charge:
        for holiday in holiday_calendar.holidays_between(checkout_date, due_date):
            if holiday.weekday() in billable:
                charge_days -= 1

    return charge_days
