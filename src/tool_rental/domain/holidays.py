"""Observed holidays that rentals may be exempt from charging.

Each holiday is a rule mapping a year to the date it is observed in that
year, so a span of several years gets one instance of every holiday per
calendar year it touches.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Callable

from dateutil.relativedelta import FR, MO, relativedelta

SATURDAY = 5
SUNDAY = 6

HolidayRule = Callable[[int], date]

# Weekend holidays are observed on the nearest weekday
WEEKEND_OBSERVANCE = {
    SATURDAY: relativedelta(weekday=FR(-1)),
    SUNDAY: relativedelta(weekday=MO(+1)),
}

FIRST_MONDAY_OF_SEPTEMBER = relativedelta(month=9, day=1, weekday=MO(+1))


def independence_day(year: int) -> date:
    """July 4th, observed on the nearest weekday when it falls on a weekend."""
    day = date(year, 7, 4)
    return day + WEEKEND_OBSERVANCE.get(day.weekday(), relativedelta())


def labor_day(year: int) -> date:
    """First Monday in September."""
    return date(year, 1, 1) + FIRST_MONDAY_OF_SEPTEMBER


class HolidayCalendar(ABC):
    """Source of observed holiday dates for a calendar year."""

    @abstractmethod
    def holidays_for_year(self, year: int) -> set[date]: ...

    def holidays_between(self, checkout_date: date, due_date: date) -> set[date]:
        """
        Observed holidays strictly after checkout_date and on or before due_date.

        Holidays are generated for every year from checkout_date.year to
        due_date.year inclusive.
        """
        holidays: set[date] = set()
        for year in range(checkout_date.year, due_date.year + 1):
            holidays.update(self.holidays_for_year(year))

        return {day for day in holidays if checkout_date < day <= due_date}


class UsObservedHolidayCalendar(HolidayCalendar):
    """Independence Day (weekend-observed) and Labor Day."""

    rules: tuple[HolidayRule, ...] = (independence_day, labor_day)

    def holidays_for_year(self, year: int) -> set[date]:
        return {rule(year) for rule in self.rules}


US_OBSERVED_HOLIDAYS = UsObservedHolidayCalendar()
