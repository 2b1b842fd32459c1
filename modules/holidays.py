from datetime import date, datetime, timedelta
from typing import FrozenSet, Iterable, Optional


def date_range(start: date, end: date):
    day = start
    while day <= end:
        yield day
        day += timedelta(days=1)


# Holidays and reduced traffic days observed in 2013
DEFAULT_HOLIDAY_DATES: FrozenSet[date] = frozenset([
    date(2013, 1, 1),
    date(2013, 3, 28), date(2013, 3, 29),
    date(2013, 4, 1), date(2013, 4, 30),
    date(2013, 5, 1), date(2013, 5, 8), date(2013, 5, 9),
    date(2013, 6, 5), date(2013, 6, 6), date(2013, 6, 21),
    *date_range(date(2013, 7, 1), date(2013, 7, 31)),
    date(2013, 11, 1),
    date(2013, 12, 24), date(2013, 12, 25), date(2013, 12, 26), date(2013, 12, 31),
])


class HolidayCalendar:
    """Decides which calendar dates are toll free."""

    def __init__(self, holiday_dates: Optional[Iterable[date]] = None):
        if holiday_dates is None:
            holiday_dates = DEFAULT_HOLIDAY_DATES
        self.holiday_dates = frozenset(holiday_dates)

    def is_holiday(self, day) -> bool:
        return _as_date(day) in self.holiday_dates

    def is_fee_free_date(self, day) -> bool:
        day = _as_date(day)
        if day.weekday() >= 5:  # Saturday, Sunday
            return True
        return day in self.holiday_dates


def _as_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


DEFAULT_CALENDAR = HolidayCalendar()


def is_fee_free_date(day, calendar: Optional[HolidayCalendar] = None) -> bool:
    return (calendar or DEFAULT_CALENDAR).is_fee_free_date(day)
