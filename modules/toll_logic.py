from collections import defaultdict
from datetime import date, datetime
from typing import Dict, Iterable, List, Optional

from modules.config import TollConfig
from modules.exceptions import InvalidPassageError
from modules.fee_schedule import fee_for_passage
from modules.holidays import HolidayCalendar
from modules.logger import general_logger
from modules.windows import WINDOW_MINUTES, fee_per_window, group_into_windows

MAX_DAILY_FEE = 60


class TollCalculator:
    """
        Computes the toll owed for a vehicle's passages.
        Near passages are charged once at their highest fee and each
        calendar day is capped at `max_daily_fee`.
    """

    def __init__(self, calendar: Optional[HolidayCalendar] = None,
                 max_daily_fee: int = MAX_DAILY_FEE, window_minutes: int = WINDOW_MINUTES):
        self.calendar = calendar or HolidayCalendar()
        self.max_daily_fee = max_daily_fee
        self.window_minutes = window_minutes

    @classmethod
    def from_config(cls, config: TollConfig) -> "TollCalculator":
        return cls(
            calendar=HolidayCalendar(config.holiday_dates),
            max_daily_fee=config.max_daily_fee,
            window_minutes=config.window_minutes,
        )

    def fee_for_single_passage(self, vehicle, timestamp: datetime) -> int:
        _check_passage(timestamp)
        return fee_for_passage(vehicle, timestamp, self.calendar)

    def daily_total(self, vehicle, passages: Iterable[datetime]) -> int:
        """Capped total for passages that all fall on one calendar date."""
        passages = list(passages)
        for passage in passages:
            _check_passage(passage)
        days = {passage.date() for passage in passages}
        if len(days) > 1:
            raise InvalidPassageError(
                f"daily_total expects passages from one date, got {', '.join(str(d) for d in sorted(days))}"
            )
        windows = group_into_windows(passages, self.window_minutes)
        total = sum(fee_per_window(vehicle, window, self.calendar) for window in windows)
        return min(total, self.max_daily_fee)

    def daily_totals(self, vehicle, passages: Iterable[datetime]) -> Dict[date, int]:
        by_day: Dict[date, List[datetime]] = defaultdict(list)
        for passage in passages:
            _check_passage(passage)
            by_day[passage.date()].append(passage)

        totals = {}
        for day in sorted(by_day):
            totals[day] = self.daily_total(vehicle, by_day[day])
            general_logger.debug(f"Daily total for {day}: {totals[day]} ({len(by_day[day])} passages)")
        return totals

    def grand_total(self, vehicle, passages: Iterable[datetime]) -> int:
        return sum(self.daily_totals(vehicle, passages).values())

    def fee_for_passages(self, vehicle, timestamps: Iterable[datetime]) -> int:
        return self.grand_total(vehicle, timestamps)


def _check_passage(passage):
    if not isinstance(passage, datetime):
        raise InvalidPassageError(f"Passage must be a datetime, got {type(passage).__name__}: {passage!r}")
