from dataclasses import dataclass
from datetime import datetime, time
from typing import Optional, Tuple

from modules.holidays import HolidayCalendar, is_fee_free_date
from modules.vehicle import is_fee_free_vehicle


@dataclass(frozen=True)
class FeeBand:
    start: time
    end: time
    fee: int

    def covers(self, hour: int, minute: int) -> bool:
        return (self.start.hour, self.start.minute) <= (hour, minute) <= (self.end.hour, self.end.minute)


# Evaluated in order, first match wins. Bounds are inclusive.
FEE_BANDS: Tuple[FeeBand, ...] = (
    FeeBand(time(6, 0), time(6, 29), 8),
    FeeBand(time(6, 30), time(6, 59), 13),
    FeeBand(time(7, 0), time(7, 59), 18),
    FeeBand(time(8, 0), time(8, 29), 13),
    FeeBand(time(8, 30), time(14, 59), 8),
    FeeBand(time(15, 0), time(15, 29), 13),
    FeeBand(time(15, 30), time(16, 59), 18),
    FeeBand(time(17, 0), time(17, 59), 13),
    FeeBand(time(18, 0), time(18, 29), 8),
)


def fee_at(time_of_day: time) -> int:
    """
        Base fee for a time of day. Seconds are ignored,
        anything outside the bands is free.
    """
    for band in FEE_BANDS:
        if band.covers(time_of_day.hour, time_of_day.minute):
            return band.fee
    return 0


def fee_for_passage(vehicle, timestamp: datetime, calendar: Optional[HolidayCalendar] = None) -> int:
    if is_fee_free_date(timestamp, calendar) or is_fee_free_vehicle(vehicle):
        return 0
    return fee_at(timestamp.time())
