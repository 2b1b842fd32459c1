from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Iterable, List, Optional

from modules.fee_schedule import fee_for_passage
from modules.holidays import HolidayCalendar

WINDOW_MINUTES = 60


@dataclass
class Window:
    """Passages charged together, the highest fee wins."""
    opening: datetime
    members: List[datetime] = field(default_factory=list)

    def passages(self) -> List[datetime]:
        return [self.opening] + self.members


def group_into_windows(passages: Iterable[datetime], window_minutes: int = WINDOW_MINUTES) -> List[Window]:
    """
        Split one day's passages into consecutive windows.
        A passage joins the current window when it is at most
        `window_minutes` after the window's opening passage,
        otherwise it opens the next window.
    """
    limit = timedelta(minutes=window_minutes)
    windows: List[Window] = []
    current = None

    for passage in sorted(passages):
        if current is not None and passage - current.opening <= limit:
            current.members.append(passage)
        else:
            current = Window(opening=passage)
            windows.append(current)

    return windows


def fee_per_window(vehicle, window: Window, calendar: Optional[HolidayCalendar] = None) -> int:
    return max(fee_for_passage(vehicle, passage, calendar) for passage in window.passages())
