import json
import os
from dataclasses import dataclass
from datetime import date
from typing import FrozenSet

from modules.exceptions import ConfigurationError
from modules.holidays import DEFAULT_HOLIDAY_DATES, date_range

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DEFAULT_CONFIG_PATH = os.path.join(BASE_DIR, "configs", "config.json")

CONFIG_KEYS = {"max_daily_fee", "window_minutes", "holiday_dates"}
KEY_ALIASES = {"holidayDates": "holiday_dates"}


@dataclass(frozen=True)
class TollConfig:
    """Toll settings shared by every calculation."""
    max_daily_fee: int = 60
    window_minutes: int = 60
    holiday_dates: FrozenSet[date] = DEFAULT_HOLIDAY_DATES


def parse_holiday_dates(entries) -> FrozenSet[date]:
    """
        Accepts "YYYY-MM-DD" and inclusive "YYYY-MM-DD/YYYY-MM-DD" ranges.
    """
    days = set()
    for entry in entries:
        try:
            if "/" in entry:
                start, end = (date.fromisoformat(part.strip()) for part in entry.split("/", 1))
                if end < start:
                    raise ConfigurationError(f"Holiday range ends before it starts: {entry}")
                days.update(date_range(start, end))
            else:
                days.add(date.fromisoformat(entry.strip()))
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid holiday date {entry!r}: {e}") from e
    return frozenset(days)


def load_config(path=DEFAULT_CONFIG_PATH) -> TollConfig:
    if not os.path.exists(path):
        return TollConfig()

    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Cannot parse {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigurationError(f"{path} must contain a JSON object")

    raw = normalize_keys(raw, path)

    max_daily_fee = raw.get("max_daily_fee", TollConfig.max_daily_fee)
    window_minutes = raw.get("window_minutes", TollConfig.window_minutes)
    for key, value in (("max_daily_fee", max_daily_fee), ("window_minutes", window_minutes)):
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            raise ConfigurationError(f"{key} must be a non-negative integer, got {value!r}")

    if "holiday_dates" in raw:
        if not isinstance(raw["holiday_dates"], list):
            raise ConfigurationError("holiday_dates must be a list")
        holiday_dates = parse_holiday_dates(raw["holiday_dates"])
    else:
        holiday_dates = DEFAULT_HOLIDAY_DATES

    return TollConfig(
        max_daily_fee=max_daily_fee,
        window_minutes=window_minutes,
        holiday_dates=holiday_dates,
    )


def normalize_keys(raw, path):
    """
        Maps aliases onto their canonical key. Unknown keys are an error.
    """
    normalized = {}
    for key, value in raw.items():
        canonical = KEY_ALIASES.get(key, key)
        if canonical not in CONFIG_KEYS:
            raise ConfigurationError(f"Unknown key {key!r} in {path}")
        if canonical in normalized:
            raise ConfigurationError(f"{canonical} is set more than once in {path}")
        normalized[canonical] = value
    return normalized
