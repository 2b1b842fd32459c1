from datetime import datetime

import pytest

from modules.holidays import HolidayCalendar
from modules.toll_logic import TollCalculator
from modules.vehicle import Vehicle, VehicleClass

MONDAY = datetime(2013, 3, 11)


def at(hour, minute, day=MONDAY):
    return day.replace(hour=hour, minute=minute)


@pytest.fixture
def car():
    return Vehicle(VehicleClass.CAR)


@pytest.fixture
def motorbike():
    return Vehicle(VehicleClass.MOTORBIKE)


@pytest.fixture
def calculator():
    return TollCalculator()


@pytest.fixture
def no_holidays():
    return HolidayCalendar(holiday_dates=[])
