from datetime import datetime
from typing import Annotated, List

from pydantic import BaseModel, BeforeValidator, Field

from modules.vehicle import Vehicle, VehicleClass


def iso_timestamp_only(value):
    # epoch numbers would be read as UTC, passages are local wall-clock readings
    if isinstance(value, (int, float)):
        raise ValueError("passage must be an ISO 8601 timestamp, not a number")
    return value


LocalTimestamp = Annotated[datetime, BeforeValidator(iso_timestamp_only)]


class VehiclePassageRequest(BaseModel):
    vehicle_class: VehicleClass
    passage: LocalTimestamp

    def vehicle(self) -> Vehicle:
        return Vehicle(self.vehicle_class)


class VehiclePassagesRequest(BaseModel):
    vehicle_class: VehicleClass
    passages: List[LocalTimestamp] = Field(default_factory=list)

    def vehicle(self) -> Vehicle:
        return Vehicle(self.vehicle_class)


# {
#   "vehicle_class": "Car",
#   "passages": ["2013-03-11T06:30:00", "2013-03-11T07:31:00", "2013-03-11T15:00:00"]
# }
