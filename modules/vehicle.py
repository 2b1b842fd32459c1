from dataclasses import dataclass
from enum import Enum


class VehicleClass(Enum):
    CAR = "Car"
    MOTORBIKE = "Motorbike"
    TRACTOR = "Tractor"
    EMERGENCY = "Emergency"
    DIPLOMAT = "Diplomat"
    FOREIGN = "Foreign"
    MILITARY = "Military"
    UNDEFINED = "Undefined"


EXEMPT_VEHICLE_CLASSES = frozenset({
    VehicleClass.MOTORBIKE,
    VehicleClass.TRACTOR,
    VehicleClass.EMERGENCY,
    VehicleClass.DIPLOMAT,
    VehicleClass.FOREIGN,
    VehicleClass.MILITARY,
})


@dataclass(frozen=True)
class Vehicle:
    vehicle_class: VehicleClass

    def is_toll_exempt(self) -> bool:
        return self.vehicle_class in EXEMPT_VEHICLE_CLASSES


def is_fee_free_vehicle(vehicle) -> bool:
    """
        True only for vehicles whose class is in the exempt set.
        Missing vehicles and unknown classes are charged.
    """
    if vehicle is None:
        return False
    vehicle_class = getattr(vehicle, "vehicle_class", None)
    if not isinstance(vehicle_class, VehicleClass):
        return False
    return vehicle_class in EXEMPT_VEHICLE_CLASSES
