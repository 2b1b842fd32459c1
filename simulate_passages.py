from datetime import datetime, timedelta

from faker import Faker

from modules.logger import txn_logger
from modules.toll_logic import TollCalculator
from modules.vehicle import Vehicle, VehicleClass

# Undefined vehicles never reach the calculator
SIMULATED_CLASSES = [vc for vc in VehicleClass if vc != VehicleClass.UNDEFINED]


def generate_passages(fake, start, days, max_per_day=8):
    passages = []
    for offset in range(days):
        day = start + timedelta(days=offset)
        for _ in range(fake.random_int(min=0, max=max_per_day)):
            passages.append(fake.date_time_between(
                start_date=day.replace(hour=5, minute=0, second=0),
                end_date=day.replace(hour=20, minute=0, second=0),
            ))
    return passages


def run_simulation(vehicles=10, days=5, start=datetime(2013, 3, 11), seed=None, calculator=None):
    """
        Simulate a batch of vehicles driving through the toll points
        and compute what each one owes.
    """
    fake = Faker()
    if seed is not None:
        fake.seed_instance(seed)
    calculator = calculator or TollCalculator()

    results = []
    for _ in range(vehicles):
        plate = fake.license_plate()
        vehicle = Vehicle(fake.random_element(SIMULATED_CLASSES))
        passages = generate_passages(fake, start, days)
        fee = calculator.fee_for_passages(vehicle, passages)
        txn_logger.info(f"Simulated {plate} [{vehicle.vehicle_class.value}] | {len(passages)} passages | fee {fee}")
        results.append({
            "license_plate": plate,
            "vehicle_class": vehicle.vehicle_class.value,
            "passages": passages,
            "fee": fee,
        })
    return results


if __name__ == "__main__":
    for result in run_simulation(seed=2013):
        print(f"{result['license_plate']:<10} {result['vehicle_class']:<10} {len(result['passages']):>3} passages  fee {result['fee']}")
