from typing import Optional

from fastapi import APIRouter, Body

from api.schemas import VehiclePassageRequest, VehiclePassagesRequest
from modules.config import load_config
from modules.exceptions import TollError
from modules.logger import alert_logger, general_logger, txn_logger
from modules.toll_logic import TollCalculator
from modules.vehicle import VehicleClass

router = APIRouter()

calculator = TollCalculator.from_config(load_config())


def wall_clock(timestamp):
    # no timezone conversion, keep the local reading
    return timestamp.replace(tzinfo=None)


@router.post("/passage")
def calculate_fee_by_passage(payload: Optional[VehiclePassageRequest] = Body(None)):
    if payload is None:
        alert_logger.error("VehiclePassageRequest object is null.")
        return {"status": "ERROR", "message": "Request body is required."}
    if payload.vehicle_class == VehicleClass.UNDEFINED:
        general_logger.info("Vehicle type is not valid. Skipping calculation")
        return {"status": "SKIPPED", "fee": 0}

    try:
        fee = calculator.fee_for_single_passage(payload.vehicle(), wall_clock(payload.passage))
    except TollError as e:
        alert_logger.error(f"EXCEPTION during toll calculation: {str(e)}")
        return {"status": "ERROR", "message": str(e)}

    txn_logger.info(f"Toll fee {fee} for {payload.vehicle_class.value} passage at {payload.passage.isoformat()}")
    return {"status": "OK", "fee": fee}


@router.post("/passages")
def calculate_fee_by_passages(payload: Optional[VehiclePassagesRequest] = Body(None)):
    if payload is None:
        alert_logger.error("VehiclePassagesRequest object is null.")
        return {"status": "ERROR", "message": "Request body is required."}
    if payload.vehicle_class == VehicleClass.UNDEFINED:
        general_logger.info("Vehicle type is not valid. Skipping calculation")
        return {"status": "SKIPPED", "fee": 0}
    if not payload.passages:
        general_logger.info("No passings registered for vehicle. Skipping calculation.")
        return {"status": "SKIPPED", "fee": 0}

    general_logger.info(f"Calculating toll for {payload.vehicle_class.value} with {len(payload.passages)} passages")
    passages = [wall_clock(p) for p in payload.passages]
    vehicle = payload.vehicle()
    try:
        daily_totals = calculator.daily_totals(vehicle, passages)
    except TollError as e:
        alert_logger.error(f"EXCEPTION during toll calculation: {str(e)}")
        return {"status": "ERROR", "message": str(e)}

    fee = sum(daily_totals.values())
    txn_logger.info(f"Toll fee {fee} for {payload.vehicle_class.value} over {len(daily_totals)} day(s)")
    return {
        "status": "OK",
        "fee": fee,
        "daily_totals": {day.isoformat(): total for day, total in daily_totals.items()},
    }
