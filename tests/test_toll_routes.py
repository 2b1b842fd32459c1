from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from api.toll_routes import calculator
from main import app


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def loggers():
    with patch("api.toll_routes.general_logger") as general, \
            patch("api.toll_routes.txn_logger") as txn, \
            patch("api.toll_routes.alert_logger") as alert:
        yield general, txn, alert


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Toll fee API is running"}


def test_single_passage(client, loggers):
    response = client.post("/toll/passage", json={"vehicle_class": "Car", "passage": "2013-03-11T07:15:00"})
    assert response.status_code == 200
    assert response.json() == {"status": "OK", "fee": 18}
    loggers[1].info.assert_called_once()


def test_single_passage_exempt_vehicle(client, loggers):
    response = client.post("/toll/passage", json={"vehicle_class": "Diplomat", "passage": "2013-03-11T07:15:00"})
    assert response.json() == {"status": "OK", "fee": 0}


def test_multiple_passages(client, loggers):
    payload = {
        "vehicle_class": "Car",
        "passages": [
            "2013-03-11T06:30:00", "2013-03-11T07:31:00", "2013-03-11T15:00:00",
            "2013-03-12T06:30:00", "2013-03-12T07:31:00", "2013-03-12T15:00:00",
        ],
    }
    response = client.post("/toll/passages", json=payload)
    assert response.status_code == 200
    assert response.json() == {
        "status": "OK",
        "fee": 88,
        "daily_totals": {"2013-03-11": 44, "2013-03-12": 44},
    }


def test_timezone_is_not_converted(client, loggers):
    response = client.post("/toll/passage", json={"vehicle_class": "Car", "passage": "2013-03-11T07:15:00+05:00"})
    assert response.json() == {"status": "OK", "fee": 18}


def test_undefined_vehicle_is_skipped(client, loggers):
    general, _, _ = loggers
    response = client.post("/toll/passages", json={"vehicle_class": "Undefined", "passages": ["2013-03-11T07:15:00"]})
    assert response.json() == {"status": "SKIPPED", "fee": 0}
    general.info.assert_called_once_with("Vehicle type is not valid. Skipping calculation")


def test_undefined_vehicle_single_passage_is_skipped(client, loggers):
    response = client.post("/toll/passage", json={"vehicle_class": "Undefined", "passage": "2013-03-11T07:15:00"})
    assert response.json() == {"status": "SKIPPED", "fee": 0}


def test_no_passages_is_skipped(client, loggers):
    general, txn, _ = loggers
    response = client.post("/toll/passages", json={"vehicle_class": "Car", "passages": []})
    assert response.json() == {"status": "SKIPPED", "fee": 0}
    general.info.assert_called_once_with("No passings registered for vehicle. Skipping calculation.")
    txn.info.assert_not_called()


def test_missing_body(client, loggers):
    _, _, alert = loggers
    response = client.post("/toll/passages")
    assert response.json()["status"] == "ERROR"
    alert.error.assert_called_once_with("VehiclePassagesRequest object is null.")


def test_unknown_vehicle_class_is_rejected(client):
    response = client.post("/toll/passage", json={"vehicle_class": "Spaceship", "passage": "2013-03-11T07:15:00"})
    assert response.status_code == 422


def test_unparseable_timestamp_is_rejected(client):
    response = client.post("/toll/passages", json={"vehicle_class": "Car", "passages": ["yesterday"]})
    assert response.status_code == 422


@pytest.mark.parametrize("passages", [[1362986100], [1362986100.0], ["2013-03-11T07:15:00", 1362986100]])
def test_epoch_numbers_are_rejected(client, passages):
    response = client.post("/toll/passages", json={"vehicle_class": "Car", "passages": passages})
    assert response.status_code == 422


def test_epoch_number_single_passage_is_rejected(client):
    response = client.post("/toll/passage", json={"vehicle_class": "Car", "passage": 1362986100})
    assert response.status_code == 422


def test_daily_totals_computed_once(client, loggers):
    payload = {"vehicle_class": "Car", "passages": ["2013-03-11T06:30:00", "2013-03-11T07:31:00"]}
    with patch("api.toll_routes.calculator.daily_totals", wraps=calculator.daily_totals) as daily_totals, \
            patch("api.toll_routes.calculator.fee_for_passages") as fee_for_passages:
        response = client.post("/toll/passages", json=payload)
    assert response.json()["fee"] == 31
    daily_totals.assert_called_once()
    fee_for_passages.assert_not_called()
