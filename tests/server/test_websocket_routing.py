"""Tests for websocket payload routing logic."""

from fastapi.testclient import TestClient

from server.main import app
from tests.server.conftest import ControlledGPS
from tests.server.helpers import make_error_frame, make_fix_frame


def test_fix_frame_yields_fix_message(gps_controller: ControlledGPS) -> None:
    with TestClient(app) as client, client.websocket_connect("/ws") as websocket:
        gps_controller.message_queue.put(make_fix_frame())
        data = websocket.receive_json()
        assert data["type"] == "fix"
        assert data["fix"]["latitude"] == "4807.038"
        assert data["fix"]["num_sat"] == 8
        assert data["fix"]["last_nmea"] == "RMC"
        assert data["fix"]["satellites"] == [
            {"id": "04", "elevation": "40", "azimuth": "083"}
        ]
        assert data["seen_types"] == ["GGA", "RMC"]
        assert data["utc"] == "1994-03-23T12:35:19+00:00"


def test_fix_without_date_yields_null_utc(gps_controller: ControlledGPS) -> None:
    with TestClient(app) as client, client.websocket_connect("/ws") as websocket:
        gps_controller.message_queue.put(make_fix_frame(with_date=False))
        data = websocket.receive_json()
        assert data["type"] == "fix"
        assert data["utc"] is None


def test_error_frame_yields_error_message(gps_controller: ControlledGPS) -> None:
    with TestClient(app) as client, client.websocket_connect("/ws") as websocket:
        gps_controller.message_queue.put(make_error_frame())
        data = websocket.receive_json()
        assert data["type"] == "error"
        assert data["error"] == "TransportError"
        assert "no data received" in data["message"]


def test_gps_opened_by_server(gps_controller: ControlledGPS) -> None:
    with TestClient(app) as client, client.websocket_connect("/ws") as websocket:
        gps_controller.message_queue.put(make_fix_frame())
        websocket.receive_json()
    assert gps_controller.entered
