"""Tests for the sentence decoding endpoint."""

import json

from fastapi.testclient import TestClient

from gnssdecode import parse_nmea
from server.formatters import format_nmea_message

RMC_VALID = "$GNRMC,041704.000,A,2935.21718,N,10631.58906,E,0.00,172.39,071124,,,A*7E"
GSV_VALID = "$GPGSV,1,1,01,05,45,120,38*44"
TXT_VALID = "$GNTXT,01,01,02,ANTENNA OK*28"


def test_decode_rmc(client: TestClient) -> None:
    response = client.post("/sentences", json={"sentence": RMC_VALID})
    assert response.status_code == 200
    data = response.json()
    assert data["type"] == "rmc"
    assert data["raw_message"] == RMC_VALID
    assert data["rmc"]["status"] == "A"
    assert data["rmc"]["location_mode"] == "COMBINED"
    assert data["rmc"]["utc_time"] == "2000-01-01T04:17:04+00:00"
    assert abs(data["rmc"]["latitude"] - 29.586953) < 1e-6


def test_decode_gsv_satellites(client: TestClient) -> None:
    data = client.post("/sentences", json={"sentence": GSV_VALID}).json()
    assert data["gsv"]["satellites"] == [
        {
            "satellite_id": 5,
            "elevation": 45.0,
            "azimuth": 120.0,
            "signal_to_noise_ratio": 38.0,
        }
    ]


def test_unsupported_sentence_has_null_type(client: TestClient) -> None:
    data = client.post("/sentences", json={"sentence": TXT_VALID}).json()
    assert data == {"type": None, "raw_message": TXT_VALID}


def test_bad_checksum_is_rejected(client: TestClient) -> None:
    response = client.post("/sentences", json={"sentence": RMC_VALID[:-2] + "00"})
    assert response.status_code == 422
    assert "checksum" in response.json()["detail"]


def test_missing_sentence_is_rejected(client: TestClient) -> None:
    assert client.post("/sentences", json={}).status_code == 422


def test_decoded_message_is_broadcast(client: TestClient) -> None:
    with client.websocket_connect("/ws") as websocket:
        client.post("/sentences", json={"sentence": GSV_VALID})
        data = websocket.receive_json()
    assert data["type"] == "gsv"


def test_rejected_sentence_is_not_broadcast(client: TestClient) -> None:
    with client.websocket_connect("/ws") as websocket:
        client.post("/sentences", json={"sentence": "Invalid NMEA message"})
        client.post("/sentences", json={"sentence": RMC_VALID})
        data = websocket.receive_json()
    assert data["type"] == "rmc"


def test_format_nmea_message_round_trips_json() -> None:
    message = format_nmea_message(parse_nmea(RMC_VALID))
    assert json.loads(message)["rmc"]["date"] == "071124"
