"""Tests for the Flask web portal API."""

import pytest

import api


@pytest.fixture
def client():
    api.app.config["TESTING"] = True
    api.engines.clear()
    with api.app.test_client() as client:
        yield client
    api.engines.clear()


def send(client, action, value=None, **extra):
    payload = {"action": action, "value": value}
    payload.update(extra)
    return client.post("/api/calculate", json=payload)


def test_info_page(client):
    resp = client.get("/api")
    assert resp.status_code == 200
    assert b"SimpleCalc API Server" in resp.data


def test_calculate_sequence(client):
    for action, value in [("digit", "5"), ("operator", "+"), ("digit", "3")]:
        assert send(client, action, value).status_code == 200
    resp = send(client, "equals")
    body = resp.get_json()
    assert body["success"] is True
    assert body["data"] == {
        "entry": "8",
        "formula": "5 + 3 =",
        "operations_enabled": True,
        "error": None,
    }


def test_sessions_are_isolated(client):
    send(client, "digit", "4", session="a")
    send(client, "digit", "9", session="b")
    a = client.get("/api/state?session=a").get_json()["data"]
    b = client.get("/api/state?session=b").get_json()["data"]
    assert a["entry"] == "4"
    assert b["entry"] == "9"


def test_error_message_is_translated(client):
    send(client, "digit", "8")
    send(client, "operator", "÷")
    body = send(client, "equals", language="hi").get_json()
    assert body["data"]["error"] == "divide_by_zero"
    assert body["data"]["entry"] == "शून्य से भाग नहीं दिया जा सकता"
    assert body["data"]["operations_enabled"] is False


def test_special_operation(client):
    send(client, "digit", "9")
    body = send(client, "special", "sqrt").get_json()
    assert body["data"]["entry"] == "3"
    assert body["data"]["formula"] == "√(9) ="


def test_unknown_action_is_bad_request(client):
    resp = send(client, "explode")
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_missing_body_is_bad_request(client):
    resp = client.post("/api/calculate")
    assert resp.status_code == 400


def test_key_endpoint(client):
    client.post("/api/key", json={"char": "7", "keysym": "7"})
    resp = client.post("/api/key", json={"char": "", "keysym": "BackSpace"})
    body = resp.get_json()
    assert body["handled"] is True
    assert body["data"]["entry"] == "0"

    body = client.post("/api/key", json={"char": "q", "keysym": "q"}).get_json()
    assert body["handled"] is False


def test_reset_discards_state(client):
    send(client, "digit", "6")
    send(client, "operator", "×")
    body = client.post("/api/reset", json={}).get_json()
    assert body["data"]["entry"] == "0"
    assert body["data"]["formula"] == ""
    assert api.engines["default"].first is None
