from __future__ import annotations

import logging

from flask.testing import FlaskClient


def award_payload(**overrides) -> dict:
    payload = {"agi": 45000, "householdSize": 4}
    payload.update(overrides)
    return payload


def test_full_award_response(client: FlaskClient):
    resp = client.post("/api/calc/award", json=award_payload())

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["awardRatio"] == 1.0
    assert body["k8"] == 6166.0
    assert body["high"] == 8408.0
    assert body["display"] == {"k8": "$6,166", "high": "$8,408"}
    assert body["disclaimer"].startswith("These amounts are estimates")


def test_decayed_award_response(client: FlaskClient):
    resp = client.post("/api/calc/award", json=award_payload(agi=120000, householdSize=2))

    assert resp.status_code == 200
    body = resp.get_json()
    assert 5.67 < body["fplRatio"] < 5.68
    assert body["display"] == {"k8": "$2,733.17", "high": "$3,726.97"}


def test_string_values_from_a_form_are_accepted(client: FlaskClient):
    resp = client.post("/api/calc/award", json={"agi": "10000000", "householdSize": "1"})

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["k8"] == 616.6
    assert body["high"] == 840.8
    assert body["display"]["k8"] == "$616.60"


def test_invalid_values_return_422(client: FlaskClient, caplog):
    with caplog.at_level(logging.WARNING, logger="edchoice"):
        resp = client.post("/api/calc/award", json=award_payload(agi=-1, householdSize=1.5))

    assert resp.status_code == 422
    detail = resp.get_json()["detail"]
    assert {tuple(error["loc"]) for error in detail} == {("agi",), ("householdSize",)}
    assert "rejected award input" in caplog.text


def test_missing_body_returns_400(client: FlaskClient):
    resp = client.post("/api/calc/award", data="not json", content_type="text/plain")

    assert resp.status_code == 400
    assert resp.get_json() == {"detail": "Request body must be a JSON object"}


def test_json_array_body_returns_400(client: FlaskClient):
    resp = client.post("/api/calc/award", json=[45000, 4])

    assert resp.status_code == 400


def test_cors_header_for_configured_origin(client: FlaskClient):
    resp = client.post(
        "/api/calc/award",
        json=award_payload(),
        headers={"Origin": "http://localhost:5173"},
    )

    assert resp.headers.get("Access-Control-Allow-Origin") == "http://localhost:5173"


def test_estimate_is_logged(client: FlaskClient, caplog):
    with caplog.at_level(logging.INFO, logger="edchoice"):
        client.post("/api/calc/award", json=award_payload())

    assert "award estimate: household_size=4" in caplog.text


def test_household_size_with_hundreds_of_digits(client: FlaskClient):
    resp = client.post("/api/calc/award", json=award_payload(householdSize=int("9" * 400)))

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["fplRatio"] == 0.0
    assert body["awardRatio"] == 1.0
    assert body["display"] == {"k8": "$6,166", "high": "$8,408"}
