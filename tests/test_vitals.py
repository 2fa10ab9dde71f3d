"""
Test vital recording, listing, trends and deletion.
"""

import pytest


def record(client, headers, vital_type, value, recorded_at=None):
    payload = {"vital_type": vital_type, "value": value}
    if recorded_at:
        payload["recorded_at"] = recorded_at
    response = client.post("/api/vitals", headers=headers, json=payload)
    assert response.status_code == 201, response.text
    return response.json()["vital"]


def test_record_vital(client, alice):
    user, headers = alice
    response = client.post(
        "/api/vitals",
        headers=headers,
        json={"vital_type": "Heart Rate", "value": 72, "recorded_at": "2024-01-10T08:30:00"},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Vital recorded successfully"
    assert body["vital"]["user_id"] == user["id"]
    assert body["vital"]["vital_type"] == "Heart Rate"
    assert body["vital"]["value"] == 72.0
    assert body["vital"]["recorded_at"] == "2024-01-10T08:30:00"


def test_record_vital_defaults_timestamp(client, alice):
    _, headers = alice
    vital = record(client, headers, "Weight", 70.5)
    assert vital["recorded_at"]


def test_record_vital_normalizes_timezone(client, alice):
    _, headers = alice
    vital = record(client, headers, "Oxygen", 98, "2024-01-10T12:00:00+02:00")
    assert vital["recorded_at"] == "2024-01-10T10:00:00"


@pytest.mark.parametrize(
    "payload",
    [
        {"vital_type": "Mood", "value": 5},
        {"vital_type": "BP"},
        {"vital_type": "BP", "value": "high"},
        {"value": 120},
    ],
)
def test_record_vital_validation(client, alice, payload):
    _, headers = alice
    response = client.post("/api/vitals", headers=headers, json=payload)
    assert response.status_code == 400


@pytest.mark.parametrize(
    "raw_body",
    [
        b'{"vital_type": "BP", "value": 1e400}',
        b'{"vital_type": "BP", "value": NaN}',
        b'{"vital_type": "BP", "value": -Infinity}',
    ],
)
def test_record_vital_rejects_non_finite_values(client, alice, raw_body):
    _, headers = alice
    response = client.post(
        "/api/vitals",
        headers={**headers, "Content-Type": "application/json"},
        content=raw_body,
    )
    assert response.status_code == 400
    assert client.get("/api/vitals", headers=headers).json()["vitals"] == []


def test_record_vital_invalid_type_message(client, alice):
    _, headers = alice
    response = client.post("/api/vitals", headers=headers, json={"vital_type": "Mood", "value": 1})
    assert "Invalid vital type" in response.json()["detail"]


def test_list_vitals_newest_first_and_filtered(client, alice):
    _, headers = alice
    record(client, headers, "BP", 120, "2024-01-01T09:00:00")
    record(client, headers, "BP", 125, "2024-01-03T09:00:00")
    record(client, headers, "Sugar", 95, "2024-01-02T09:00:00")

    vitals = client.get("/api/vitals", headers=headers).json()["vitals"]
    assert [v["value"] for v in vitals] == [125.0, 95.0, 120.0]

    bp = client.get("/api/vitals", headers=headers, params={"vital_type": "BP"}).json()["vitals"]
    assert [v["value"] for v in bp] == [125.0, 120.0]


def test_list_vitals_date_bounds_are_inclusive_days(client, alice):
    _, headers = alice
    record(client, headers, "BP", 110, "2024-01-09T23:59:00")
    record(client, headers, "BP", 120, "2024-01-10T00:00:00")
    record(client, headers, "BP", 130, "2024-01-10T23:30:00")
    record(client, headers, "BP", 140, "2024-01-11T00:00:00")

    response = client.get(
        "/api/vitals",
        headers=headers,
        params={"start_date": "2024-01-10", "end_date": "2024-01-10"},
    )
    assert [v["value"] for v in response.json()["vitals"]] == [130.0, 120.0]


def test_vitals_are_private(client, alice, bob):
    _, alice_headers = alice
    _, bob_headers = bob
    record(client, alice_headers, "BP", 120)
    assert client.get("/api/vitals", headers=bob_headers).json()["vitals"] == []


def test_trends_grouped_and_ascending(client, alice):
    _, headers = alice
    record(client, headers, "BP", 130, "2024-01-03T09:00:00")
    record(client, headers, "Sugar", 90, "2024-01-02T09:00:00")
    record(client, headers, "BP", 120, "2024-01-01T09:00:00")

    trends = client.get("/api/vitals/trends", headers=headers).json()["trends"]
    assert set(trends) == {"BP", "Sugar"}
    assert trends["BP"] == [
        {"value": 120.0, "date": "2024-01-01T09:00:00"},
        {"value": 130.0, "date": "2024-01-03T09:00:00"},
    ]
    assert trends["Sugar"] == [{"value": 90.0, "date": "2024-01-02T09:00:00"}]


def test_trends_filtered_by_type_and_dates(client, alice):
    _, headers = alice
    record(client, headers, "BP", 120, "2024-01-01T09:00:00")
    record(client, headers, "BP", 130, "2024-02-01T09:00:00")
    record(client, headers, "Sugar", 90, "2024-02-01T10:00:00")

    response = client.get(
        "/api/vitals/trends",
        headers=headers,
        params={"vital_type": "BP", "start_date": "2024-01-15"},
    )
    assert response.json()["trends"] == {
        "BP": [{"value": 130.0, "date": "2024-02-01T09:00:00"}]
    }


def test_trends_empty(client, alice):
    _, headers = alice
    assert client.get("/api/vitals/trends", headers=headers).json() == {"trends": {}}


def test_delete_vital(client, alice, bob):
    _, alice_headers = alice
    _, bob_headers = bob
    vital = record(client, alice_headers, "Temperature", 37.2)

    response = client.delete(f"/api/vitals/{vital['id']}", headers=bob_headers)
    assert response.status_code == 404
    assert response.json()["detail"] == "Vital not found or access denied"

    response = client.delete(f"/api/vitals/{vital['id']}", headers=alice_headers)
    assert response.status_code == 200
    assert response.json()["message"] == "Vital deleted successfully"
    assert client.get("/api/vitals", headers=alice_headers).json()["vitals"] == []


def test_list_vitals_end_date_at_calendar_limit(client, alice):
    _, headers = alice
    record(client, headers, "Sugar", 100, "2024-05-01T07:00:00")

    for path in ("/api/vitals", "/api/vitals/trends"):
        response = client.get(path, headers=headers, params={"end_date": "9999-12-31"})
        assert response.status_code == 200
    vitals = client.get(
        "/api/vitals", headers=headers, params={"end_date": "9999-12-31"}
    ).json()["vitals"]
    assert [v["value"] for v in vitals] == [100.0]


@pytest.mark.parametrize("vital_id", ["0", "99999999999999999999"])
def test_delete_vital_out_of_range_id(client, alice, vital_id):
    _, headers = alice
    response = client.delete(f"/api/vitals/{vital_id}", headers=headers)
    assert response.status_code == 400
