"""Tests for the HTTP API."""

from uuid import uuid4

from fastapi.testclient import TestClient

from nutrition_dashboard.api.app import create_app
from tests.conftest import OWNER_ID

HEADERS = {"X-Api-Token": "api-token"}
BASE = f"/users/{OWNER_ID}"


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_requires_api_token(container) -> None:
    client = TestClient(create_app(container))

    assert client.get(f"{BASE}/entries").status_code == 401
    assert (
        client.get(f"{BASE}/entries", headers={"X-Api-Token": "wrong"}).status_code
        == 401
    )
    assert (
        client.get(f"{BASE}/entries", headers={"X-Api-Token": ""}).status_code == 401
    )


def test_create_and_list_entries(container) -> None:
    client = TestClient(create_app(container))

    created = client.post(
        f"{BASE}/entries",
        json={"date": "2025-11-20", "calories": 2150, "calories_burned": 2000},
        headers=HEADERS,
    )
    listed = client.get(f"{BASE}/entries", headers=HEADERS)

    assert created.status_code == 201
    body = created.json()
    assert body["deficit"] == -150
    assert body["deficit_display"] == "+150"
    assert body["display_date"] == "Thu. Nov. 20th, 2025"
    assert body["drinks_status"] == "untracked"
    assert [entry["id"] for entry in listed.json()] == [body["id"]]


def test_create_entry_validates_date(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        f"{BASE}/entries", json={"date": "20/11/2025"}, headers=HEADERS
    )

    assert response.status_code == 422


def test_update_and_delete_entry(container) -> None:
    client = TestClient(create_app(container))
    entry_id = client.post(
        f"{BASE}/entries", json={"date": "2024-01-01"}, headers=HEADERS
    ).json()["id"]

    updated = client.put(
        f"{BASE}/entries/{entry_id}",
        json={"date": "2024-01-01", "drinks": 0},
        headers=HEADERS,
    )
    deleted = client.delete(f"{BASE}/entries/{entry_id}", headers=HEADERS)
    missing = client.delete(f"{BASE}/entries/{entry_id}", headers=HEADERS)

    assert updated.json()["drinks_status"] == "zero"
    assert deleted.status_code == 204
    assert missing.status_code == 404


def test_dashboard_endpoint(container) -> None:
    client = TestClient(create_app(container))
    for day, protein in (("2024-01-01", 100), ("2024-01-02", 150)):
        client.post(
            f"{BASE}/entries",
            json={"date": day, "protein": protein, "drinks": 2},
            headers=HEADERS,
        )

    response = client.get(f"{BASE}/dashboard", params={"range": "all"}, headers=HEADERS)

    assert response.status_code == 200
    data = response.json()
    assert data["entry_count"] == 2
    protein = next(item for item in data["nutrients"] if item["nutrient"] == "protein")
    assert protein["average"] == 125
    assert protein["trend"]["avg_trend"] == "up"
    assert data["drinks"]["daily_avg"] == 2


def test_dashboard_hides_drinks_when_disabled(container) -> None:
    client = TestClient(create_app(container))
    client.put(f"{BASE}/settings", json={"show_drinks": False}, headers=HEADERS)

    data = client.get(f"{BASE}/dashboard", headers=HEADERS).json()

    assert data["drinks"] is None


def test_dashboard_rejects_bad_range_and_scope(container) -> None:
    client = TestClient(create_app(container))

    bad_range = client.get(f"{BASE}/dashboard", params={"range": "14"}, headers=HEADERS)
    bad_scope = client.get(
        f"{BASE}/dashboard", params={"scope": "cycle:nope"}, headers=HEADERS
    )

    assert bad_range.status_code == 422
    assert bad_scope.status_code == 422


def test_export_csv_endpoint(container) -> None:
    client = TestClient(create_app(container))
    client.post(
        f"{BASE}/entries",
        json={"date": "2024-01-01", "calories": 1800},
        headers=HEADERS,
    )

    response = client.get(f"{BASE}/export.csv", headers=HEADERS)

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert "attachment" in response.headers["content-disposition"]
    assert response.text.startswith("Statistic,calories,caloriesBurned")
    assert "2024-01-01,1800,0,0,0,0,0,0,0,200.0,\n" in response.text


def test_cycles_and_settings_flow(container) -> None:
    client = TestClient(create_app(container))

    cycle = client.post(f"{BASE}/cycles", json={"name": "Cut"}, headers=HEADERS)
    cycle_id = cycle.json()["id"]
    settings = client.get(f"{BASE}/settings", headers=HEADERS).json()
    entry = client.post(
        f"{BASE}/entries", json={"date": "2024-01-01"}, headers=HEADERS
    ).json()
    deleted = client.delete(f"{BASE}/cycles/{cycle_id}", headers=HEADERS)

    assert cycle.status_code == 201
    assert settings["active_cycle_id"] == cycle_id
    assert entry["cycle_id"] == cycle_id
    assert deleted.json() == {"moved_entries": 1}
    assert client.get(f"{BASE}/cycles", headers=HEADERS).json() == []


def test_cycle_errors(container) -> None:
    client = TestClient(create_app(container))

    empty = client.post(f"{BASE}/cycles", json={"name": " "}, headers=HEADERS)
    missing = client.post(f"{BASE}/cycles/{uuid4()}/activate", headers=HEADERS)

    assert empty.status_code == 422
    assert missing.status_code == 404


def test_update_settings(container) -> None:
    client = TestClient(create_app(container))

    response = client.put(
        f"{BASE}/settings",
        json={"theme": "dark", "targets": {"calories": 1800, "drinks": 2}},
        headers=HEADERS,
    )
    bad_theme = client.put(f"{BASE}/settings", json={"theme": "neon"}, headers=HEADERS)

    data = response.json()
    assert data["theme"] == "dark"
    assert data["targets"]["calories"] == 1800
    assert data["targets"]["protein"] == 150
    assert bad_theme.status_code == 422


def test_partial_target_update_keeps_other_targets(container) -> None:
    client = TestClient(create_app(container))

    client.put(
        f"{BASE}/settings", json={"targets": {"protein": 180}}, headers=HEADERS
    )
    response = client.put(
        f"{BASE}/settings", json={"targets": {"calories": 1800}}, headers=HEADERS
    )

    targets = response.json()["targets"]
    assert targets["protein"] == 180
    assert targets["calories"] == 1800
    assert targets["sodium"] == 2300


def test_rejected_settings_update_saves_nothing(container) -> None:
    client = TestClient(create_app(container))

    response = client.put(
        f"{BASE}/settings",
        json={"targets": {"calories": 1500}, "theme": "neon"},
        headers=HEADERS,
    )
    stored = client.get(f"{BASE}/settings", headers=HEADERS).json()

    assert response.status_code == 422
    assert stored["targets"]["calories"] == 2000
    assert stored["theme"] == "light"


def test_negative_target_rejected(container) -> None:
    client = TestClient(create_app(container))

    response = client.put(
        f"{BASE}/settings", json={"targets": {"sugar": -1}}, headers=HEADERS
    )

    assert response.status_code == 422
    assert container.user_settings_service.get_settings(OWNER_ID).targets.sugar == 50
