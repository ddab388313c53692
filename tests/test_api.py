"""
HTTP surface via FastAPI's TestClient, stores swapped for in-memory ones.
"""
from __future__ import annotations

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from config import settings
from main import app
from services.planner import build_planner, get_planner, get_selector
from services.store import (
    InMemoryPlanStore,
    InMemoryProfileStore,
    get_plan_store,
    get_profile_store,
)

PROFILE = {
    "age": 30,
    "gender": "male",
    "weight": 70,
    "height": 175,
    "activity_level": "moderate",
    "dietary_restrictions": ["vegetarian"],
    "health_goals": ["build muscle"],
    "allergies": [],
}


@pytest.fixture
def client(catalog, selector):
    profiles, plans = InMemoryProfileStore(), InMemoryPlanStore()
    app.dependency_overrides[get_profile_store] = lambda: profiles
    app.dependency_overrides[get_plan_store] = lambda: plans
    app.dependency_overrides[get_planner] = lambda: build_planner(catalog)
    app.dependency_overrides[get_selector] = lambda: selector
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_health_under_api_prefix(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert datetime.fromisoformat(body["timestamp"]).tzinfo is not None


# ── profiles ─────────────────────────────────────────────────────────
def test_profile_roundtrip(client):
    r = client.put("/api/v1/users/u1/profile", json=PROFILE)
    assert r.status_code == 200
    assert r.json()["user_id"] == "u1"

    r = client.get("/api/v1/users/u1/profile")
    assert r.status_code == 200
    body = r.json()
    assert body["dietary_restrictions"] == ["vegetarian"]
    assert body["weight"] == 70


def test_missing_profile_is_404(client):
    assert client.get("/api/v1/users/nobody/profile").status_code == 404


@pytest.mark.parametrize(
    "patch",
    [{"age": 0}, {"weight": -1}, {"gender": "other"}, {"activity_level": "couch"}],
)
def test_invalid_profile_rejected(client, patch):
    r = client.put("/api/v1/users/u1/profile", json={**PROFILE, **patch})
    assert r.status_code == 422


# ── energy / single meal ────────────────────────────────────────────
def test_energy(client):
    body = {k: PROFILE[k] for k in ("age", "gender", "weight", "height", "activity_level")}
    r = client.post("/api/v1/energy", json=body)
    assert r.status_code == 200
    assert r.json() == {"bmr": 1696, "total_calories_needed": 2628}


def test_energy_out_of_range_is_422(client):
    body = {k: PROFILE[k] for k in ("age", "gender", "weight", "height", "activity_level")}
    r = client.post("/api/v1/energy", json={**body, "weight": 1e308})
    assert r.status_code == 422
    assert "weight" in r.json()["detail"]


def test_suggest_meal(client):
    r = client.post("/api/v1/meals/suggest", json={"meal_type": "dinner", "calories": 640})
    assert r.status_code == 200
    assert r.json()["name"] == "Salmon Potatoes"


def test_suggest_meal_fallback(client):
    r = client.post(
        "/api/v1/meals/suggest",
        json={"meal_type": "lunch", "calories": 700, "allergies": ["rice"]},
    )
    assert r.status_code == 200
    meal = r.json()
    assert meal["name"] == "Custom meal"
    assert meal["nutrition"]["calories"] == 700


# ── plans ────────────────────────────────────────────────────────────
def test_plan_without_profile(client):
    r = client.post("/api/v1/plans", json={"user_id": "ghost"})
    assert r.status_code == 404
    assert r.json()["detail"] == "set your preferences first"


def test_generate_and_fetch_plan(client):
    client.put("/api/v1/users/u1/profile", json=PROFILE)

    r = client.post("/api/v1/plans", json={"user_id": "u1", "days": 3, "start_date": "2025-01-30"})
    assert r.status_code == 200
    plans = r.json()["plans"]
    assert [p["date"] for p in plans] == ["2025-01-30", "2025-01-31", "2025-02-01"]
    for p in plans:
        assert [m["meal_type"] for m in p["meals"]] == ["breakfast", "lunch", "dinner", "snack"]
        # vegetarian: no chicken / salmon / egg
        assert all("Chicken" not in m["name"] and "Salmon" not in m["name"] for m in p["meals"])
        assert p["total_nutrition"]["calories"] == sum(m["nutrition"]["calories"] for m in p["meals"])

    r = client.get("/api/v1/plans/u1")
    assert r.status_code == 200
    assert r.json()["plans"] == plans


def test_plan_defaults_to_configured_days(client):
    client.put("/api/v1/users/u1/profile", json=PROFILE)
    r = client.post("/api/v1/plans", json={"user_id": "u1"})
    assert r.status_code == 200
    assert len(r.json()["plans"]) == settings.default_plan_days


@pytest.mark.parametrize("days", [0, -2])
def test_plan_rejects_bad_day_count(client, days):
    r = client.post("/api/v1/plans", json={"user_id": "u1", "days": days})
    assert r.status_code == 422


def test_plan_rejects_too_many_days(client):
    client.put("/api/v1/users/u1/profile", json=PROFILE)
    r = client.post("/api/v1/plans", json={"user_id": "u1", "days": settings.max_plan_days + 1})
    assert r.status_code == 422


def test_fetch_missing_plan(client):
    assert client.get("/api/v1/plans/nobody").status_code == 404
