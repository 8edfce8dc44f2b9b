"""Tests for the HTTP endpoints."""

import importlib

from fastapi import FastAPI
from fastapi.testclient import TestClient

from sugar_tracker.api.app import create_app
from sugar_tracker.containers import AppContainer


def _login(client: TestClient) -> None:
    response = client.post(
        "/session/login", json={"email": "sam@example.com", "password": "pw"}
    )
    assert response.status_code == 200


def test_health(container: AppContainer) -> None:
    with TestClient(create_app(container)) as client:
        response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_session_lifecycle(container: AppContainer) -> None:
    with TestClient(create_app(container)) as client:
        assert client.get("/session").json()["authenticated"] is False

        login = client.post(
            "/session/login", json={"email": "sam@example.com", "password": "pw"}
        )
        current = client.get("/session").json()
        logout = client.post("/session/logout")
        after = client.get("/session").json()

    assert login.json()["user"] == {
        "id": "1",
        "username": "sam",
        "email": "sam@example.com",
    }
    assert current["authenticated"] is True
    assert current["loading"] is False
    assert logout.json()["persisted"] is True
    assert after["user"] is None


def test_register_creates_session(container: AppContainer) -> None:
    with TestClient(create_app(container)) as client:
        response = client.post(
            "/session/register",
            json={"username": "Sam", "email": "sam@example.com", "password": "pw"},
        )

    assert response.status_code == 201
    assert response.json()["user"]["username"] == "Sam"
    assert container.session_service.is_authenticated is True


def test_login_requires_fields(container: AppContainer) -> None:
    with TestClient(create_app(container)) as client:
        response = client.post("/session/login", json={"email": "sam@example.com"})

    assert response.status_code == 422
    assert response.json() == {
        "detail": "Please fill in all fields",
        "field": "password",
    }


def test_mutations_require_session(container: AppContainer) -> None:
    with TestClient(create_app(container)) as client:
        entry = client.post("/entries", json={"foods": [{"food_id": "1"}]})
        limit = client.put("/limit", json={"limit": 30})
        food = client.post(
            "/foods", json={"name": "Jam", "sugar_content": 12, "is_healthy": False}
        )

    assert entry.status_code == 401
    assert limit.status_code == 401
    assert food.status_code == 401
    assert container.ledger_service.list() == []
    assert container.limit_service.get_limit() == 25


def test_search_foods(container: AppContainer) -> None:
    with TestClient(create_app(container)) as client:
        response = client.get("/foods", params={"query": "choc"})
        healthy = client.get("/foods", params={"healthy_only": "true"})

    assert response.status_code == 200
    names = [food["name"] for food in response.json()["foods"]]
    assert names == ["Chocolate Bar", "Chocolate bars"]
    assert len(healthy.json()["foods"]) == 6


def test_add_food(container: AppContainer) -> None:
    with TestClient(create_app(container)) as client:
        _login(client)
        response = client.post(
            "/foods", json={"name": "Jam", "sugar_content": 12, "is_healthy": False}
        )
        listed = client.get("/foods", params={"query": "jam"})

    assert response.status_code == 201
    assert response.json()["persisted"] is True
    assert [food["name"] for food in listed.json()["foods"]] == ["Jam"]


def test_submit_entry_and_history(container: AppContainer) -> None:
    with TestClient(create_app(container)) as client:
        _login(client)
        created = client.post(
            "/entries", json={"foods": [{"food_id": "1"}, {"food_id": "2"}]}
        )
        entry_id = created.json()["entry"]["id"]
        history = client.get("/entries")
        detail = client.get(f"/entries/{entry_id}")

    assert created.status_code == 201
    entry = created.json()["entry"]
    assert entry["total_sugar"] == 24
    assert entry["summary"] == {
        "total": 24,
        "limit": 25,
        "percentage": 96,
        "status": "good",
    }
    assert [item["id"] for item in history.json()["entries"]] == [entry_id]
    assert detail.json()["foods"][1]["name"] == "Banana"


def test_submit_empty_entry_is_rejected(container: AppContainer) -> None:
    with TestClient(create_app(container)) as client:
        _login(client)
        response = client.post("/entries", json={"foods": []})

    assert response.status_code == 422
    assert response.json()["field"] == "foods"


def test_unknown_ids_return_404(container: AppContainer) -> None:
    with TestClient(create_app(container)) as client:
        _login(client)
        entry = client.post("/entries", json={"foods": [{"food_id": "999"}]})
        missing_entry = client.get("/entries/missing")
        missing_plan = client.get("/plans/missing")

    assert entry.status_code == 404
    assert missing_entry.status_code == 404
    assert missing_plan.status_code == 404


def test_invalid_limit_keeps_previous_value(container: AppContainer) -> None:
    with TestClient(create_app(container)) as client:
        _login(client)
        rejected = client.put("/limit", json={"limit": -5})
        current = client.get("/limit")

    assert rejected.status_code == 422
    assert rejected.json()["detail"] == "Please enter a valid number greater than 0"
    assert current.json()["limit"] == 25


def test_set_limit(container: AppContainer) -> None:
    with TestClient(create_app(container)) as client:
        _login(client)
        response = client.put("/limit", json={"limit": 40})
        current = client.get("/limit")

    assert response.json() == {"limit": 40, "persisted": True}
    assert current.json()["limit"] == 40


def test_evaluate_warns_for_unhealthy_candidate(container: AppContainer) -> None:
    with TestClient(create_app(container)) as client:
        response = client.post(
            "/limit/evaluate",
            json={
                "foods": [{"food_id": "1"}, {"food_id": "2"}],
                "candidate": {"food_id": "5"},
            },
        )

    body = response.json()
    assert response.status_code == 200
    assert body["summary"]["status"] == "good"
    assert body["candidate"]["projected_total"] == 59
    assert body["candidate"]["would_exceed"] is True
    assert body["candidate"]["warn"] is True


def test_save_plan_with_inline_food(container: AppContainer) -> None:
    with TestClient(create_app(container)) as client:
        _login(client)
        created = client.post(
            "/plans",
            json={
                "name": " Lunch ",
                "foods": [
                    {"food_id": "8"},
                    {"name": "Homemade jam", "sugar_content": "12"},
                ],
            },
        )
        plans = client.get("/plans")

    assert created.status_code == 201
    plan = created.json()["plan"]
    assert plan["name"] == "Lunch"
    assert plan["total_sugar"] == 15
    assert plan["foods"][1]["is_healthy"] is False
    assert [item["id"] for item in plans.json()["plans"]] == [plan["id"]]
    assert len(container.catalog_service.list()) == 14


def test_blank_plan_name_is_rejected(container: AppContainer) -> None:
    with TestClient(create_app(container)) as client:
        _login(client)
        response = client.post(
            "/plans", json={"name": "  ", "foods": [{"food_id": "1"}]}
        )

    assert response.status_code == 422
    assert response.json()["field"] == "name"
    assert container.plan_service.list() == []


def test_invalid_inline_sugar_is_rejected(container: AppContainer) -> None:
    with TestClient(create_app(container)) as client:
        _login(client)
        response = client.post(
            "/plans",
            json={"name": "Snack", "foods": [{"name": "Jam", "sugar_content": "abc"}]},
        )

    assert response.status_code == 422
    assert response.json()["detail"] == "Sugar content must be a number"


def test_asgi_module_exposes_app() -> None:
    module = importlib.import_module("sugar_tracker.api.asgi")

    assert isinstance(module.app, FastAPI)
    assert module.app.state.container.catalog_service.loading is True
