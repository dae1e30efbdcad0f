# =============================================================================
# INTEGRATION TESTS - Endpoints
# =============================================================================
# Integration tests with FastAPI TestClient (no external server)
# =============================================================================

import pytest


@pytest.fixture
def client():
    """FastAPI test client (no running server needed)."""
    from fastapi.testclient import TestClient
    from server import app

    with TestClient(app) as c:
        yield c


@pytest.fixture
def geo_id(client):
    """Create the two-question reference module through the API."""
    module = client.post("/modules", json={"name": "Geo"}).json()
    client.post(
        f"/modules/{module['id']}/questions",
        json={"questionText": "Capital of France?", "answer": "Paris"},
    )
    client.post(
        f"/modules/{module['id']}/questions",
        json={"questionText": "Capital of Italy?", "answer": "Rome"},
    )
    return module["id"]


class TestRouter:
    """Tests for how the router is declared."""

    def test_endpoints_run_on_event_loop(self):
        """Shared session and store are only touched from the event loop."""
        import inspect

        from fastapi.routing import APIRoute

        from appquiz.router import router

        routes = [r for r in router.routes if isinstance(r, APIRoute)]

        assert routes
        for route in routes:
            assert inspect.iscoroutinefunction(route.endpoint), route.path
            for dep in route.dependant.dependencies:
                assert inspect.iscoroutinefunction(dep.call), dep.call.__name__

    def test_corrupt_module_file_lists_nothing(self, client):
        from appquiz.config import get_config

        get_config().data_path.write_bytes(b'[{"id": "\xff"}]')

        response = client.get("/modules")

        assert response.status_code == 200
        assert response.json() == []


class TestHealthEndpoints:
    """Tests for the health check."""

    def test_health_returns_healthy(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["phase"] == "selecting"


class TestModuleEndpoints:
    """Tests for module and question management."""

    def test_modules_seeded_from_template(self, client):
        response = client.get("/modules")

        assert response.status_code == 200
        assert len(response.json()) >= 1

    def test_create_and_get_module(self, client):
        created = client.post("/modules", json={"name": "History"})

        assert created.status_code == 201
        module_id = created.json()["id"]
        fetched = client.get(f"/modules/{module_id}").json()
        assert fetched["name"] == "History"
        assert fetched["questions"] == []

    def test_create_module_empty_name(self, client):
        response = client.post("/modules", json={"name": ""})

        assert response.status_code == 422

    def test_get_unknown_module(self, client):
        response = client.get("/modules/unknown")

        assert response.status_code == 404

    def test_rename_module(self, client, geo_id):
        response = client.patch(f"/modules/{geo_id}", json={"name": "Geography"})

        assert response.status_code == 200
        assert response.json()["name"] == "Geography"
        assert len(response.json()["questions"]) == 2

    def test_delete_module(self, client, geo_id):
        assert client.delete(f"/modules/{geo_id}").status_code == 204
        assert client.get(f"/modules/{geo_id}").status_code == 404

    def test_question_crud(self, client, geo_id):
        module = client.get(f"/modules/{geo_id}").json()
        first_id = module["questions"][0]["id"]
        assert module["questions"][0]["questionText"] == "Capital of France?"

        updated = client.put(
            f"/modules/{geo_id}/questions/{first_id}",
            json={"questionText": "Capital of Spain?", "answer": "Madrid"},
        )
        assert updated.status_code == 200
        assert updated.json()["answer"] == "Madrid"

        assert client.delete(f"/modules/{geo_id}/questions/{first_id}").status_code == 204
        remaining = client.get(f"/modules/{geo_id}").json()["questions"]
        assert [q["answer"] for q in remaining] == ["Rome"]

    def test_update_unknown_question(self, client, geo_id):
        response = client.put(
            f"/modules/{geo_id}/questions/missing",
            json={"questionText": "Q?", "answer": "A"},
        )

        assert response.status_code == 404


class TestQuizEndpoints:
    """Tests for the quiz session flow."""

    def test_full_quiz_flow(self, client, geo_id):
        started = client.post("/quiz/start", json={"module_id": geo_id})
        assert started.status_code == 200
        assert started.json()["phase"] == "active"
        assert started.json()["total"] == 2

        current = client.get("/quiz/current").json()
        assert current["question_text"] == "Capital of France?"
        assert sorted(current["choices"]) == ["Paris", "Rome"]

        first = client.post("/quiz/answer", json={"answer": "Rome"}).json()
        assert first["record"]["is_correct"] is False
        assert first["status"]["num_wrong"] == 1
        assert first["status"]["current_question_index"] == 1
        assert first["status"]["phase"] == "active"
        assert first["reveal_delay_ms"] == 0

        second = client.post("/quiz/answer", json={"answer": "Rome"}).json()
        assert second["record"]["is_correct"] is True
        assert second["status"]["phase"] == "completed"

        result = client.get("/quiz/result").json()
        assert result["num_correct"] == 1
        assert result["num_wrong"] == 1
        assert result["total"] == 2
        assert result["percentage"] == 50.0
        assert len(result["transcript"]) == 2

    def test_start_unknown_module(self, client):
        response = client.post("/quiz/start", json={"module_id": "unknown"})

        assert response.status_code == 404

    def test_start_empty_module(self, client):
        module_id = client.post("/modules", json={"name": "Empty"}).json()["id"]

        response = client.post("/quiz/start", json={"module_id": module_id})

        assert response.status_code == 400

    def test_start_twice_conflicts(self, client, geo_id):
        client.post("/quiz/start", json={"module_id": geo_id})

        response = client.post("/quiz/start", json={"module_id": geo_id})

        assert response.status_code == 409

    def test_answer_before_start_conflicts(self, client):
        response = client.post("/quiz/answer", json={"answer": "Paris"})

        assert response.status_code == 409
        assert client.get("/quiz/status").json()["phase"] == "selecting"

    def test_result_before_completion_conflicts(self, client, geo_id):
        client.post("/quiz/start", json={"module_id": geo_id})

        response = client.get("/quiz/result")

        assert response.status_code == 409

    def test_current_after_completion_conflicts(self, client, geo_id):
        client.post("/quiz/start", json={"module_id": geo_id})
        client.post("/quiz/answer", json={"answer": "Paris"})
        client.post("/quiz/answer", json={"answer": "Rome"})

        assert client.get("/quiz/current").status_code == 409

    def test_reset_returns_to_selecting(self, client, geo_id):
        client.post("/quiz/start", json={"module_id": geo_id})
        client.post("/quiz/answer", json={"answer": "Paris"})

        response = client.post("/quiz/reset", json={})

        assert response.status_code == 200
        data = response.json()
        assert data["phase"] == "selecting"
        assert data["num_correct"] == 0
        assert data["module_id"] is None

    def test_reset_with_module_restarts(self, client, geo_id):
        client.post("/quiz/start", json={"module_id": geo_id})
        client.post("/quiz/answer", json={"answer": "Paris"})

        data = client.post("/quiz/reset", json={"module_id": geo_id}).json()

        assert data["phase"] == "active"
        assert data["module_id"] == geo_id
        assert data["num_correct"] == 0
        assert data["current_question_index"] == 0
