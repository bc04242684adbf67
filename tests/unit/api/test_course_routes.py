"""Unit tests for course routes."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from registrar.api import create_app
from registrar.config import RegistrarConfig
from registrar.engine import RegistrationEngine


@pytest.fixture
def app(engine: RegistrationEngine) -> FastAPI:
    """Create an app serving the given engine."""
    return create_app(config=RegistrarConfig(seed=False), engine=engine)


@pytest.fixture
def client(app: FastAPI):
    """Create a test client."""
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


def _add(client: TestClient, code: str, credits: int = 3, capacity: int = 10) -> dict:
    response = client.post(
        "/api/v1/courses",
        json={"code": code, "name": f"Course {code}", "credits": credits, "capacity": capacity},
    )
    assert response.status_code == 201
    return response.json()["data"]


@pytest.mark.unit
class TestListCourses:
    """Tests for GET /courses."""

    def test_list_courses_empty(self, client: TestClient) -> None:
        response = client.get("/api/v1/courses")

        assert response.status_code == 200
        assert response.json() == {"data": [], "error": None}

    def test_list_default_code_order(self, client: TestClient) -> None:
        for code in ["MTH204", "COM202", "CSC215"]:
            _add(client, code)

        response = client.get("/api/v1/courses")

        assert [c["code"] for c in response.json()["data"]] == ["COM202", "CSC215", "MTH204"]

    def test_list_by_credits(self, client: TestClient) -> None:
        _add(client, "AAA100", credits=4)
        _add(client, "BBB200", credits=2)
        _add(client, "CCC300", credits=4)

        response = client.get("/api/v1/courses", params={"sort": "credits"})

        assert [c["code"] for c in response.json()["data"]] == ["BBB200", "AAA100", "CCC300"]

    def test_list_by_seats(self, client: TestClient) -> None:
        _add(client, "AAA100", capacity=5)
        _add(client, "BBB200", capacity=50)

        response = client.get("/api/v1/courses", params={"sort": "seats"})

        assert [c["code"] for c in response.json()["data"]] == ["BBB200", "AAA100"]

    def test_unknown_sort_mode(self, client: TestClient) -> None:
        response = client.get("/api/v1/courses", params={"sort": "popularity"})

        assert response.status_code == 422


@pytest.mark.unit
class TestCreateCourse:
    """Tests for POST /courses."""

    def test_create_course(self, client: TestClient) -> None:
        data = _add(client, "csc215", credits=3, capacity=40)

        assert data == {
            "code": "CSC215",
            "name": "Course csc215",
            "credits": 3,
            "capacity": 40,
            "enrolled": 0,
            "available_seats": 40,
            "is_full": False,
        }

    def test_create_duplicate(self, client: TestClient) -> None:
        _add(client, "CSC215")

        response = client.post(
            "/api/v1/courses",
            json={"code": "csc215", "name": "Again", "credits": 3, "capacity": 10},
        )

        assert response.status_code == 409
        assert response.json()["error"] == "Course with this code already exists"

    def test_create_rejects_non_positive_credits(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/courses",
            json={"code": "CSC215", "name": "Data Structures", "credits": 0, "capacity": 10},
        )

        assert response.status_code == 422

    def test_create_rejects_blank_code(self, client: TestClient) -> None:
        """Whitespace passes field validation but is refused by the engine."""
        response = client.post(
            "/api/v1/courses",
            json={"code": "   ", "name": "Data Structures", "credits": 3, "capacity": 10},
        )

        assert response.status_code == 422
        assert "code" in response.json()["error"]


@pytest.mark.unit
class TestGetCourse:
    """Tests for GET /courses/{code}."""

    def test_get_course_case_insensitive(self, client: TestClient) -> None:
        _add(client, "MTH204")

        response = client.get("/api/v1/courses/mth204")

        assert response.status_code == 200
        assert response.json()["data"]["code"] == "MTH204"

    def test_get_course_not_found(self, client: TestClient) -> None:
        response = client.get("/api/v1/courses/NOPE")

        assert response.status_code == 404
        assert response.json() == {"data": None, "error": "Course not found"}
