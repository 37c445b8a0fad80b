"""Integration tests for the students endpoints."""

from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy import text

from edumanage.core.cache import DASHBOARD_STATS_KEY


class TestListStudents:
    async def test_returns_empty_list(self, client):
        response = await client.get("/api/students")

        assert response.status_code == 200
        assert response.json() == []

    async def test_returns_students_in_camel_case(self, client, student):
        response = await client.get("/api/students")

        assert response.status_code == 200
        [body] = response.json()
        assert body["id"] == student.id
        assert body["studentId"] == "ST-0001"
        assert body["name"] == "Ahmed Youssef"
        assert body["firstName"] == "Ahmed"
        assert body["dateOfBirth"] == "2012-06-15"
        assert body["enrollmentYear"] == 2023
        assert body["status"] == "active"

    async def test_database_failure_returns_500(self, client, engine):
        async with engine.begin() as conn:
            await conn.execute(text("DROP TABLE students"))

        response = await client.get("/api/students")

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "Database error"
        assert "students" in body["message"]


class TestGetStudent:
    async def test_returns_student(self, client, student):
        response = await client.get(f"/api/students/{student.id}")

        assert response.status_code == 200
        assert response.json()["studentId"] == "ST-0001"

    async def test_missing_student_returns_404(self, client):
        response = await client.get("/api/students/999999")

        assert response.status_code == 404
        assert response.json() == {"error": "Student niet gevonden"}

    async def test_id_beyond_integer_range_returns_404(self, client):
        response = await client.get("/api/students/99999999999999999999999")

        assert response.status_code == 404
        assert response.json() == {"error": "Student niet gevonden"}

    async def test_non_numeric_id_returns_400(self, client):
        response = await client.get("/api/students/abc")

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid ID format"}

    async def test_database_failure_returns_500(self, client, engine):
        async with engine.begin() as conn:
            await conn.execute(text("DROP TABLE students"))

        response = await client.get("/api/students/1")

        assert response.status_code == 500
        assert response.json()["error"] == "Database error"


class TestWriteStudents:
    @pytest.fixture
    def payload(self, program):
        return {
            "studentId": "ST-0100",
            "firstName": "Fatima",
            "lastName": "El Amrani",
            "programId": program.id,
            "enrollmentYear": 2024,
            "dateOfBirth": "05/03/2013",
        }

    async def test_create_accepts_display_date(self, client, payload):
        response = await client.post("/api/students", json=payload)

        assert response.status_code == 201
        body = response.json()
        assert body["dateOfBirth"] == "2013-03-05"
        assert body["currentYear"] == 1
        assert body["name"] == "Fatima El Amrani"

    async def test_create_accepts_iso_date(self, client, payload):
        payload["dateOfBirth"] = "2013-03-05"

        response = await client.post("/api/students", json=payload)

        assert response.status_code == 201
        assert response.json()["dateOfBirth"] == "2013-03-05"

    async def test_create_rejects_out_of_range_date(self, client, payload):
        payload["dateOfBirth"] = "32/01/2013"

        response = await client.post("/api/students", json=payload)

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Validation error"
        assert "dateOfBirth" in body["message"]

    async def test_create_rejects_unknown_status(self, client, payload):
        payload["status"] = "sleeping"

        response = await client.post("/api/students", json=payload)

        assert response.status_code == 400

    async def test_duplicate_student_number_returns_409(self, client, payload, student):
        payload["studentId"] = student.student_id

        response = await client.post("/api/students", json=payload)

        assert response.status_code == 409
        assert response.json()["error"] == "Conflict"

    async def test_update_changes_only_sent_fields(self, client, student):
        response = await client.put(f"/api/students/{student.id}", json={"currentYear": 3})

        assert response.status_code == 200
        body = response.json()
        assert body["currentYear"] == 3
        assert body["firstName"] == "Ahmed"

    @pytest.mark.parametrize("field", ["firstName", "studentId", "enrollmentYear", "status"])
    async def test_update_rejects_null_for_required_field(self, client, student, field):
        response = await client.put(f"/api/students/{student.id}", json={field: None})

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Validation error"
        assert field in body["message"]

    async def test_update_allows_null_for_optional_field(self, client, student):
        response = await client.put(f"/api/students/{student.id}", json={"email": None})

        assert response.status_code == 200
        assert response.json()["email"] is None

    async def test_update_missing_student_returns_404(self, client):
        response = await client.put("/api/students/4242", json={"currentYear": 3})

        assert response.status_code == 404
        assert response.json() == {"error": "Student niet gevonden"}

    async def test_delete_then_get_returns_404(self, client, student):
        response = await client.delete(f"/api/students/{student.id}")
        assert response.status_code == 204
        assert response.content == b""

        response = await client.get(f"/api/students/{student.id}")
        assert response.status_code == 404

    async def test_writes_invalidate_dashboard_cache(self, client, payload):
        with patch("edumanage.services.base_service.cache") as mock_cache:
            mock_cache.delete = AsyncMock(return_value=True)

            response = await client.post("/api/students", json=payload)

        assert response.status_code == 201
        mock_cache.delete.assert_awaited_once_with(DASHBOARD_STATS_KEY)
