"""
Employee Registry Backend: Employee Endpoint Tests
=====================================================

What:  POST/GET /api/employees end to end through FastAPI, the middleware
       chain, the real repository and a temporary SQLite database.
"""

from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from app.repositories.employee_repository import EmployeeRepository, get_employee_store


class TestCreateEndpoint:

    @pytest.mark.asyncio
    async def test_create_from_json(self, test_client):
        response = await test_client.post(
            "/api/employees", json={"emp_name": "Alice", "emp_salary": 5000}
        )

        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "success"
        data = body["data"]
        assert isinstance(data["id"], int)
        assert data["employee_name"] == "Alice"
        assert Decimal(str(data["employee_salary"])) == Decimal("5000")
        assert data["employee_rate"] == 0
        assert data["employee_field"] == "Unspecified"

    @pytest.mark.asyncio
    async def test_create_without_input_uses_defaults(self, test_client):
        response = await test_client.post("/api/employees")

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["employee_name"] == "Unknown"
        assert Decimal(str(data["employee_salary"])) == Decimal("0.00")
        assert data["employee_rate"] == 0
        assert data["employee_field"] == "Unspecified"

    @pytest.mark.asyncio
    async def test_create_from_query_string(self, test_client):
        response = await test_client.post(
            "/api/employees", params={"emp_name": "Bob", "emp_rate": "5"}
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["employee_name"] == "Bob"
        assert data["employee_rate"] == 5

    @pytest.mark.asyncio
    async def test_create_from_form(self, test_client):
        response = await test_client.post(
            "/api/employees",
            data={"emp_name": "Carol", "emp_salary": "1200.50", "emp_field": ""},
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["employee_name"] == "Carol"
        assert Decimal(str(data["employee_salary"])) == Decimal("1200.50")
        assert data["employee_field"] == "Unspecified"

    @pytest.mark.asyncio
    async def test_body_overrides_query(self, test_client):
        response = await test_client.post(
            "/api/employees",
            params={"emp_name": "Query"},
            json={"emp_name": "Body"},
        )

        assert response.json()["data"]["employee_name"] == "Body"

    @pytest.mark.asyncio
    async def test_create_then_list_grows_by_one(self, test_client):
        before = (await test_client.get("/api/employees")).json()

        created = await test_client.post(
            "/api/employees",
            json={"emp_name": "Dana", "emp_salary": "3100.75", "emp_rate": 2},
        )
        after = (await test_client.get("/api/employees")).json()

        assert len(after) == len(before) + 1
        stored = after[-1]
        assert stored["id"] == created.json()["data"]["id"]
        assert stored["employee_name"] == "Dana"
        assert Decimal(str(stored["employee_salary"])) == Decimal("3100.75")
        assert stored["employee_rate"] == 2
        assert stored["employee_field"] == "Unspecified"


class TestCreateValidation:

    @pytest.mark.asyncio
    async def test_non_numeric_salary_is_400_and_not_stored(self, test_client):
        response = await test_client.post("/api/employees", json={"emp_salary": "a lot"})

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "validation_error"
        assert body["details"]["field"] == "emp_salary"

        listing = await test_client.get("/api/employees")
        assert listing.json() == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("rate", [2**31, 2**64])
    async def test_oversized_rate_is_400_and_not_stored(self, test_client, rate):
        response = await test_client.post("/api/employees", json={"emp_rate": rate})

        assert response.status_code == 400
        assert response.json()["details"]["field"] == "emp_rate"

        listing = await test_client.get("/api/employees")
        assert listing.json() == []

    @pytest.mark.asyncio
    async def test_malformed_json_is_400(self, test_client):
        response = await test_client.post(
            "/api/employees",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    @pytest.mark.asyncio
    async def test_json_array_is_400(self, test_client):
        response = await test_client.post("/api/employees", json=[{"emp_name": "Alice"}])

        assert response.status_code == 400


class TestListAndDetailEndpoints:

    @pytest.mark.asyncio
    async def test_list_empty(self, test_client):
        response = await test_client.get("/api/employees")

        assert response.status_code == 200
        assert response.json() == []
        assert response.headers["X-Total-Count"] == "0"

    @pytest.mark.asyncio
    async def test_list_is_ordered_by_id(self, test_client):
        for name in ("Ann", "Ben", "Cat"):
            await test_client.post("/api/employees", json={"emp_name": name})

        response = await test_client.get("/api/employees")

        body = response.json()
        assert [e["employee_name"] for e in body] == ["Ann", "Ben", "Cat"]
        assert [e["id"] for e in body] == sorted(e["id"] for e in body)
        assert response.headers["X-Total-Count"] == "3"

    @pytest.mark.asyncio
    async def test_get_by_id(self, test_client):
        created = await test_client.post("/api/employees", json={"emp_name": "Eve"})
        employee_id = created.json()["data"]["id"]

        response = await test_client.get(f"/api/employees/{employee_id}")

        assert response.status_code == 200
        assert response.json()["employee_name"] == "Eve"

    @pytest.mark.asyncio
    async def test_get_unknown_id_is_404(self, test_client):
        response = await test_client.get("/api/employees/9999")

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"


class TestPersistenceFailures:
    """A failing store turns into a generic 500."""

    @staticmethod
    def _failing_store():
        session = AsyncMock()
        session.add = MagicMock()
        error = OperationalError("INSERT", {}, Exception("connection refused"))
        session.flush = AsyncMock(side_effect=error)
        session.execute = AsyncMock(side_effect=error)
        return EmployeeRepository(session)

    @pytest.mark.asyncio
    async def test_create_store_failure_is_500(self, test_client):
        from app.main import app
        app.dependency_overrides[get_employee_store] = self._failing_store

        response = await test_client.post("/api/employees", json={"emp_name": "Alice"})

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "server_error"
        assert "connection refused" not in body["message"]

    @pytest.mark.asyncio
    async def test_list_store_failure_is_500(self, test_client):
        from app.main import app
        app.dependency_overrides[get_employee_store] = self._failing_store

        response = await test_client.get("/api/employees")

        assert response.status_code == 500
        assert response.json()["error"] == "server_error"


class TestAmbientBehaviour:

    @pytest.mark.asyncio
    async def test_request_id_is_echoed(self, test_client):
        response = await test_client.get(
            "/api/employees", headers={"X-Request-ID": "trace-123"}
        )

        assert response.headers["X-Request-ID"] == "trace-123"

    @pytest.mark.asyncio
    async def test_request_id_is_generated(self, test_client):
        response = await test_client.get("/api/employees")

        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_error_body_carries_request_id(self, test_client):
        response = await test_client.get(
            "/api/employees/9999", headers={"X-Request-ID": "trace-404"}
        )

        assert response.json()["request_id"] == "trace-404"

    @pytest.mark.asyncio
    async def test_health(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
