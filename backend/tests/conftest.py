"""
Employee Registry Backend: Test Configuration (conftest.py)
==============================================================

Shared pytest fixtures.

Environment variables are set before anything from `app` is imported, so
the settings singleton and the engine are built against a throwaway SQLite
database instead of PostgreSQL.

Fixtures:
    mock_db_session:  AsyncMock standing in for AsyncSession (unit tests)
    mock_store:       AsyncMock EmployeeStore whose insert assigns ids
    employee_factory: builds Employee rows that look already persisted
    db_tables:        creates/drops the real tables in the SQLite test DB
    test_client:      httpx AsyncClient talking to the app over ASGI
"""

import os
import tempfile
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

_test_dir = tempfile.mkdtemp(prefix="registry_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_test_dir}/registry_test.db"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["EMPLOYEE_FIELD_DEFAULT"] = "Unspecified"
# Each test module sends many requests from the same ASGI client address
os.environ["RATE_LIMIT_REQUESTS"] = "10000"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from app.database import Base, engine  # noqa: E402
from app.models.employee import Employee  # noqa: E402
from app.repositories.base import EmployeeStore  # noqa: E402


@pytest.fixture
def mock_db_session():
    """
    AsyncSession stand-in.

    Usage:
        mock_db_session.execute.return_value.scalars.return_value.all.return_value = [...]
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


def _make_employee(employee_id: int = 1, **overrides) -> Employee:
    now = datetime.now(timezone.utc)
    values = {
        "employee_name": "Alice",
        "employee_salary": 5000,
        "employee_rate": 3,
        "employee_field": "Engineering",
        "created_at": now,
        "updated_at": now,
    }
    values.update(overrides)
    employee = Employee(**values)
    employee.id = employee_id
    return employee


@pytest.fixture
def employee_factory():
    """Builds persisted-looking Employee instances with every column populated."""
    return _make_employee


@pytest.fixture
def mock_store():
    """
    EmployeeStore stand-in.

    insert() behaves like a flush: it assigns sequential ids and timestamps
    and returns the same instance.
    """
    store = AsyncMock(spec=EmployeeStore)
    counter = {"next_id": 1}

    async def _insert(employee: Employee) -> Employee:
        employee.id = counter["next_id"]
        counter["next_id"] += 1
        now = datetime.now(timezone.utc)
        employee.created_at = now
        employee.updated_at = now
        return employee

    store.insert.side_effect = _insert
    store.list_all.return_value = []
    store.get.return_value = None
    return store


@pytest_asyncio.fixture
async def db_tables():
    """Fresh employees table for each test."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    # Pooled aiosqlite connections are bound to this test's event loop
    await engine.dispose()


@pytest_asyncio.fixture
async def test_client(db_tables):
    """
    HTTP client for endpoint tests.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/api/employees")
            assert response.status_code == 200
    """
    from app.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
