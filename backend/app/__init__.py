"""
Employee Registry Backend: Application Package
=================================================

What: The `app` package holding the employee registry HTTP service.
Who:  Imported by uvicorn (`app.main:app`), Alembic (`alembic/env.py`) and pytest.

Layering:

    ┌─────────────────────────────────────┐
    │        Routes (FastAPI routers)     │  ← request parsing, status codes
    ├─────────────────────────────────────┤
    │     Services (EmployeeService)      │  ← defaulting, orchestration
    ├─────────────────────────────────────┤
    │   Repositories (EmployeeStore)      │  ← the only code that talks SQL
    ├─────────────────────────────────────┤
    │  Models & Schemas / Database        │  ← SQLAlchemy ORM + Pydantic
    └─────────────────────────────────────┘

    The service never touches the session directly; it is handed a store.
    Routes build that store per request through FastAPI's Depends().
"""

__version__ = "1.0.0"
