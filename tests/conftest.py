# tests/conftest.py

"""
Pytest configuration and shared fixtures for testing.
"""

from types import SimpleNamespace
from typing import Generator
from unittest.mock import Mock, patch

import pytest
from fastapi.testclient import TestClient

from core.permissions import UserRole
from core.rate_limiter import reset_rate_limits
from dependencies.auth import CurrentUser, get_current_user
from main import create_app


QUERY_METHODS = ("select", "eq", "in_", "order", "limit", "insert", "update", "delete")


def make_query(data=None):
    """Mock PostgREST builder: every chain call returns itself, execute() returns ``data``."""
    query = Mock()
    for name in QUERY_METHODS:
        getattr(query, name).return_value = query
    query.execute.return_value = Mock(data=[] if data is None else data)
    return query


@pytest.fixture(scope="function")
def app():
    """Create a test FastAPI application instance."""
    application = create_app()
    yield application
    application.dependency_overrides = {}


@pytest.fixture(scope="function")
def client(app) -> Generator[TestClient, None, None]:
    """Create a test client for the FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


# -----------------------------------------------------
# Users per role
# -----------------------------------------------------
@pytest.fixture
def admin_user():
    return CurrentUser(id="admin-id", email="admin@example.com", role=UserRole.admin)


@pytest.fixture
def directeur_user():
    return CurrentUser(id="directeur-id", email="directeur@example.com", role=UserRole.directeur)


@pytest.fixture
def medewerker_user():
    return CurrentUser(
        id="medewerker-id",
        email="medewerker@example.com",
        role=UserRole.medewerker,
        first_name="Sanne",
        last_name="de Vries",
    )


@pytest.fixture
def roleless_user():
    """Authenticated, but metadata carried no valid role."""
    return CurrentUser(id="roleless-id", email="roleless@example.com", role=None)


@pytest.fixture
def login_as(app):
    """Override get_current_user for every guard in the app."""

    def _login(user: CurrentUser):
        app.dependency_overrides[get_current_user] = lambda: user
        return user

    return _login


# -----------------------------------------------------
# Supabase
# -----------------------------------------------------
@pytest.fixture
def mock_supabase_client():
    """Create a mock Supabase client."""
    mock_client = Mock()
    mock_client.table.return_value = make_query([])
    return mock_client


@pytest.fixture
def mock_tables():
    """
    Per-table mock queries. Set ``mock_tables.tables["reports"] = make_query([...])``;
    tables that were not configured return no rows.
    """
    tables = {}
    mock_client = Mock()
    mock_client.table.side_effect = lambda name: tables.setdefault(name, make_query([]))

    with patch("core.supabase_helpers.get_supabase_client", return_value=mock_client), \
            patch("core.permission_helpers.get_supabase_client", return_value=mock_client):
        yield SimpleNamespace(client=mock_client, tables=tables)


@pytest.fixture(autouse=True)
def reset_limits():
    """Reset login throttling before each test."""
    reset_rate_limits()
    yield
    reset_rate_limits()
