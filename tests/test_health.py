# tests/test_health.py

from unittest.mock import Mock, patch

from core.permissions import permission_fingerprint
from tests.conftest import make_query


def test_health_app(client):
    response = client.get("/health/app")

    assert response.status_code == 200
    assert response.json()["permissions_version"] == permission_fingerprint()


def test_health_db_not_configured(client):
    with patch("core.supabase_client.get_supabase_client", return_value=None):
        response = client.get("/health/db")

    assert response.json()["status"] == "not_configured"


def test_health_db_degraded(client):
    mock_client = Mock()
    failing = make_query([])
    failing.execute.side_effect = Exception("relation does not exist")
    mock_client.table.side_effect = lambda name: failing if name == "reports" else make_query([{"id": 1}])

    with patch("core.supabase_client.get_supabase_client", return_value=mock_client):
        data = client.get("/health/db").json()

    assert data["status"] == "degraded"
    assert data["details"]["tables"]["reports"]["status"] == "error"
    assert data["details"]["tables"]["schools"] == {"status": "ok", "rows_found": 1}
