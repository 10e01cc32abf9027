# tests/test_auth.py

"""
Tests for authentication, the session → role step and the /auth endpoints.
"""

from unittest.mock import Mock, patch

from core.config import settings
from core.permissions import permission_fingerprint
from tests.conftest import make_query


def auth_response(role="directeur", **metadata):
    user = Mock()
    user.id = "user-1"
    user.email = "user@example.com"
    user.user_metadata = {"role": role, **metadata} if role is not None else {**metadata}
    return Mock(user=user)


# ============================================================
# LOGIN
# ============================================================
def test_login_success(client):
    mock_client = Mock()
    mock_client.auth.sign_in_with_password.return_value = Mock(session=Mock(access_token="jwt-token"))

    with patch("routers.auth.get_supabase_client", return_value=mock_client):
        response = client.post("/api/auth/login", json={"email": " User@Example.com ", "password": "secret"})

    assert response.status_code == 200
    assert response.json() == {"access_token": "jwt-token", "token_type": "bearer"}
    mock_client.auth.sign_in_with_password.assert_called_once_with(
        {"email": "user@example.com", "password": "secret"}
    )


def test_login_invalid_credentials(client):
    mock_client = Mock()
    mock_client.auth.sign_in_with_password.side_effect = Exception("Invalid login credentials")

    with patch("routers.auth.get_supabase_client", return_value=mock_client):
        response = client.post("/api/auth/login", json={"email": "user@example.com", "password": "wrong"})

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid email or password"


def test_login_rate_limited(client):
    mock_client = Mock()
    mock_client.auth.sign_in_with_password.side_effect = Exception("Invalid login credentials")
    body = {"email": "user@example.com", "password": "wrong"}

    with patch("routers.auth.get_supabase_client", return_value=mock_client):
        for _ in range(settings.LOGIN_RATE_LIMIT):
            assert client.post("/api/auth/login", json=body).status_code == 401

        response = client.post("/api/auth/login", json=body)

    assert response.status_code == 429
    assert response.headers["Retry-After"] == str(settings.LOGIN_RATE_WINDOW_SECONDS)


def test_login_limit_holds_when_client_ip_changes(client):
    mock_client = Mock()
    mock_client.auth.sign_in_with_password.side_effect = Exception("Invalid login credentials")
    body = {"email": "victim@example.com", "password": "guess"}

    statuses = []
    with patch("routers.auth.get_supabase_client", return_value=mock_client), \
            patch("core.rate_limiter.settings", Mock(TRUST_PROXY_HEADERS=True)):
        for i in range(settings.LOGIN_RATE_LIMIT + 5):
            headers = {"X-Forwarded-For": f"198.51.100.{i}"}
            statuses.append(client.post("/api/auth/login", json=body, headers=headers).status_code)

    assert statuses[:settings.LOGIN_RATE_LIMIT] == [401] * settings.LOGIN_RATE_LIMIT
    assert statuses[settings.LOGIN_RATE_LIMIT:] == [429] * 5
    assert mock_client.auth.sign_in_with_password.call_count == settings.LOGIN_RATE_LIMIT


def test_logout_always_succeeds(client):
    assert client.post("/api/auth/logout").json() == {"success": True}


# ============================================================
# TOKEN → CurrentUser
# ============================================================
def test_missing_token_is_rejected(client):
    response = client.get("/api/auth/user")
    assert response.status_code in (401, 403)


def test_invalid_token_is_rejected(client):
    mock_client = Mock()
    mock_client.auth.get_user.side_effect = Exception("JWT expired")

    with patch("dependencies.auth.get_supabase_client", return_value=mock_client):
        response = client.get("/api/auth/user", headers={"Authorization": "Bearer expired"})

    assert response.status_code == 401


def test_user_role_comes_from_metadata(client):
    mock_client = Mock()
    mock_client.auth.get_user.return_value = auth_response("directeur", first_name="Jan", last_name="Bakker")

    with patch("dependencies.auth.get_supabase_client", return_value=mock_client):
        response = client.get("/api/auth/user", headers={"Authorization": "Bearer valid"})

    assert response.status_code == 200
    data = response.json()
    assert data["role"] == "directeur"
    assert data["first_name"] == "Jan"
    assert "beheer" not in data["pages"]
    assert "financieel" in data["pages"]
    assert data["dashboard_tabs"] == ["overzicht", "meldingen", "onderhoud", "financieel"]
    assert data["permissions_version"] == permission_fingerprint()


def test_unknown_role_gets_no_pages(client):
    mock_client = Mock()
    mock_client.auth.get_user.return_value = auth_response("superuser")

    with patch("dependencies.auth.get_supabase_client", return_value=mock_client):
        response = client.get("/api/auth/user", headers={"Authorization": "Bearer valid"})

    assert response.status_code == 200
    data = response.json()
    assert data["role"] is None
    assert data["pages"] == []
    assert data["dashboard_tabs"] == []
    assert data["navigation"] == []


def test_missing_role_is_not_defaulted(client):
    mock_client = Mock()
    mock_client.auth.get_user.return_value = auth_response(None)

    with patch("dependencies.auth.get_supabase_client", return_value=mock_client):
        response = client.get("/api/maintenance?schoolId=s1", headers={"Authorization": "Bearer valid"})

    assert response.status_code == 403


def test_auth_user_for_medewerker(client, login_as, medewerker_user):
    login_as(medewerker_user)

    data = client.get("/api/auth/user").json()

    assert data["role"] == "medewerker"
    assert data["dashboard_tabs"] == ["overzicht", "meldingen", "onderhoud"]
    assert [item["href"] for item in data["navigation"]] == [
        "/", "/onderhoud", "/documenten", "/contacten", "/slimme-analyses", "/objecten",
    ]


# ============================================================
# PERMISSION MANIFEST + NAVIGATION
# ============================================================
def test_permissions_manifest_is_public(client):
    response = client.get("/api/auth/permissions")

    assert response.status_code == 200
    data = response.json()
    assert data["version"] == permission_fingerprint()
    assert set(data["roles"]) == {"admin", "directeur", "medewerker"}
    assert len(data["pages"]) == 16


def test_navigation_table(client):
    data = client.get("/api/auth/navigation").json()

    assert data["public_routes"] == ["/login", "/register"]
    assert {"path": "/objecten", "page": "gebouwinformatie"} in data["routes"]
    assert data["items"][-1] == {"name": "Beheer", "href": "/beheer", "page": "beheer"}


# ============================================================
# ROUTE CHECK
# ============================================================
def test_route_check_denied_for_medewerker(client, login_as, medewerker_user, mock_tables):
    login_as(medewerker_user)
    mock_tables.tables["user_schools"] = make_query([{"school_id": "school-1"}])

    response = client.post("/api/auth/route-check", json={"path": "/financieel"})

    assert response.status_code == 200
    assert response.json() == {
        "path": "/financieel",
        "allowed": False,
        "redirect": "/no-access",
        "page": "financieel",
    }


def test_route_check_without_school(client, login_as, directeur_user, mock_tables):
    login_as(directeur_user)

    data = client.post("/api/auth/route-check", json={"path": "/"}).json()

    assert data["allowed"] is False
    assert data["redirect"] == "/no-access"


def test_route_check_admin_needs_no_school_link(client, login_as, admin_user):
    login_as(admin_user)

    data = client.post("/api/auth/route-check", json={"path": "/beheer"}).json()

    assert data == {"path": "/beheer", "allowed": True, "redirect": None, "page": "beheer"}
