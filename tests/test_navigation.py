# tests/test_navigation.py

"""
Tests for the route → page table and the client route guard decision.
"""

import pytest

from core.navigation import (
    LOGIN_ROUTE,
    NAVIGATION_ITEMS,
    NO_ACCESS_ROUTE,
    ROUTE_PERMISSIONS,
    normalize_path,
    page_for_route,
    resolve_route,
    visible_navigation,
)
from core.permissions import PageKey, UserRole, has_access


@pytest.mark.parametrize("path, page", [
    ("/", PageKey.dashboard),
    ("/onderhoud", PageKey.onderhoud),
    ("/planning", PageKey.planning),
    ("/financieel", PageKey.financieel),
    ("/documenten", PageKey.documenten),
    ("/documenten/folder/abc-123", PageKey.documenten),
    ("/contacten", PageKey.contacten),
    ("/slimme-analyses", PageKey.slimme_analyses),
    ("/meldingen", PageKey.meldingen),
    ("/objecten", PageKey.gebouwinformatie),
    ("/beheer", PageKey.beheer),
    ("/klimaat", PageKey.klimaat),
])
def test_page_for_route(path, page):
    assert page_for_route(path) == page


def test_page_for_route_unknown():
    assert page_for_route("/does-not-exist") is None
    assert page_for_route("/documenten/folder") is None


def test_normalize_path():
    assert normalize_path("") == "/"
    assert normalize_path(None) == "/"
    assert normalize_path("onderhoud") == "/onderhoud"
    assert normalize_path("/onderhoud/") == "/onderhoud"
    assert normalize_path("/financieel?year=2025#top") == "/financieel"


def test_every_route_page_is_a_known_key():
    for _, page in ROUTE_PERMISSIONS:
        assert page in PageKey


# ============================================================
# resolve_route
# ============================================================
def test_public_routes_always_allowed():
    assert resolve_route("/login", None).allowed is True
    assert resolve_route("/register", "medewerker").allowed is True


def test_unauthenticated_redirects_to_login():
    decision = resolve_route("/onderhoud", None)
    assert decision.allowed is False
    assert decision.redirect == LOGIN_ROUTE


def test_authenticated_without_role_goes_to_no_access():
    decision = resolve_route("/onderhoud", None, authenticated=True)
    assert decision.allowed is False
    assert decision.redirect == NO_ACCESS_ROUTE
    assert decision.page == PageKey.onderhoud


def test_no_access_page_is_reachable_when_signed_in():
    assert resolve_route(NO_ACCESS_ROUTE, "medewerker").allowed is True
    assert resolve_route(NO_ACCESS_ROUTE, None).redirect == LOGIN_ROUTE


def test_user_without_school_goes_to_no_access():
    decision = resolve_route("/", "directeur", has_school=False)
    assert decision.allowed is False
    assert decision.redirect == NO_ACCESS_ROUTE


def test_unknown_route_is_left_to_the_client():
    decision = resolve_route("/nope", "medewerker")
    assert decision.allowed is True
    assert decision.page is None


def test_medewerker_blocked_from_financieel():
    decision = resolve_route("/financieel", UserRole.medewerker)
    assert decision.allowed is False
    assert decision.redirect == NO_ACCESS_ROUTE
    assert decision.page == PageKey.financieel


def test_directeur_blocked_from_beheer_only():
    assert resolve_route("/beheer", "directeur").allowed is False
    assert resolve_route("/financieel", "directeur").allowed is True
    assert resolve_route("/beheer", "admin").allowed is True


@pytest.mark.parametrize("role", list(UserRole))
def test_route_guard_agrees_with_permission_table(role):
    for path, page in ROUTE_PERMISSIONS:
        concrete = path.replace("{folder_id}", "f1")
        assert resolve_route(concrete, role).allowed == has_access(role, page)


# ============================================================
# Sidebar
# ============================================================
def test_visible_navigation_medewerker():
    names = [item.name for item in visible_navigation("medewerker")]
    assert names == [
        "Dashboard",
        "Onderhoud",
        "Documenten",
        "Contacten",
        "Slimme Analyses",
        "Gebouwinformatie",
    ]


def test_visible_navigation_admin_shows_everything():
    assert visible_navigation("admin") == list(NAVIGATION_ITEMS)


def test_visible_navigation_invalid_role():
    assert visible_navigation("guest") == []
