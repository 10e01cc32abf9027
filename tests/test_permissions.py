# tests/test_permissions.py

"""
Tests for the role → page permission table and its evaluation functions.
"""

import pytest

from core.permissions import (
    DASHBOARD_TAB_PAGES,
    ROLE_PERMISSIONS,
    DashboardTab,
    PageKey,
    UserRole,
    can_access_beheer,
    can_access_financieel,
    can_access_objecten,
    coerce_page,
    coerce_role,
    get_accessible_pages,
    get_dashboard_tabs,
    has_access,
    permission_fingerprint,
    permission_manifest,
)


ALL_ROLES = list(UserRole)
ALL_PAGES = list(PageKey)
INVALID_ROLES = [None, "", "superuser", "ADMIN", "Admin ", 1, 0, [], {}, object()]
INVALID_PAGES = [None, "", "unknown", "Beheer", 3, [], object()]


# ============================================================
# TABLE CONTENTS
# ============================================================
def test_every_role_has_an_entry():
    assert set(ROLE_PERMISSIONS) == set(UserRole)


def test_admin_has_every_page():
    assert set(get_accessible_pages(UserRole.admin)) == set(PageKey)


def test_directeur_has_everything_but_beheer():
    assert set(get_accessible_pages(UserRole.directeur)) == set(PageKey) - {PageKey.beheer}


def test_medewerker_pages():
    assert get_accessible_pages(UserRole.medewerker) == [
        PageKey.dashboard,
        PageKey.dashboard_overzicht,
        PageKey.dashboard_meldingen,
        PageKey.dashboard_onderhoud,
        PageKey.onderhoud,
        PageKey.documenten,
        PageKey.contacten,
        PageKey.slimme_analyses,
        PageKey.gebouwinformatie,
    ]


@pytest.mark.parametrize("page", [
    PageKey.dashboard_financieel,
    PageKey.planning,
    PageKey.financieel,
    PageKey.meldingen,
    PageKey.objecten,
    PageKey.beheer,
    PageKey.klimaat,
])
def test_medewerker_denied(page):
    assert has_access(UserRole.medewerker, page) is False


def test_medewerker_sees_meldingen_tab_but_not_meldingen_page():
    assert has_access("medewerker", "dashboard_meldingen") is True
    assert has_access("medewerker", "meldingen") is False


def test_admin_pages_are_superset_of_directeur():
    assert set(get_accessible_pages("admin")) >= set(get_accessible_pages("directeur"))


def test_no_duplicate_pages_per_role():
    for pages in ROLE_PERMISSIONS.values():
        assert len(pages) == len(set(pages))


# ============================================================
# TOTALITY / DENY BY DEFAULT
# ============================================================
@pytest.mark.parametrize("role", INVALID_ROLES)
@pytest.mark.parametrize("page", ALL_PAGES)
def test_invalid_role_never_has_access(role, page):
    assert has_access(role, page) is False


@pytest.mark.parametrize("role", ALL_ROLES)
@pytest.mark.parametrize("page", INVALID_PAGES)
def test_invalid_page_never_accessible(role, page):
    assert has_access(role, page) is False


@pytest.mark.parametrize("role", INVALID_ROLES)
def test_invalid_role_gets_nothing(role):
    assert get_accessible_pages(role) == []
    assert get_dashboard_tabs(role) == []
    assert can_access_beheer(role) is False
    assert can_access_financieel(role) is False
    assert can_access_objecten(role) is False


def test_string_and_enum_inputs_agree():
    for role in ALL_ROLES:
        for page in ALL_PAGES:
            assert has_access(role.value, page.value) == has_access(role, page)


def test_has_access_matches_accessible_pages():
    for role in ALL_ROLES:
        pages = get_accessible_pages(role)
        for page in ALL_PAGES:
            assert has_access(role, page) == (page in pages)


def test_coerce_helpers():
    assert coerce_role("directeur") is UserRole.directeur
    assert coerce_role(UserRole.admin) is UserRole.admin
    assert coerce_role("root") is None
    assert coerce_role(42) is None

    assert coerce_page("beheer") is PageKey.beheer
    assert coerce_page("nope") is None
    assert coerce_page(None) is None


# ============================================================
# PREDICATES
# ============================================================
@pytest.mark.parametrize("role", ALL_ROLES + INVALID_ROLES[:4])
def test_predicates_equal_has_access(role):
    assert can_access_beheer(role) == has_access(role, PageKey.beheer)
    assert can_access_financieel(role) == has_access(role, PageKey.financieel)
    assert can_access_objecten(role) == has_access(role, PageKey.objecten)


def test_predicates_per_role():
    assert can_access_beheer("admin") is True
    assert can_access_beheer("directeur") is False
    assert can_access_financieel("directeur") is True
    assert can_access_financieel("medewerker") is False
    assert can_access_objecten("directeur") is True
    assert can_access_objecten("medewerker") is False


# ============================================================
# DASHBOARD TABS
# ============================================================
def test_dashboard_tabs_per_role():
    everything = [
        DashboardTab.overzicht,
        DashboardTab.meldingen,
        DashboardTab.onderhoud,
        DashboardTab.financieel,
    ]
    assert get_dashboard_tabs("admin") == everything
    assert get_dashboard_tabs("directeur") == everything
    assert get_dashboard_tabs("medewerker") == [
        DashboardTab.overzicht,
        DashboardTab.meldingen,
        DashboardTab.onderhoud,
    ]


@pytest.mark.parametrize("role", ALL_ROLES)
def test_dashboard_tabs_follow_fixed_order(role):
    order = [tab for tab, _ in DASHBOARD_TAB_PAGES]
    tabs = get_dashboard_tabs(role)
    assert tabs == [tab for tab in order if tab in tabs]
    for tab, page in DASHBOARD_TAB_PAGES:
        assert (tab in tabs) == has_access(role, page)


# ============================================================
# PURITY / IMMUTABILITY
# ============================================================
def test_accessible_pages_returns_a_copy():
    first = get_accessible_pages("admin")
    first.clear()
    assert len(get_accessible_pages("admin")) == len(PageKey)
    assert get_accessible_pages("admin") is not get_accessible_pages("admin")


def test_table_is_read_only():
    with pytest.raises(TypeError):
        ROLE_PERMISSIONS[UserRole.medewerker] = tuple(PageKey)  # type: ignore[index]

    assert isinstance(ROLE_PERMISSIONS[UserRole.admin], tuple)


def test_repeated_calls_are_stable():
    before = [has_access(r, p) for r in ALL_ROLES for p in ALL_PAGES]
    after = [has_access(r, p) for r in ALL_ROLES for p in ALL_PAGES]
    assert before == after


# ============================================================
# MANIFEST
# ============================================================
def test_manifest_contents():
    manifest = permission_manifest()

    assert manifest["version"] == permission_fingerprint()
    assert manifest["pages"] == [p.value for p in PageKey]
    assert manifest["roles"]["medewerker"] == [p.value for p in ROLE_PERMISSIONS[UserRole.medewerker]]
    assert "beheer" not in manifest["roles"]["directeur"]
    assert manifest["dashboard_tabs"] == {
        "overzicht": "dashboard_overzicht",
        "meldingen": "dashboard_meldingen",
        "onderhoud": "dashboard_onderhoud",
        "financieel": "dashboard_financieel",
    }


def test_fingerprint_is_deterministic_sha256():
    fingerprint = permission_fingerprint()
    assert fingerprint == permission_fingerprint()
    assert len(fingerprint) == 64
    int(fingerprint, 16)
