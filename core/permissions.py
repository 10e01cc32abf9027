# core/permissions.py

"""
Central role → page permission map.

This module is the single source of truth for which application surfaces
each role may reach. The web client consumes the same table through
GET /auth/permissions (see ``permission_manifest``), so a change here is a
change for both sides.

Every function below is total: unknown roles, unknown page keys and ``None``
all evaluate to "no access" and nothing ever raises.
"""

import hashlib
import json
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple, Union

from models.enums import BaseStrEnum


class UserRole(BaseStrEnum):
    admin = "admin"
    directeur = "directeur"
    medewerker = "medewerker"


class PageKey(BaseStrEnum):
    dashboard = "dashboard"
    dashboard_overzicht = "dashboard_overzicht"
    dashboard_meldingen = "dashboard_meldingen"
    dashboard_onderhoud = "dashboard_onderhoud"
    dashboard_financieel = "dashboard_financieel"
    onderhoud = "onderhoud"
    planning = "planning"
    financieel = "financieel"
    documenten = "documenten"
    contacten = "contacten"
    meldingen = "meldingen"
    objecten = "objecten"
    beheer = "beheer"
    klimaat = "klimaat"
    slimme_analyses = "slimme_analyses"
    gebouwinformatie = "gebouwinformatie"


class DashboardTab(BaseStrEnum):
    overzicht = "overzicht"
    meldingen = "meldingen"
    onderhoud = "onderhoud"
    financieel = "financieel"


RoleInput = Union[UserRole, str, None]
PageInput = Union[PageKey, str, None]


# ============================================
# ROLE → PAGES
# ============================================
# Product policy, listed per role on purpose. medewerker sees the
# dashboard_meldingen tab but not the standalone meldingen page.
ROLE_PERMISSIONS: Mapping[UserRole, Tuple[PageKey, ...]] = MappingProxyType({

    # =====================================================
    # ADMIN: everything, including beheer
    # =====================================================
    UserRole.admin: (
        PageKey.dashboard,
        PageKey.dashboard_overzicht,
        PageKey.dashboard_meldingen,
        PageKey.dashboard_onderhoud,
        PageKey.dashboard_financieel,
        PageKey.onderhoud,
        PageKey.planning,
        PageKey.financieel,
        PageKey.documenten,
        PageKey.contacten,
        PageKey.meldingen,
        PageKey.objecten,
        PageKey.beheer,
        PageKey.klimaat,
        PageKey.slimme_analyses,
        PageKey.gebouwinformatie,
    ),

    # =====================================================
    # DIRECTEUR: everything except beheer
    # =====================================================
    UserRole.directeur: (
        PageKey.dashboard,
        PageKey.dashboard_overzicht,
        PageKey.dashboard_meldingen,
        PageKey.dashboard_onderhoud,
        PageKey.dashboard_financieel,
        PageKey.onderhoud,
        PageKey.planning,
        PageKey.financieel,
        PageKey.documenten,
        PageKey.contacten,
        PageKey.meldingen,
        PageKey.objecten,
        PageKey.klimaat,
        PageKey.slimme_analyses,
        PageKey.gebouwinformatie,
    ),

    # =====================================================
    # MEDEWERKER: operational pages only
    # =====================================================
    UserRole.medewerker: (
        PageKey.dashboard,
        PageKey.dashboard_overzicht,
        PageKey.dashboard_meldingen,
        PageKey.dashboard_onderhoud,
        PageKey.onderhoud,
        PageKey.documenten,
        PageKey.contacten,
        PageKey.slimme_analyses,
        PageKey.gebouwinformatie,
    ),
})

# Fixed render order of the dashboard tabs.
DASHBOARD_TAB_PAGES: Tuple[Tuple[DashboardTab, PageKey], ...] = (
    (DashboardTab.overzicht, PageKey.dashboard_overzicht),
    (DashboardTab.meldingen, PageKey.dashboard_meldingen),
    (DashboardTab.onderhoud, PageKey.dashboard_onderhoud),
    (DashboardTab.financieel, PageKey.dashboard_financieel),
)


# -----------------------------------------------------
# Loose input → closed enums
# -----------------------------------------------------
def coerce_role(value: Any) -> Optional[UserRole]:
    """Map a raw role value (JWT metadata, query param) to a UserRole or None."""
    if isinstance(value, UserRole):
        return value
    if not isinstance(value, str):
        return None
    try:
        return UserRole(value)
    except ValueError:
        return None


def coerce_page(value: Any) -> Optional[PageKey]:
    if isinstance(value, PageKey):
        return value
    if not isinstance(value, str):
        return None
    try:
        return PageKey(value)
    except ValueError:
        return None


# -----------------------------------------------------
# Evaluation
# -----------------------------------------------------
def has_access(role: RoleInput, page: PageInput) -> bool:
    resolved_role = coerce_role(role)
    if resolved_role is None:
        return False

    permissions = ROLE_PERMISSIONS.get(resolved_role)
    if not permissions:
        return False

    resolved_page = coerce_page(page)
    if resolved_page is None:
        return False

    return resolved_page in permissions


def get_accessible_pages(role: RoleInput) -> list[PageKey]:
    """Pages for ``role`` in table order. Always a new list."""
    resolved_role = coerce_role(role)
    if resolved_role is None:
        return []
    return list(ROLE_PERMISSIONS.get(resolved_role, ()))


def can_access_beheer(role: RoleInput) -> bool:
    return has_access(role, PageKey.beheer)


def can_access_financieel(role: RoleInput) -> bool:
    return has_access(role, PageKey.financieel)


def can_access_objecten(role: RoleInput) -> bool:
    return has_access(role, PageKey.objecten)


def get_dashboard_tabs(role: RoleInput) -> list[DashboardTab]:
    return [tab for tab, page in DASHBOARD_TAB_PAGES if has_access(role, page)]


# -----------------------------------------------------
# Export for the client build
# -----------------------------------------------------
def _canonical_table() -> dict[str, list[str]]:
    return {
        role.value: [page.value for page in pages]
        for role, pages in ROLE_PERMISSIONS.items()
    }


def permission_fingerprint() -> str:
    """SHA-256 of the canonical role table. Equal fingerprints mean equal tables."""
    payload = json.dumps(_canonical_table(), sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def permission_manifest() -> dict:
    """
    Serializable copy of the whole authorization model.

    The client fetches this once per session and compares ``version``
    against the value baked into its bundle.
    """
    return {
        "version": permission_fingerprint(),
        "roles": _canonical_table(),
        "pages": PageKey.list(),
        "dashboard_tabs": {tab.value: page.value for tab, page in DASHBOARD_TAB_PAGES},
    }
