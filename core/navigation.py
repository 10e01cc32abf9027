# core/navigation.py

"""
Route → page-key table for the web client, plus the redirect decision the
client route guard applies on every navigation.

The client fetches NAVIGATION_ITEMS and ROUTE_PERMISSIONS from
GET /auth/navigation instead of keeping its own copy.
"""

import re
from dataclasses import dataclass
from typing import Optional, Pattern, Tuple

from core.permissions import PageKey, RoleInput, coerce_role, has_access


LOGIN_ROUTE = "/login"
NO_ACCESS_ROUTE = "/no-access"
PUBLIC_ROUTES = ("/login", "/register")


@dataclass(frozen=True)
class RouteDecision:
    allowed: bool
    redirect: Optional[str] = None
    page: Optional[PageKey] = None


@dataclass(frozen=True)
class NavigationItem:
    name: str
    href: str
    page: PageKey


# Most specific first; first match wins.
ROUTE_PERMISSIONS: Tuple[Tuple[str, PageKey], ...] = (
    ("/", PageKey.dashboard),
    ("/onderhoud", PageKey.onderhoud),
    ("/planning", PageKey.planning),
    ("/financieel", PageKey.financieel),
    ("/documenten/folder/{folder_id}", PageKey.documenten),
    ("/documenten", PageKey.documenten),
    ("/contacten", PageKey.contacten),
    ("/slimme-analyses", PageKey.slimme_analyses),
    ("/meldingen", PageKey.meldingen),
    ("/objecten", PageKey.gebouwinformatie),
    ("/beheer", PageKey.beheer),
    ("/klimaat", PageKey.klimaat),
)

NAVIGATION_ITEMS: Tuple[NavigationItem, ...] = (
    NavigationItem("Dashboard", "/", PageKey.dashboard),
    NavigationItem("Onderhoud", "/onderhoud", PageKey.onderhoud),
    NavigationItem("Financieel", "/financieel", PageKey.financieel),
    NavigationItem("Documenten", "/documenten", PageKey.documenten),
    NavigationItem("Contacten", "/contacten", PageKey.contacten),
    NavigationItem("Slimme Analyses", "/slimme-analyses", PageKey.slimme_analyses),
    NavigationItem("Klimaat", "/klimaat", PageKey.klimaat),
    NavigationItem("Gebouwinformatie", "/objecten", PageKey.gebouwinformatie),
    NavigationItem("Beheer", "/beheer", PageKey.beheer),
)


def _compile(pattern: str) -> Pattern:
    regex = re.sub(r"\{[^/}]+\}", "[^/]+", pattern)
    return re.compile(f"^{regex}$")


_COMPILED_ROUTES = tuple((_compile(pattern), page) for pattern, page in ROUTE_PERMISSIONS)


def normalize_path(path) -> str:
    if not isinstance(path, str) or not path:
        return "/"
    path = path.split("?", 1)[0].split("#", 1)[0]
    if not path.startswith("/"):
        path = f"/{path}"
    if len(path) > 1:
        path = path.rstrip("/") or "/"
    return path


def page_for_route(path) -> Optional[PageKey]:
    """Page key guarding ``path``, or None for routes outside the table."""
    normalized = normalize_path(path)
    for regex, page in _COMPILED_ROUTES:
        if regex.match(normalized):
            return page
    return None


def resolve_route(
    path,
    role: RoleInput,
    *,
    authenticated: Optional[bool] = None,
    has_school: bool = True,
) -> RouteDecision:
    """
    Decide what the client renders for ``path``.

    Order of checks: public routes, authentication, /no-access,
    school membership, page permission. Unknown routes are allowed with
    page=None so the client can render its not-found view.

    ``authenticated`` defaults to "has a valid role". A signed-in user whose
    role is missing is authenticated but reaches no gated page.
    """
    normalized = normalize_path(path)

    if normalized in PUBLIC_ROUTES:
        return RouteDecision(allowed=True)

    if authenticated is None:
        authenticated = coerce_role(role) is not None
    if not authenticated:
        return RouteDecision(allowed=False, redirect=LOGIN_ROUTE)

    if normalized == NO_ACCESS_ROUTE:
        return RouteDecision(allowed=True)

    if not has_school:
        return RouteDecision(allowed=False, redirect=NO_ACCESS_ROUTE)

    page = page_for_route(normalized)
    if page is None:
        return RouteDecision(allowed=True)

    if has_access(role, page):
        return RouteDecision(allowed=True, page=page)
    return RouteDecision(allowed=False, redirect=NO_ACCESS_ROUTE, page=page)


def visible_navigation(role: RoleInput) -> list[NavigationItem]:
    return [item for item in NAVIGATION_ITEMS if has_access(role, item.page)]
