from fastapi import APIRouter, HTTPException, Depends, Request
from pydantic import BaseModel
from typing import Optional

from core.config import settings
from core.logging_config import logger
from core.navigation import (
    NAVIGATION_ITEMS,
    ROUTE_PERMISSIONS,
    PUBLIC_ROUTES,
    resolve_route,
    visible_navigation,
)
from core.permission_helpers import get_user_school_ids
from core.permissions import (
    get_accessible_pages,
    get_dashboard_tabs,
    permission_fingerprint,
    permission_manifest,
)
from core.rate_limiter import require_rate_limit, get_rate_limit_identifier
from core.supabase_client import get_supabase_client
from dependencies.auth import get_current_user, get_optional_auth, CurrentUser
from models.user import AuthUserResponse, NavigationEntry


router = APIRouter(
    prefix="/auth",
    tags=["Auth"],
)


# ============================================================
# MODELS
# ============================================================
class LoginRequest(BaseModel):
    email: str
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"


class RouteCheckRequest(BaseModel):
    path: str


class RouteCheckResponse(BaseModel):
    path: str
    allowed: bool
    redirect: Optional[str] = None
    page: Optional[str] = None


# ============================================================
# LOGIN (SUPABASE AUTH)
# ============================================================
@router.post("/login", response_model=TokenResponse, summary="Authenticate user")
def login(payload: LoginRequest, request: Request):

    email = payload.email.strip().lower()

    # Per client IP, then per account regardless of IP
    require_rate_limit(
        request,
        identifier=get_rate_limit_identifier(request),
        max_requests=settings.LOGIN_IP_RATE_LIMIT,
        window_seconds=settings.LOGIN_RATE_WINDOW_SECONDS,
    )
    require_rate_limit(
        request,
        identifier=get_rate_limit_identifier(request, email=email),
        max_requests=settings.LOGIN_RATE_LIMIT,
        window_seconds=settings.LOGIN_RATE_WINDOW_SECONDS,
    )

    client = get_supabase_client()
    if not client:
        raise HTTPException(500, "Supabase client not configured")

    try:
        response = client.auth.sign_in_with_password(
            {"email": email, "password": payload.password}
        )
    except Exception as e:
        # Don't expose details to the caller
        logger.warning(f"Login attempt failed for {email}: {type(e).__name__}")
        raise HTTPException(status_code=401, detail="Invalid email or password")

    if not response.session or not response.session.access_token:
        raise HTTPException(401, "Invalid email or password")

    return TokenResponse(access_token=response.session.access_token)


# ============================================================
# LOGOUT
# ============================================================
@router.post("/logout", summary="Log out")
def logout(current_user: Optional[CurrentUser] = Depends(get_optional_auth)):
    """
    Sessions live in Supabase; the client signs out there.
    This endpoint only records the event and always succeeds.
    """
    if current_user:
        logger.info(f"User {current_user.id} logged out")
    return {"success": True}


# ============================================================
# CURRENT USER + EFFECTIVE PERMISSIONS
# ============================================================
@router.get("/user", response_model=AuthUserResponse, summary="Current user and accessible pages")
def read_user(current_user: CurrentUser = Depends(get_current_user)):
    return AuthUserResponse(
        id=current_user.id,
        email=current_user.email,
        first_name=current_user.first_name,
        last_name=current_user.last_name,
        role=current_user.role,
        pages=get_accessible_pages(current_user.role),
        dashboard_tabs=get_dashboard_tabs(current_user.role),
        navigation=[
            NavigationEntry(name=item.name, href=item.href, page=item.page)
            for item in visible_navigation(current_user.role)
        ],
        permissions_version=permission_fingerprint(),
    )


# ============================================================
# PERMISSION MANIFEST (shared with the client build)
# ============================================================
@router.get("/permissions", summary="Role → page permission table")
def read_permissions():
    """
    Public: the table is policy, not a secret. The client compares
    ``version`` with the fingerprint compiled into its bundle.
    """
    return permission_manifest()


@router.get("/navigation", summary="Route → page table and sidebar items")
def read_navigation():
    return {
        "public_routes": list(PUBLIC_ROUTES),
        "routes": [{"path": path, "page": page.value} for path, page in ROUTE_PERMISSIONS],
        "items": [
            {"name": item.name, "href": item.href, "page": item.page.value}
            for item in NAVIGATION_ITEMS
        ],
    }


# ============================================================
# ROUTE CHECK
# ============================================================
@router.post("/route-check", response_model=RouteCheckResponse, summary="Evaluate a client route")
def route_check(payload: RouteCheckRequest, current_user: CurrentUser = Depends(get_current_user)):
    school_ids = get_user_school_ids(current_user)
    has_school = school_ids is None or len(school_ids) > 0

    decision = resolve_route(
        payload.path,
        current_user.role,
        authenticated=True,
        has_school=has_school,
    )

    return RouteCheckResponse(
        path=payload.path,
        allowed=decision.allowed,
        redirect=decision.redirect,
        page=decision.page.value if decision.page else None,
    )
