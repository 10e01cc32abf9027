# routers/health.py

from fastapi import APIRouter

from core.permissions import permission_fingerprint
from core.supabase_client import ping_supabase

router = APIRouter(
    prefix="/health",
    tags=["Health"],
)


# -----------------------------------------------------
# GET /health/db
# Checks Supabase connection + table queries
# No auth required
# -----------------------------------------------------
@router.get("/db", summary="Supabase / DB health check")
async def health_db():
    """
    Queries one row from each core table.
    Safe for external health monitors (no auth required).
    """
    status = ping_supabase()
    return {
        "service": "Supabase",
        "status": status.get("status", "unknown"),
        "details": status,
    }


# -----------------------------------------------------
# GET /health/app
# -----------------------------------------------------
@router.get("/app", summary="App health check")
async def health_app():
    """
    Lightweight liveness check. Reports the permission table version so a
    deploy check can compare it with the client bundle.
    """
    return {
        "service": "Eduvium API",
        "status": "ok",
        "permissions_version": permission_fingerprint(),
    }
