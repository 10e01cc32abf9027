# core/rate_limiter.py

from collections import defaultdict
from threading import Lock
from typing import Dict, List, Optional, Tuple
import time

from fastapi import HTTPException, Request

from core.config import settings
from core.logging_config import logger


# In-memory sliding window, per process. Good enough for login throttling
# on a single worker; multiple workers each keep their own window.
_rate_limit_store: Dict[str, List[float]] = defaultdict(list)
_key_windows: Dict[str, int] = {}
_lock = Lock()

SWEEP_INTERVAL_SECONDS = 60
_last_sweep = 0.0


def _sweep(now: float):
    """Drop keys whose newest hit is older than their window. Caller holds _lock."""
    global _last_sweep
    if now - _last_sweep < SWEEP_INTERVAL_SECONDS:
        return
    _last_sweep = now

    for key in list(_rate_limit_store):
        hits = _rate_limit_store[key]
        if not hits or hits[-1] <= now - _key_windows.get(key, 0):
            del _rate_limit_store[key]
            _key_windows.pop(key, None)


def check_rate_limit(identifier: str, max_requests: int, window_seconds: int) -> Tuple[bool, int]:
    """
    Record one hit for ``identifier`` if it is under the limit.

    Returns:
        Tuple of (allowed, remaining)
    """
    now = time.time()
    window_start = now - window_seconds

    with _lock:
        _sweep(now)
        _key_windows[identifier] = window_seconds

        hits = [ts for ts in _rate_limit_store[identifier] if ts > window_start]

        if len(hits) >= max_requests:
            _rate_limit_store[identifier] = hits
            return False, 0

        hits.append(now)
        _rate_limit_store[identifier] = hits
        return True, max_requests - len(hits)


def client_ip(request: Request) -> str:
    """
    Socket peer address. The first X-Forwarded-For hop is used only when
    TRUST_PROXY_HEADERS is set; otherwise any client could pick its own IP.
    """
    if settings.TRUST_PROXY_HEADERS:
        forwarded_for = request.headers.get("X-Forwarded-For")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


def get_rate_limit_identifier(request: Request, email: Optional[str] = None) -> str:
    """Per-account key when ``email`` is given (same for every IP), else per-IP."""
    if email:
        return f"login:{email.strip().lower()}"
    return f"ip:{client_ip(request)}"


def require_rate_limit(request: Request, identifier: str, max_requests: int, window_seconds: int) -> int:
    """Raise 429 when ``identifier`` exceeded its window, else return remaining hits."""
    allowed, remaining = check_rate_limit(identifier, max_requests, window_seconds)

    if not allowed:
        logger.warning(f"Rate limit exceeded: {identifier} ({request.url.path})")
        raise HTTPException(
            status_code=429,
            detail=f"Rate limit exceeded. Maximum {max_requests} requests per {window_seconds} seconds.",
            headers={
                "X-RateLimit-Limit": str(max_requests),
                "Retry-After": str(window_seconds),
            },
        )

    return remaining


def reset_rate_limits():
    global _last_sweep
    with _lock:
        _rate_limit_store.clear()
        _key_windows.clear()
        _last_sweep = 0.0
