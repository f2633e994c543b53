# backend/mfg_api/core/security.py
import os
import secrets

from fastapi import HTTPException, Request, status
from fastapi.security.utils import get_authorization_scheme_param


def configured_api_key() -> str:
    """Store access key; empty means the store is open (local development)."""
    return (os.getenv("STORE_API_KEY") or "").strip()


# ---- Tolerant key extraction ----
def _extract_api_key(request: Request) -> str:
    """
    Reads the store key from either of:
      - "apikey: <key>"
      - "Authorization: Bearer <key>"  (extra spaces / quotes tolerated)
    """
    raw = request.headers.get("apikey")
    if raw:
        return str(raw).strip().strip('"').strip("'")

    auth = request.headers.get("Authorization")
    if not auth:
        return ""
    auth = str(auth).strip().strip('"').strip("'")
    scheme, param = get_authorization_scheme_param(auth)
    if not scheme or scheme.lower() != "bearer":
        return ""
    return (param or "").replace(" ", "")


# ---- Dependency for /rest and /realtime ----
def require_api_key(request: Request) -> None:
    expected = configured_api_key()
    if not expected:
        return
    given = _extract_api_key(request)
    if not given or not secrets.compare_digest(given, expected):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or missing store key",
            headers={"WWW-Authenticate": "Bearer"},
        )
