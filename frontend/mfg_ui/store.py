# frontend/mfg_ui/store.py
"""
HTTP client for the row store.

Mirrors the store's auto-generated surface one method per operation:
list / insert / update / delete / count on /rest/{table}, plus the change
feed on /realtime/{table}. Every failure is raised as StoreError so callers
can turn it into a user notification at the request site.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15


class StoreError(Exception):
    def __init__(self, message: str, status: int | None = None, url: str | None = None):
        self.status = status
        self.url = url
        super().__init__(message)


def _friendly_http_message(status: int, url: str, detail: str = "") -> str:
    if status == 401: return "Unauthorized (401): check STORE_KEY."
    if status == 403: return "Forbidden (403)."
    if status == 404: return f"Not found (404): {detail or url}"
    if status == 422: return f"Invalid data (422): {detail}" if detail else "Invalid data (422)."
    if status >= 500: return f"Store error ({status}): {detail}" if detail else f"Store error ({status})."
    return f"HTTP error {status}: {detail}"


def _error_detail(resp) -> str:
    try:
        body = resp.json()
    except ValueError:
        return (getattr(resp, "text", "") or "")[:160]
    if isinstance(body, dict):
        return str(body.get("error") or body.get("detail") or body.get("message") or "")[:160]
    return str(body)[:160]


def ensure_array(x) -> List[Dict[str, Any]]:
    # plain list or {"ok": true, "data": [...]}
    if isinstance(x, list):
        return x
    if isinstance(x, dict):
        d = x.get("data", x)
        if isinstance(d, list):
            return d
    return []


def unwrap(x):
    if isinstance(x, dict) and "ok" in x and "data" in x:
        return x["data"]
    return x


class StoreClient:
    def __init__(self, base_url: str, api_key: str = "", session=None, timeout: float = DEFAULT_TIMEOUT):
        self.base_url = (base_url or "").strip().rstrip("/")
        self.api_key = api_key or ""
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    # ---------- transport ----------
    def _headers(self) -> Dict[str, str]:
        if not self.api_key:
            return {}
        return {"apikey": self.api_key, "Authorization": f"Bearer {self.api_key}"}

    def _request(self, method: str, path: str, *, params=None, payload=None):
        url = f"{self.base_url}{path}"
        try:
            resp = self.session.request(
                method, url,
                headers=self._headers(),
                params=params,
                json=payload,
                timeout=self.timeout,
            )
        except requests.Timeout:
            raise StoreError("Request timed out.", url=url)
        except requests.ConnectionError:
            raise StoreError("Could not connect: the store is down or STORE_URL is wrong.", url=url)
        except requests.RequestException as e:
            raise StoreError(f"Network error: {e}", url=url)

        if resp.status_code >= 400:
            detail = _error_detail(resp)
            logger.debug("%s %s -> %s %s", method, url, resp.status_code, detail)
            raise StoreError(_friendly_http_message(resp.status_code, url, detail), resp.status_code, url)
        try:
            return resp.json()
        except ValueError:
            raise StoreError(f"Store answered with non-JSON body ({resp.status_code}).", resp.status_code, url)

    # ---------- row operations ----------
    def list(self, table: str, order: str = "id") -> List[Dict[str, Any]]:
        return ensure_array(self._request("GET", f"/rest/{table}", params={"order": order}))

    def insert(self, table: str, record: Dict[str, Any]) -> Dict[str, Any]:
        return unwrap(self._request("POST", f"/rest/{table}", payload=record))

    def update(self, table: str, row_id: int, patch: Dict[str, Any]) -> Dict[str, Any]:
        return unwrap(self._request("PATCH", f"/rest/{table}/{int(row_id)}", payload=patch))

    def delete(self, table: str, row_id: int) -> bool:
        self._request("DELETE", f"/rest/{table}/{int(row_id)}")
        return True

    def count(self, table: str) -> int:
        data = unwrap(self._request("GET", f"/rest/{table}/count"))
        if isinstance(data, dict):
            return int(data.get("count") or 0)
        return int(data or 0)

    # ---------- change feed ----------
    def changes(self, table: str, after: Optional[int] = None) -> Dict[str, Any]:
        params = {"after": after} if after is not None else None
        data = unwrap(self._request("GET", f"/realtime/{table}", params=params))
        return {
            "epoch": data.get("epoch"),
            "cursor": int(data.get("cursor") or 0),
            "truncated": bool(data.get("truncated")),
            "events": list(data.get("events") or []),
        }
