"""HTTP client for the reconstruction service."""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from sharevote.config import DEFAULT_MODE, SERVICE_URL
from sharevote.errors import ReconstructionError


class RemoteError(ReconstructionError):
    """The service could not be reached or answered with a non-2xx status."""

    kind = "Remote"

    def __init__(self, status_code: Optional[int], detail: Any) -> None:
        prefix = f"HTTP {status_code}" if status_code is not None else "unreachable"
        super().__init__(f"{prefix}: {detail}")
        self.status_code = status_code
        self.detail = detail


class ReconstructionClient:
    """Thin wrapper over ``httpx.Client``.

    Pass *http* to reuse an existing client (e.g. a FastAPI ``TestClient``);
    paths are then resolved against that client's base URL.
    """

    def __init__(
        self,
        base_url: str = SERVICE_URL,
        http: Optional[httpx.Client] = None,
        timeout: float = 15.0,
    ) -> None:
        if http is None:
            http = httpx.Client(base_url=base_url, timeout=timeout)
        self._http = http

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "ReconstructionClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _post(self, path: str, payload: Dict[str, Any], *required: str) -> Dict[str, Any]:
        try:
            resp = self._http.post(path, json=payload)
        except httpx.TransportError as exc:
            raise RemoteError(None, exc) from exc
        try:
            body = resp.json()
        except ValueError:
            body = None
        if resp.is_error:
            detail = body.get("detail") if isinstance(body, dict) else (body or resp.text)
            raise RemoteError(resp.status_code, detail)
        if not isinstance(body, dict):
            raise RemoteError(resp.status_code, f"expected a JSON object, got {resp.text[:200]!r}")
        missing = [key for key in required if key not in body]
        if missing:
            raise RemoteError(resp.status_code, f"response lacks {missing}")
        return body

    def decode(self, base: int, value: str) -> str:
        return self._post("/decode", {"base": base, "value": value}, "value")["value"]

    def reconstruct(self, share_file: Dict[str, Any], mode: str = DEFAULT_MODE) -> Dict[str, Any]:
        """Return the service's ``ReconstructResponse`` as a dict."""
        return self._post(
            "/reconstruct", {"share_file": share_file, "mode": mode}, "secret", "suspects"
        )
