"""HTTP client for the Taskboard API that keeps a SessionStore in sync."""

from __future__ import annotations

import logging
from collections.abc import Generator
from typing import Any

import httpx

from taskboard.client.session import SessionState, SessionStore

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_API_PREFIX = "/api/v1"
DEFAULT_TIMEOUT_SEC = 10.0


class TaskboardApiError(Exception):
    """Raised when the API answers with a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class SessionAuth(httpx.Auth):
    """Attach the stored bearer token; drop the session when the server answers 401."""

    def __init__(self, store: SessionStore) -> None:
        self.store = store

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        if self.store.token:
            request.headers["Authorization"] = f"Bearer {self.store.token}"
        response = yield request
        if response.status_code == 401 and self.store.is_authenticated:
            logger.info("Server rejected the stored token; clearing session")
            self.store.clear()


def _error_detail(response: httpx.Response) -> str:
    try:
        detail = response.json().get("detail")
    except (ValueError, AttributeError):
        detail = None
    if isinstance(detail, str):
        return detail
    if detail is not None:
        return str(detail)
    return response.text[:500] or f"HTTP {response.status_code}"


class TaskboardClient:
    """
    Thin API client. Pass `http` to reuse an existing httpx.Client (for example
    a FastAPI TestClient); otherwise one is created for `base_url`.
    """

    def __init__(
        self,
        store: SessionStore,
        base_url: str = DEFAULT_BASE_URL,
        api_prefix: str = DEFAULT_API_PREFIX,
        http: httpx.Client | None = None,
        timeout: float = DEFAULT_TIMEOUT_SEC,
    ) -> None:
        self.store = store
        if self.store.state is SessionState.UNKNOWN:
            self.store.load()
        self.api_prefix = api_prefix.rstrip("/")
        self._owns_http = http is None
        self._http = http if http is not None else httpx.Client(base_url=base_url, timeout=timeout)
        self._auth = SessionAuth(store)

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> TaskboardClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def current_user(self) -> dict[str, Any] | None:
        return self.store.user

    def request(self, method: str, path: str, **kwargs: Any) -> Any:
        """Send a request under the API prefix; return decoded JSON (None for empty bodies)."""
        response = self._http.request(method, f"{self.api_prefix}{path}", auth=self._auth, **kwargs)
        if not response.is_success:
            raise TaskboardApiError(_error_detail(response), response.status_code)
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    def get(self, path: str, **params: Any) -> Any:
        return self.request("GET", path, params={k: v for k, v in params.items() if v is not None})

    def post(self, path: str, json: dict[str, Any]) -> Any:
        return self.request("POST", path, json=json)

    def patch(self, path: str, json: dict[str, Any]) -> Any:
        return self.request("PATCH", path, json=json)

    def delete(self, path: str) -> None:
        self.request("DELETE", path)

    def _store_auth_response(self, data: dict[str, Any]) -> dict[str, Any]:
        if data.get("access_token"):
            self.store.save(data["access_token"], data["user"])
        return data["user"]

    def login(self, email: str, password: str) -> dict[str, Any]:
        data = self.post("/auth/login", {"email": email, "password": password})
        return self._store_auth_response(data)

    def register(
        self,
        email: str,
        password: str,
        confirm_password: str,
        role: str = "user",
        admin_code: str | None = None,
    ) -> dict[str, Any]:
        body: dict[str, Any] = {
            "email": email,
            "password": password,
            "confirmPassword": confirm_password,
            "role": role,
        }
        # The activation code only travels with admin sign-ups.
        if role == "admin" and admin_code is not None:
            body["adminCode"] = admin_code
        data = self.post("/auth/register", body)
        return self._store_auth_response(data)

    def logout(self) -> None:
        self.store.clear()
