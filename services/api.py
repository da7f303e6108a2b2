"""HTTP client for the Lumo backend.

Every call returns the parsed JSON payload or raises `ApiError` carrying a
message fit to show the user.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, Optional

import requests

from services.storage import TokenStore

logger = logging.getLogger(__name__)


class ApiError(Exception):
    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status


def _error_message(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        for key in ("message", "error"):
            if body.get(key):
                return str(body[key])
    return f"Request failed with status {response.status_code}"


class ApiClient:
    def __init__(self, base_url: str, token_store: Optional[TokenStore] = None,
                 timeout: float = 10.0, profile_path: Optional[str] = None,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.token_store = token_store
        self.timeout = timeout
        self.profile_path = profile_path
        self.session = session or requests.Session()

    def _request(self, method: str, path: str, payload: Optional[Dict[str, Any]] = None,
                 auth: bool = False) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        headers = {"Content-Type": "application/json"}
        if auth and self.token_store is not None:
            token = self.token_store.get()
            if token:
                headers["Authorization"] = f"Bearer {token}"
        try:
            resp = self.session.request(method, url, json=payload, headers=headers,
                                        timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise ApiError(f"Network error: {e}") from e

        if not resp.ok:
            message = _error_message(resp)
            logger.warning(f"{method} {url} -> {resp.status_code}: {message}")
            raise ApiError(message, resp.status_code)

        if not resp.content:
            return {}
        try:
            return resp.json()
        except ValueError as e:
            raise ApiError("Invalid response from server.", resp.status_code) from e

    # -------------------- users --------------------
    def register_user(self, fields: Dict[str, Any]) -> Any:
        """Create a user. Expects firstName, lastName, age, email, password, confirmPassword."""
        payload = {k: fields.get(k) for k in
                   ("firstName", "lastName", "age", "email", "password", "confirmPassword")}
        return self._request("POST", "/api/v1/users", payload)

    def login_user(self, email: str, password: str) -> Any:
        return self._request("POST", "/api/v1/users/login", {"email": email, "password": password})

    def get_user_profile_info(self) -> Any:
        # The profile resource path is owned by the backend; it must come from config.
        if not self.profile_path:
            raise ApiError("Profile endpoint is not configured.")
        return self._request("GET", self.profile_path, auth=True)

    def send_recovery_email(self, email: str) -> Any:
        return self._request("POST", "/api/v1/users/forgot-password", {"email": email})

    def reset_password(self, token: str, new_password: str, confirm_password: str) -> Any:
        return self._request("POST", f"/api/v1/users/reset-password/{token}", {
            "newPassword": new_password,
            "confirmPassword": confirm_password,
        })

    # -------------------- lists --------------------
    def create_list(self, name: str, description: str = "") -> Any:
        return self._request("POST", "/api/v1/lists",
                             {"name": name, "description": description}, auth=True)
