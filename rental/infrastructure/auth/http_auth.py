from __future__ import annotations

import logging
from typing import Any

import httpx

from rental.application.exceptions import (
    AuthError,
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    UserNotFoundError,
)
from rental.application.ports.auth_gateway import AuthGatewayPort
from rental.domain.entities.user_profile import UserProfile, to_payload_updates


class HttpAuthGateway(AuthGatewayPort):
    """Talks to a remote auth server exposing /api/auth/* and /api/user/update."""

    def __init__(self, base_url: str, timeout: float = 10.0, client: httpx.Client | None = None) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = client or httpx.Client(timeout=timeout)
        self._logger = logging.getLogger(__name__)

    def login(self, email: str, password: str) -> UserProfile:
        return self._post("/api/auth/login", {"email": email, "password": password})

    def register(self, first_name: str, last_name: str, email: str, password: str) -> UserProfile:
        return self._post(
            "/api/auth/register",
            {"firstName": first_name, "lastName": last_name, "email": email, "password": password},
        )

    def social_login(
        self,
        provider: str,
        email: str,
        first_name: str = "",
        last_name: str = "",
        photo_url: str = "",
    ) -> UserProfile:
        return self._post(
            "/api/auth/social-login",
            {
                "provider": provider,
                "email": email,
                "firstName": first_name,
                "lastName": last_name,
                "photoURL": photo_url,
            },
        )

    def logout(self, uid: str) -> None:
        # Sessions are client-side; the server keeps no login state.
        self._logger.info("Logged out", extra={"uid": uid})

    def update_profile(self, uid: str, updates: dict[str, Any]) -> UserProfile:
        return self._post("/api/user/update", {"uid": uid, "updates": to_payload_updates(updates)})

    def _post(self, path: str, payload: dict[str, Any]) -> UserProfile:
        try:
            resp = self._client.post(f"{self._base_url}{path}", json=payload)
        except httpx.HTTPError as e:
            raise AuthError(f"Auth server unreachable: {e}") from e

        if resp.status_code >= 400:
            message = _error_message(resp)
            self._logger.warning("Auth request failed", extra={"status": resp.status_code, "error": message})
            if resp.status_code == 401:
                raise InvalidCredentialsError(message)
            if resp.status_code == 404:
                raise UserNotFoundError(message)
            if "exists" in message.lower():
                raise EmailAlreadyExistsError(message)
            raise AuthError(message)
        return UserProfile.from_payload(resp.json())


def _error_message(resp: httpx.Response) -> str:
    try:
        return str(resp.json().get("error") or resp.text)
    except Exception:
        return resp.text
