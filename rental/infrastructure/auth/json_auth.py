from __future__ import annotations

import json
import logging
import threading
import uuid
from datetime import datetime
from pathlib import Path
from typing import Any

from passlib.context import CryptContext

from rental.application.exceptions import (
    AuthError,
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    UserNotFoundError,
)
from rental.application.ports.auth_gateway import AuthGatewayPort
from rental.domain.entities.user_profile import UserProfile

pwd_context = CryptContext(schemes=["pbkdf2_sha512"], deprecated="auto")

PASSWORD_FIELD = "passwordHash"


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return pwd_context.verify(password, password_hash)


class JsonFileAuthGateway(AuthGatewayPort):
    """Users in one JSON file; credentials never leave this class."""

    def __init__(self, data_dir: str = "./data", filename: str = "users.json") -> None:
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._file_path = self._data_dir / filename
        self._lock = threading.Lock()
        self._active: set[str] = set()
        self._logger = logging.getLogger(__name__)

    def login(self, email: str, password: str) -> UserProfile:
        with self._lock:
            user = self._find_by_email(self._load(), email)
        if not user or not user.get(PASSWORD_FIELD):
            raise InvalidCredentialsError("Invalid credentials")
        if not verify_password(password, user[PASSWORD_FIELD]):
            raise InvalidCredentialsError("Invalid credentials")
        self._active.add(user["uid"])
        return _to_profile(user)

    def register(self, first_name: str, last_name: str, email: str, password: str) -> UserProfile:
        if not email or not password or not first_name:
            raise AuthError("Missing required fields")
        with self._lock:
            users = self._load()
            if self._find_by_email(users, email):
                raise EmailAlreadyExistsError("Email already exists")
            user = {
                **UserProfile(
                    uid=f"u_{uuid.uuid4().hex[:12]}",
                    display_name=f"{first_name} {last_name}".strip(),
                    email=email,
                    join_date=_join_date(),
                ).to_payload(),
                PASSWORD_FIELD: hash_password(password),
            }
            users.append(user)
            self._save(users)
        self._active.add(user["uid"])
        self._logger.info("User registered", extra={"uid": user["uid"]})
        return _to_profile(user)

    def social_login(
        self,
        provider: str,
        email: str,
        first_name: str = "",
        last_name: str = "",
        photo_url: str = "",
    ) -> UserProfile:
        with self._lock:
            users = self._load()
            user = self._find_by_email(users, email)
            if user is None:
                user = UserProfile(
                    uid=f"u_{provider}_{uuid.uuid4().hex[:12]}",
                    display_name=f"{first_name} {last_name}".strip() or "Tubo User",
                    email=email,
                    photo_url=photo_url,
                    join_date=_join_date(),
                    provider=provider,
                ).to_payload()
                users.append(user)
                self._save(users)
            elif not user.get("photoURL") and photo_url:
                user["photoURL"] = photo_url
                self._save(users)
        self._active.add(user["uid"])
        return _to_profile(user)

    def logout(self, uid: str) -> None:
        self._active.discard(uid)

    def update_profile(self, uid: str, updates: dict[str, Any]) -> UserProfile:
        with self._lock:
            users = self._load()
            for index, user in enumerate(users):
                if user.get("uid") == uid:
                    break
            else:
                raise UserNotFoundError("User not found")

            updated = _to_profile(user).with_updates(updates).to_payload()
            if PASSWORD_FIELD in user:
                updated[PASSWORD_FIELD] = user[PASSWORD_FIELD]
            users[index] = updated
            self._save(users)
        return _to_profile(updated)

    def is_logged_in(self, uid: str) -> bool:
        return uid in self._active

    def _find_by_email(self, users: list[dict[str, Any]], email: str) -> dict[str, Any] | None:
        return next((u for u in users if u.get("email") == email), None)

    def _load(self) -> list[dict[str, Any]]:
        if not self._file_path.exists():
            return []
        try:
            with open(self._file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError):
            return []
        return data if isinstance(data, list) else []

    def _save(self, users: list[dict[str, Any]]) -> None:
        temp_path = self._file_path.with_suffix(".json.tmp")
        with open(temp_path, "w", encoding="utf-8") as f:
            json.dump(users, f, indent=2, ensure_ascii=False)
        temp_path.replace(self._file_path)


def _to_profile(record: dict[str, Any]) -> UserProfile:
    return UserProfile.from_payload({k: v for k, v in record.items() if k != PASSWORD_FIELD})


def _join_date() -> str:
    return datetime.now().strftime("%B %Y")
