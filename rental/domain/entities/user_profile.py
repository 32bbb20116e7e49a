from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

# Keys a profile update may touch; credentials and identity are never writable.
UPDATABLE_FIELDS = ("display_name", "photo_url", "role", "currency", "is_host_registered")

_PAYLOAD_KEYS = {
    "uid": "uid",
    "display_name": "displayName",
    "email": "email",
    "photo_url": "photoURL",
    "role": "role",
    "currency": "currency",
    "is_host_registered": "isHostRegistered",
    "join_date": "joinDate",
    "provider": "provider",
}


@dataclass(frozen=True)
class UserProfile:
    uid: str
    display_name: str
    email: str
    photo_url: str = ""
    role: str = "GUEST"  # "GUEST" | "HOST"
    currency: str = "USD"
    is_host_registered: bool = False
    join_date: str = ""
    provider: str | None = None  # set for social accounts

    @staticmethod
    def from_payload(payload: dict[str, Any]) -> "UserProfile":
        values = {}
        for attr, key in _PAYLOAD_KEYS.items():
            if key in payload:
                values[attr] = payload[key]
            elif attr in payload:
                values[attr] = payload[attr]
        return UserProfile(
            uid=str(values.get("uid", "")),
            display_name=str(values.get("display_name", "")),
            email=str(values.get("email", "")),
            photo_url=str(values.get("photo_url") or ""),
            role=str(values.get("role") or "GUEST"),
            currency=str(values.get("currency") or "USD"),
            is_host_registered=bool(values.get("is_host_registered", False)),
            join_date=str(values.get("join_date") or ""),
            provider=values.get("provider"),
        )

    def to_payload(self) -> dict[str, Any]:
        data = {key: getattr(self, attr) for attr, key in _PAYLOAD_KEYS.items()}
        if data["provider"] is None:
            data.pop("provider")
        return data

    def with_updates(self, updates: dict[str, Any]) -> "UserProfile":
        return replace(self, **allowed_updates(updates))


def allowed_updates(updates: dict[str, Any]) -> dict[str, Any]:
    """Keep only writable fields, keyed by attribute name; accepts camelCase keys."""
    by_key = {key: attr for attr, key in _PAYLOAD_KEYS.items()}
    allowed = {}
    for key, value in updates.items():
        attr = by_key.get(key, key)
        if attr in UPDATABLE_FIELDS:
            allowed[attr] = value
    return allowed


def to_payload_updates(updates: dict[str, Any]) -> dict[str, Any]:
    return {_PAYLOAD_KEYS[attr]: value for attr, value in allowed_updates(updates).items()}
