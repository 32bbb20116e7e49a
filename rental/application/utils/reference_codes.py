from __future__ import annotations

import secrets
import string
import uuid

REFERENCE_PREFIX = "TB-"
_ALPHABET = string.digits + string.ascii_uppercase


def new_booking_id() -> str:
    return uuid.uuid4().hex


def new_reference_code(length: int = 8) -> str:
    """Short base-36 display token. Not unique; use the booking id for identity."""
    return REFERENCE_PREFIX + "".join(secrets.choice(_ALPHABET) for _ in range(length))
