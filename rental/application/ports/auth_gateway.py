from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from rental.domain.entities.user_profile import UserProfile


class AuthGatewayPort(ABC):
    @abstractmethod
    def login(self, email: str, password: str) -> UserProfile:
        """Raises InvalidCredentialsError on unknown email or wrong password."""
        raise NotImplementedError

    @abstractmethod
    def register(self, first_name: str, last_name: str, email: str, password: str) -> UserProfile:
        """Raises EmailAlreadyExistsError if the email is taken."""
        raise NotImplementedError

    @abstractmethod
    def social_login(
        self,
        provider: str,
        email: str,
        first_name: str = "",
        last_name: str = "",
        photo_url: str = "",
    ) -> UserProfile:
        """Return the existing profile for email, creating it on first login."""
        raise NotImplementedError

    @abstractmethod
    def logout(self, uid: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def update_profile(self, uid: str, updates: dict[str, Any]) -> UserProfile:
        """Apply profile updates. Raises UserNotFoundError if uid is unknown."""
        raise NotImplementedError
