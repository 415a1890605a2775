"""Abstract repository for User records."""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderdesk.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def get_by_id(self, user_id: str) -> User | None:
        """Return a user by ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[User]:
        """Return every known user."""

    @abstractmethod
    def save(self, user: User) -> None:
        """Persist a new or updated user."""
