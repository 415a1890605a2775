"""JSON-backed implementation of UserRepository."""

from __future__ import annotations

from orderdesk.domain.model.user import User
from orderdesk.domain.repository.user_repository import UserRepository
from orderdesk.infrastructure.persistence.json_table import JsonTable


class JsonUserRepository(UserRepository):

    def __init__(self, table: JsonTable) -> None:
        self._table = table

    def get_by_id(self, user_id: str) -> User | None:
        raw = self._table.find("id", user_id)
        if raw is None:
            return None
        return self._to_domain(raw)

    def list_all(self) -> list[User]:
        return [self._to_domain(raw) for raw in self._table.all()]

    def save(self, user: User) -> None:
        self._table.upsert(
            "id",
            {"id": user.id, "name": user.name, "phone_number": user.phone_number},
        )

    @staticmethod
    def _to_domain(raw: dict) -> User:
        return User(id=raw["id"], name=raw["name"], phone_number=raw.get("phone_number"))
