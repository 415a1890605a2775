"""Application service: List Users use case (query)."""

from __future__ import annotations

from orderdesk.domain.model.user import User
from orderdesk.domain.repository.unit_of_work import UnitOfWork


class ListUsersHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[User]:
        with self._uow as uow:
            users = uow.users.list_all()
        return sorted(users, key=lambda u: u.id)
