"""Application service: Register User use case."""

from __future__ import annotations

from orderdesk.domain.exceptions import ValidationError
from orderdesk.domain.model.user import User
from orderdesk.domain.repository.unit_of_work import UnitOfWork


class RegisterUserHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, user_id: str, name: str, phone_number: str | None = None) -> User:
        user = User.register(user_id, name, phone_number)
        with self._uow as uow:
            if uow.users.get_by_id(user.id) is not None:
                raise ValidationError(f"User '{user.id}' already exists")
            uow.users.save(user)
            uow.commit()
        return user
