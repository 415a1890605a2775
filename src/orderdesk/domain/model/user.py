"""User — the owner of carts and orders."""

from __future__ import annotations

from dataclasses import dataclass

from orderdesk.domain.exceptions import ValidationError


@dataclass
class User:

    id: str
    name: str
    phone_number: str | None = None

    @staticmethod
    def register(user_id: str, name: str, phone_number: str | None = None) -> User:
        if not user_id or not user_id.strip():
            raise ValidationError("User ID is required")
        if not name or not name.strip():
            raise ValidationError("User name is required")
        phone = phone_number.strip() if phone_number else None
        return User(id=user_id.strip(), name=name.strip(), phone_number=phone or None)
