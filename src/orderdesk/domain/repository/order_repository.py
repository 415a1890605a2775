"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderdesk.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order with its lines loaded, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order."""

    @abstractmethod
    def list_by_user(self, user_id: str) -> list[Order]:
        """Return the orders placed by *user_id*."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order. New orders receive their ID here."""

    @abstractmethod
    def remove(self, order_id: int) -> None:
        """Delete an order and its lines."""
