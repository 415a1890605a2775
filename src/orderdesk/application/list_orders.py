"""Application service: List Orders use case (query).

Lists every order, or only those placed by one user. The user is not
required to exist; an unknown user simply has no orders.
"""

from __future__ import annotations

from orderdesk.application.dto import OrderDTO, order_to_dto
from orderdesk.domain.repository.unit_of_work import UnitOfWork


class ListOrdersHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, user_id: str | None = None) -> list[OrderDTO]:
        with self._uow as uow:
            if user_id is None:
                orders = uow.orders.list_all()
            else:
                orders = uow.orders.list_by_user(user_id)
        return [order_to_dto(order) for order in sorted(orders, key=lambda o: o.id or 0)]
