"""Application service: Show Stock use case (query)."""

from __future__ import annotations

from dataclasses import dataclass

from orderdesk.domain.repository.unit_of_work import UnitOfWork


@dataclass(frozen=True)
class StockLineDTO:
    product_id: str
    product_name: str
    price: str
    stock: int


class ShowStockHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[StockLineDTO]:
        with self._uow as uow:
            products = uow.products.list_all()
        return [
            StockLineDTO(
                product_id=p.id,
                product_name=p.name,
                price=str(p.price),
                stock=p.stock,
            )
            for p in products
        ]
