"""Unit of Work — one transaction across every repository.

Handlers open a unit of work with ``with uow:``, do their reads and
writes through ``uow.users``, ``uow.products``, ``uow.carts`` and
``uow.orders``, and finish with ``uow.commit()``. Leaving the block
without committing (including via an exception) rolls everything back,
so stock changes, order writes and cart deletions land together or not
at all.

Callbacks registered with ``on_commit`` run only after a successful
commit, once the transaction has ended and released whatever it held.
They are dropped on rollback.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable

from orderdesk.domain.repository.cart_repository import CartRepository
from orderdesk.domain.repository.order_repository import OrderRepository
from orderdesk.domain.repository.product_repository import ProductRepository
from orderdesk.domain.repository.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UnitOfWork(ABC):

    users: UserRepository
    products: ProductRepository
    carts: CartRepository
    orders: OrderRepository

    def __enter__(self) -> UnitOfWork:
        # _begin may block on a lock held by another transaction on this
        # instance; per-transaction state is only reset once it is ours.
        self._begin()
        self._committed = False
        self._post_commit: list[Callable[[], None]] = []
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            if self._committed:
                callbacks, self._post_commit = self._post_commit, []
            else:
                callbacks = []
                self.rollback()
        finally:
            self._end()
        # Hooks run with the lock released.
        for callback in callbacks:
            callback()

    def commit(self) -> None:
        self._commit()
        self._committed = True

    def rollback(self) -> None:
        if self._post_commit:
            logger.debug("Dropping %d post-commit callback(s)", len(self._post_commit))
        self._post_commit = []
        self._rollback()

    def on_commit(self, callback: Callable[[], None]) -> None:
        """Run *callback* once the current transaction has committed and ended."""
        self._post_commit.append(callback)

    # --- Hooks for concrete implementations -----------------------------------

    @abstractmethod
    def _begin(self) -> None:
        """Start a transaction and bind the repositories to it."""

    @abstractmethod
    def _commit(self) -> None:
        """Make every staged change durable."""

    @abstractmethod
    def _rollback(self) -> None:
        """Discard every staged change."""

    def _end(self) -> None:
        """Release resources held for the transaction."""
