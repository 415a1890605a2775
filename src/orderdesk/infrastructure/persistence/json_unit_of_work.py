"""JSON-file-backed UnitOfWork.

Each data directory holds one file per store (users, products, carts,
orders). A transaction takes the directory's lock, loads every file
fresh, and stages all changes in memory. Commit writes every changed
table to a temporary file first; only when all of them are on disk are
they swapped into place with ``os.replace``. A failure while writing
leaves every original file untouched. Each swap is atomic per file, but
the swaps are not atomic as a group: a crash between two of them can
leave one store committed and another not. Rollback just drops the
staged tables.

The lock serialises transactions on the same directory within this
process, which is what keeps two concurrent checkouts from both
passing a stock check against the same balance.
"""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path

from orderdesk.domain.repository.unit_of_work import UnitOfWork
from orderdesk.infrastructure.persistence.json_cart_repository import JsonCartRepository
from orderdesk.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from orderdesk.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from orderdesk.infrastructure.persistence.json_table import JsonTable
from orderdesk.infrastructure.persistence.json_user_repository import JsonUserRepository

logger = logging.getLogger(__name__)

_TABLES = ("users", "products", "carts", "orders")

_locks: dict[Path, threading.RLock] = {}
_locks_guard = threading.Lock()


def _lock_for(data_dir: Path) -> threading.RLock:
    key = data_dir.resolve()
    with _locks_guard:
        if key not in _locks:
            _locks[key] = threading.RLock()
        return _locks[key]


class JsonUnitOfWork(UnitOfWork):

    def __init__(self, data_dir: Path) -> None:
        self._data_dir = data_dir
        self._lock = _lock_for(data_dir)
        self._tables: dict[str, JsonTable] = {}

    def _begin(self) -> None:
        self._lock.acquire()
        try:
            self._tables = {
                name: JsonTable(self._data_dir / f"{name}.json") for name in _TABLES
            }
        except Exception:
            self._lock.release()
            raise
        self.users = JsonUserRepository(self._tables["users"])
        self.products = JsonProductRepository(self._tables["products"])
        self.carts = JsonCartRepository(self._tables["carts"])
        self.orders = JsonOrderRepository(self._tables["orders"])

    def _commit(self) -> None:
        changed = [table for table in self._tables.values() if table.dirty]
        staged: list[tuple[Path, Path]] = []
        try:
            for table in changed:
                staged.append((table.write_temp(), table.file_path))
        except OSError:
            for temp_path, _ in staged:
                temp_path.unlink(missing_ok=True)
            raise
        for temp_path, file_path in staged:
            os.replace(temp_path, file_path)
        for table in changed:
            table.dirty = False
        logger.debug("Committed %d table(s) in %s", len(changed), self._data_dir)

    def _rollback(self) -> None:
        self._tables = {}

    def _end(self) -> None:
        self._lock.release()
