"""Notifier port — outbound, best-effort event broadcasts.

Implementations may raise NotificationFailure (or anything else);
publishers must treat every failure as non-fatal.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

ORDER_CREATED = "NewOrderCreated"
ORDER_STATUS_UPDATED = "OrderStatusUpdated"


class Notifier(ABC):

    @abstractmethod
    def broadcast(self, event_name: str, payload: dict[str, Any]) -> None:
        """Send *event_name* with *payload* to every listener."""
