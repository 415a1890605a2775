"""Best-effort publishing of order events.

A broadcast happens after the owning transaction has committed. Whatever
goes wrong while sending it is logged here and goes no further.
"""

from __future__ import annotations

import logging
from typing import Any

from orderdesk.domain.exceptions import NotificationFailure
from orderdesk.domain.service.notifier import Notifier

logger = logging.getLogger(__name__)


def publish(notifier: Notifier, event_name: str, payload: dict[str, Any]) -> bool:
    """Broadcast an event, returning False instead of raising on failure."""
    try:
        notifier.broadcast(event_name, payload)
    except NotificationFailure as exc:
        logger.warning("Notification %s not delivered: %s", event_name, exc)
        return False
    except Exception:
        logger.exception("Notification %s failed unexpectedly", event_name)
        return False
    return True
