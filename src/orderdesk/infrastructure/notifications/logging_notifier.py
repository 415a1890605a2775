"""Notifier that writes every broadcast to the application log.

Stands in for a push transport: operators following the log see the
same events a live dashboard would.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from orderdesk.domain.exceptions import NotificationFailure
from orderdesk.domain.service.notifier import Notifier

logger = logging.getLogger("orderdesk.events")


class LoggingNotifier(Notifier):

    def broadcast(self, event_name: str, payload: dict[str, Any]) -> None:
        try:
            body = json.dumps(payload, sort_keys=True)
        except (TypeError, ValueError) as exc:
            raise NotificationFailure(f"Payload for {event_name} is not serializable") from exc
        logger.info("%s %s", event_name, body)
