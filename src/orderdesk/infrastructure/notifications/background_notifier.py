"""Notifier decorator that hands broadcasts to a worker thread.

``broadcast`` returns immediately; the wrapped notifier runs on a
single background thread, so events keep their order and a slow
transport never holds up a request. Failures are logged on the worker
and never reach the caller.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any

from orderdesk.domain.service.notifier import Notifier

logger = logging.getLogger(__name__)


class BackgroundNotifier(Notifier):

    def __init__(self, inner: Notifier) -> None:
        self._inner = inner
        self._executor = ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="orderdesk-notify"
        )

    def broadcast(self, event_name: str, payload: dict[str, Any]) -> None:
        future = self._executor.submit(self._inner.broadcast, event_name, dict(payload))
        future.add_done_callback(lambda f: self._report(event_name, f))

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting events, optionally waiting for queued ones."""
        self._executor.shutdown(wait=wait)

    @staticmethod
    def _report(event_name: str, future: Future) -> None:
        exc = future.exception()
        if exc is not None:
            logger.warning("Background notification %s failed: %s", event_name, exc)
