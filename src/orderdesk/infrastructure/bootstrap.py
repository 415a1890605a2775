"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from orderdesk.domain.service.notifier import Notifier
from orderdesk.infrastructure.notifications.background_notifier import (
    BackgroundNotifier,
)
from orderdesk.infrastructure.notifications.logging_notifier import LoggingNotifier
from orderdesk.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork

DATA_DIR_ENV = "ORDERDESK_DATA_DIR"
BACKGROUND_NOTIFY_ENV = "ORDERDESK_BACKGROUND_NOTIFY"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass
class AppConfig:
    """Runtime settings resolved from CLI options and the environment."""

    data_dir: Path = DEFAULT_DATA_DIR
    notifier: Notifier = field(default_factory=LoggingNotifier)

    def close(self) -> None:
        if isinstance(self.notifier, BackgroundNotifier):
            self.notifier.shutdown(wait=True)


def build_config(data_dir: Path | None = None, background_notify: bool = True) -> AppConfig:
    """Resolve runtime settings.

    Notifications go through a single background worker unless
    *background_notify* is off.
    """
    notifier: Notifier = LoggingNotifier()
    if background_notify:
        notifier = BackgroundNotifier(notifier)
    return AppConfig(data_dir=data_dir or DEFAULT_DATA_DIR, notifier=notifier)


def unit_of_work(config: AppConfig) -> JsonUnitOfWork:
    return JsonUnitOfWork(config.data_dir)
