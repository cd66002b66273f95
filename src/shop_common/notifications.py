"""Transient notification channel.

A notification is addressed by a dedupe key: a newer notification with the
same key replaces the older one, so a "Creating order..." info message is
superseded by its success or error outcome rather than stacking up.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol

from src.shop_common.datetime_utils import utc_now
from src.shop_common.enums import NotificationKind

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    NotificationKind.INFO: logging.INFO,
    NotificationKind.SUCCESS: logging.INFO,
    NotificationKind.ERROR: logging.WARNING,
}


@dataclass(frozen=True)
class Notification:
    kind: NotificationKind
    message: str
    dedupe_key: str | None
    created_at: datetime = field(default_factory=utc_now)


class Notifier(Protocol):
    def notify(
        self, kind: NotificationKind, message: str, dedupe_key: str | None = None
    ) -> None: ...


class LogNotifier:
    """Notifier that logs every notification and keeps the latest one per key."""

    def __init__(self) -> None:
        self._active: dict[str, Notification] = {}
        self.history: list[Notification] = []

    def notify(
        self, kind: NotificationKind, message: str, dedupe_key: str | None = None
    ) -> None:
        note = Notification(kind=kind, message=message, dedupe_key=dedupe_key)
        self.history.append(note)
        if dedupe_key is not None:
            replaced = self._active.get(dedupe_key)
            if replaced is not None:
                logger.debug("Notification %s replaces %s", dedupe_key, replaced.kind.value)
            self._active[dedupe_key] = note
        logger.log(_LOG_LEVELS[kind], "[%s] %s", kind.value, message)

    def current(self, dedupe_key: str) -> Notification | None:
        return self._active.get(dedupe_key)
