"""
Notifications
Collects the transient success/error messages shown to the user.
"""

import logging
from typing import Awaitable, List, TypeVar

from ..models.form import Notification, NotificationKind

logger = logging.getLogger(__name__)

T = TypeVar("T")


class NotificationCenter:
    """
    In-memory notification channel.

    Keeps every notification in emission order so the caller can render
    them (or return them in an API response).
    """

    def __init__(self):
        self.notifications: List[Notification] = []

    def _emit(self, kind: NotificationKind, message: str) -> Notification:
        notification = Notification(kind=kind, message=message)
        self.notifications.append(notification)

        log = logger.warning if kind == NotificationKind.ERROR else logger.info
        log(f"Notification [{kind.value}]: {message}")
        return notification

    def loading(self, message: str) -> Notification:
        return self._emit(NotificationKind.LOADING, message)

    def success(self, message: str) -> Notification:
        return self._emit(NotificationKind.SUCCESS, message)

    def error(self, message: str) -> Notification:
        return self._emit(NotificationKind.ERROR, message)

    async def track(
        self, awaitable: Awaitable[T], loading: str, success: str, error: str
    ) -> T:
        """
        Await an operation while reporting its progress.

        Emits the loading message first, then the success or error
        message. Exceptions are re-raised after the error notification.
        """
        self.loading(loading)
        try:
            result = await awaitable
        except Exception:
            self.error(error)
            raise
        self.success(success)
        return result

    def messages(self, kind: NotificationKind = None) -> List[str]:
        """Messages emitted so far, optionally filtered by kind."""
        return [n.message for n in self.notifications if kind is None or n.kind == kind]

    def clear(self) -> None:
        self.notifications = []
