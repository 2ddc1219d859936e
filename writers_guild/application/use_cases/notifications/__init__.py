"""Use cases for creating and reading notifications."""

from .manage import (
    count_unread_notifications,
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
    mark_notifications_read,
)
from .notify import NotificationSink, notify, notify_many

__all__ = [
    "NotificationSink",
    "count_unread_notifications",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
    "mark_notifications_read",
    "notify",
    "notify_many",
]
