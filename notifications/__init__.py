"""
SOLID notification service demo.

This package walks through the five SOLID principles with a toy
notification service:
- MessageFormatter: single responsibility (formatting only)
- Notifier / EmailNotifier / SMSNotifier: open/closed and Liskov substitution
- Logger / ConsoleLogger: interface segregation
- NotificationService: dependency inversion (dependencies are injected)
"""

from notifications.formatter import MessageFormatter
from notifications.notifiers import (
    Notifier,
    EmailNotifier,
    SMSNotifier,
    notify_user,
    create_notifier,
)
from notifications.loggers import Logger, ConsoleLogger
from notifications.models import ChannelType, NotificationRequest, NotificationResponse
from notifications.service import NotificationService

__all__ = [
    "MessageFormatter",
    "Notifier",
    "EmailNotifier",
    "SMSNotifier",
    "notify_user",
    "create_notifier",
    "Logger",
    "ConsoleLogger",
    "ChannelType",
    "NotificationRequest",
    "NotificationResponse",
    "NotificationService",
]
