"""
The notification service.

Dependency inversion: NotificationService depends on the Notifier and
Logger abstractions, never on EmailNotifier or ConsoleLogger. The concrete
objects are injected through the constructor, so switching from email to
SMS means passing a different notifier, not editing this class.

Sending a notification is three steps, always in this order:
1. Format the message (MessageFormatter)
2. Send it (the injected Notifier)
3. Record the event (the injected Logger)
"""

import logging

from notifications.formatter import MessageFormatter
from notifications.loggers import Logger
from notifications.notifiers import Notifier

logger = logging.getLogger(__name__)


class NotificationService:
    """
    Formats, sends and records notifications.

    The notifier and logger are owned by the service for its whole
    lifetime. They are fixed at construction and cannot be reassigned.
    """

    def __init__(self, notifier: Notifier, logger: Logger):
        """
        Initialize the service.

        Args:
            notifier: Channel used to send messages
            logger: Where sent notifications are recorded

        Raises:
            TypeError: If either dependency is missing or of the wrong kind
        """
        if not isinstance(notifier, Notifier):
            raise TypeError(f"notifier must be a Notifier, got {type(notifier).__name__}")
        if not isinstance(logger, Logger):
            raise TypeError(f"logger must be a Logger, got {type(logger).__name__}")

        self._notifier = notifier
        self._logger = logger
        self._formatter = MessageFormatter()

    @property
    def notifier(self) -> Notifier:
        return self._notifier

    @property
    def logger(self) -> Logger:
        return self._logger

    def send_notification(self, recipient: str, content: str) -> None:
        """
        Send a notification to a recipient.

        Args:
            recipient: Name of the person being notified
            content: Body of the notification
        """
        message = self._formatter.format_message(recipient, content)
        self._notifier.send(message)
        self._logger.log(f"Notification sent to {recipient}")

        logger.info(
            f"Sent notification to {recipient} via {type(self._notifier).__name__}"
        )
