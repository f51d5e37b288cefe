"""
Notification channels.

Open/closed: new channels are added by subclassing Notifier, without
touching NotificationService or the existing channels.

Liskov substitution: every Notifier has the same `send(message)` signature
and accepts any text, so any channel works wherever a Notifier is expected
(see `notify_user`).

These channels do not deliver anything. They write a labelled line to an
output stream (stdout unless another stream is given), which keeps the
demo visible and lets tests capture the output.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional, TextIO

from notifications.models import ChannelType

logger = logging.getLogger(__name__)


class Notifier(ABC):
    """Sends a formatted message through some channel."""

    label: str = ""

    def __init__(self, stream: Optional[TextIO] = None):
        """
        Initialize the notifier.

        Args:
            stream: Where to write sent messages. None means the current stdout.
        """
        self.stream = stream

    @abstractmethod
    def send(self, message: str) -> None:
        """Send a message."""
        raise NotImplementedError

    def _write(self, message: str) -> None:
        print(f"{self.label}{message}", file=self.stream)


class EmailNotifier(Notifier):
    """Mock email channel."""

    label = "Sending Email: "

    def send(self, message: str) -> None:
        logger.debug(f"[EMAIL] {message}")
        self._write(message)


class SMSNotifier(Notifier):
    """Mock SMS channel."""

    label = "Sending SMS: "

    def send(self, message: str) -> None:
        logger.debug(f"[SMS] {message}")
        self._write(message)


def notify_user(notifier: Notifier, message: str) -> None:
    """Send a message through any notifier, whatever its channel."""
    notifier.send(message)


NOTIFIERS: dict[ChannelType, type[Notifier]] = {
    ChannelType.EMAIL: EmailNotifier,
    ChannelType.SMS: SMSNotifier,
}


def create_notifier(channel: str, stream: Optional[TextIO] = None) -> Notifier:
    """
    Build the notifier for a named channel.

    Args:
        channel: "email" or "sms"
        stream: Output stream handed to the notifier

    Returns:
        A fresh Notifier instance

    Raises:
        ValueError: If channel is not recognized
    """
    try:
        notifier_class = NOTIFIERS[ChannelType(channel)]
    except ValueError:
        raise ValueError(f"Unknown channel: {channel}") from None
    return notifier_class(stream=stream)
