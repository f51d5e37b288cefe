"""
Shared pytest fixtures for the SOLID notification demo tests.

Notifiers and loggers write to an in-memory stream so tests can read
back exactly what was printed.
"""

import io

import pytest

from notifications.loggers import ConsoleLogger
from notifications.notifiers import EmailNotifier, SMSNotifier
from notifications.service import NotificationService


@pytest.fixture
def stream() -> io.StringIO:
    """Fresh output stream for each test."""
    return io.StringIO()


@pytest.fixture
def email_notifier(stream: io.StringIO) -> EmailNotifier:
    """EmailNotifier writing to the test stream."""
    return EmailNotifier(stream=stream)


@pytest.fixture
def sms_notifier(stream: io.StringIO) -> SMSNotifier:
    """SMSNotifier writing to the test stream."""
    return SMSNotifier(stream=stream)


@pytest.fixture
def console_logger(stream: io.StringIO) -> ConsoleLogger:
    """ConsoleLogger writing to the test stream."""
    return ConsoleLogger(stream=stream)


@pytest.fixture
def email_service(email_notifier, console_logger) -> NotificationService:
    """NotificationService wired with the email notifier."""
    return NotificationService(email_notifier, console_logger)


@pytest.fixture
def sms_service(sms_notifier, console_logger) -> NotificationService:
    """NotificationService wired with the SMS notifier."""
    return NotificationService(sms_notifier, console_logger)