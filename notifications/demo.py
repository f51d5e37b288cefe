"""
Demonstration scenarios.

Two services are built with different notifiers (email, then SMS) and the
same kind of logger. NotificationService itself never changes; only the
notifier handed to it does.
"""

import io
import logging
from typing import Optional, TextIO

from notifications.formatter import MessageFormatter
from notifications.loggers import ConsoleLogger
from notifications.models import ChannelType, NotificationRequest, NotificationResponse, DemoResult
from notifications.notifiers import create_notifier
from notifications.service import NotificationService

logger = logging.getLogger(__name__)


SCENARIOS: list[NotificationRequest] = [
    NotificationRequest(
        channel=ChannelType.EMAIL,
        recipient="John",
        content="Your order has been shipped!",
    ),
    NotificationRequest(
        channel=ChannelType.SMS,
        recipient="Alice",
        content="Your appointment is confirmed!",
    ),
]


def build_service(channel: str, stream: Optional[TextIO] = None) -> NotificationService:
    """Wire a NotificationService for a channel, writing to `stream`."""
    return NotificationService(
        notifier=create_notifier(channel, stream=stream),
        logger=ConsoleLogger(stream=stream),
    )


def run_scenario(request: NotificationRequest, stream: Optional[TextIO] = None) -> None:
    """Send one notification through a freshly built service."""
    service = build_service(request.channel, stream=stream)
    service.send_notification(request.recipient, request.content)


def capture_notification(request: NotificationRequest) -> NotificationResponse:
    """Send one notification and return what it wrote instead of printing it."""
    buffer = io.StringIO()
    run_scenario(request, stream=buffer)
    return NotificationResponse(
        channel=request.channel,
        recipient=request.recipient,
        message=MessageFormatter().format_message(request.recipient, request.content),
        output=buffer.getvalue().splitlines(),
    )


def run_demo(stream: Optional[TextIO] = None) -> None:
    """Run every scenario, printing to `stream` (stdout by default)."""
    logger.debug(f"Running {len(SCENARIOS)} demo scenarios")
    for request in SCENARIOS:
        run_scenario(request, stream=stream)


def capture_demo() -> DemoResult:
    """Run every scenario and collect the output of each."""
    return DemoResult(scenarios=[capture_notification(request) for request in SCENARIOS])
