"""
Request and response models for the notification demo.

These Pydantic models define the contract used by the CLI and the HTTP
front end. The core classes (formatter, notifiers, loggers, service) take
plain strings and do not depend on them.
"""

from enum import Enum
from pydantic import BaseModel, Field


class ChannelType(str, Enum):
    """Supported notification channels."""
    EMAIL = "email"
    SMS = "sms"


class NotificationRequest(BaseModel):
    """A single notification to send."""
    channel: ChannelType = Field(
        default=ChannelType.EMAIL,
        description="Which notifier to inject into the service"
    )
    recipient: str = Field(..., description="Name of the person being notified")
    content: str = Field(..., description="Body of the notification")


class NotificationResponse(BaseModel):
    """
    What a notification produced.

    `output` holds the lines written by the notifier and the logger,
    in the order they were written.
    """
    channel: ChannelType
    recipient: str
    message: str
    output: list[str] = Field(default_factory=list)


class DemoResult(BaseModel):
    """Result of running every demo scenario."""
    scenarios: list[NotificationResponse]
