"""
Message formatting for notifications.

Single responsibility: the formatter only builds the text of a message.
It knows nothing about how the message is sent or logged.
"""


class MessageFormatter:
    """Builds the greeting sent to a recipient."""

    TEMPLATE = "Dear {recipient}, {content}"

    def format_message(self, recipient: str, content: str) -> str:
        """
        Format a notification message.

        Args:
            recipient: Name of the person being notified
            content: Body of the notification

        Returns:
            The greeting, e.g. "Dear John, Your order has been shipped!"
        """
        return self.TEMPLATE.format(recipient=recipient, content=content)
