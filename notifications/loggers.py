"""
Event loggers.

Interface segregation: logging is its own small interface instead of an
extra method on Notifier, so channels are not forced to implement it.

Not to be confused with the standard `logging` module, which this
codebase uses for diagnostics. A Logger here records notification events
as part of the demo's visible output.
"""

from abc import ABC, abstractmethod
from typing import Optional, TextIO


class Logger(ABC):
    """Records a description of something that happened."""

    @abstractmethod
    def log(self, info: str) -> None:
        """Record an event."""
        raise NotImplementedError


class ConsoleLogger(Logger):
    """Writes events to the console (or any other text stream)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def log(self, info: str) -> None:
        print(f"Logging: {info}", file=self.stream)
