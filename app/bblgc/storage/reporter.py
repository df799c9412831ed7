"""Sinks for warnings about files preserved during cleanup."""

from abc import ABC, abstractmethod

from bblgc.utils.formatting import print_warning


class Reporter(ABC):
    """Receives human-readable warnings from the garbage collector."""

    @abstractmethod
    def report(self, message: str) -> None:
        """Emit a single warning message."""


class ConsoleReporter(Reporter):
    """Prints warnings to stderr through the shared rich console."""

    def report(self, message: str) -> None:
        print_warning(message)


class RecordingReporter(Reporter):
    """Keeps every message in memory, in the order received.

    Attributes:
        messages: Messages reported so far.
    """

    def __init__(self) -> None:
        self.messages: list[str] = []

    def report(self, message: str) -> None:
        self.messages.append(message)
