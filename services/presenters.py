"""
Presenters - Where transcripts and notifications end up.

A presenter receives either the transcript to display as editable text or a
short transient notification ("No text found", "Picture not taken!").
"""
from abc import ABC, abstractmethod
from typing import List, Optional


class BasePresenter(ABC):
    """
    Abstract base class for presenters.

    Implementations decide how text and notifications are shown.
    """

    @abstractmethod
    def show_text(self, text: str) -> None:
        """
        Display a transcript.

        Args:
            text: Transcript, trailing whitespace included
        """
        pass

    @abstractmethod
    def notify(self, message: str) -> None:
        """
        Display a short transient notification.

        Args:
            message: Notification text
        """
        pass


class ConsolePresenter(BasePresenter):
    """Prints transcripts and notifications to a stream (stdout by default)."""

    def __init__(self, stream=None, show_separator: bool = True):
        self.stream = stream
        self.show_separator = show_separator

    def show_text(self, text: str) -> None:
        if self.show_separator:
            print("=" * 50, file=self.stream)
        print(text, file=self.stream)
        if self.show_separator:
            print("=" * 50, file=self.stream)

    def notify(self, message: str) -> None:
        print(f"⚠️  {message}", file=self.stream)


class RecordingPresenter(BasePresenter):
    """Keeps everything it was asked to show."""

    def __init__(self):
        self.texts: List[str] = []
        self.notifications: List[str] = []

    def show_text(self, text: str) -> None:
        self.texts.append(text)

    def notify(self, message: str) -> None:
        self.notifications.append(message)

    @property
    def last_text(self) -> Optional[str]:
        return self.texts[-1] if self.texts else None

    @property
    def last_notification(self) -> Optional[str]:
        return self.notifications[-1] if self.notifications else None
