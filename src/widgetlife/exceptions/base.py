"""Root of the widgetlife exception hierarchy.

Every error raised on purpose by widgetlife derives from `WidgetLifeError`.
Each one carries two renderings: `user_message` for feedback lines, CLI output
and TUI notifications, and `technical_message` for the log file.
"""

from typing import Optional


class WidgetLifeError(Exception):
    """
    Base class for widgetlife errors.

    ``str(error)`` is the user message, which is what the orchestrator writes
    to its feedback sink and hands to ``on_complete``.

    Attributes:
        user_message: Short, display-ready description
        technical_message: Log-oriented description (falls back to user_message)
        recoverable: False when retrying cannot help
        recovery_hint: What the user can do about it, if anything
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.user_message!r})"

    def get_full_message(self) -> str:
        """User message followed by the recovery hint, when there is one."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
