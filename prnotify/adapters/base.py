"""Abstract base for chat platform adapters."""

from abc import ABC, abstractmethod


class ChatPlatformError(Exception):
    """Raised when a chat platform API call fails."""

    pass


class ChatAdapter(ABC):
    """Abstract interface for chat platforms that deliver direct messages."""

    @abstractmethod
    def lookup_user_id(self, email: str) -> str:
        """Return the platform user ID for an email address."""
        ...

    @abstractmethod
    def post_direct_message(self, user_id: str, text: str) -> None:
        """Send a direct message to a user."""
        ...
