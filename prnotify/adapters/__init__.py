"""Chat platform adapters (base and implementations)."""

from prnotify.adapters.base import ChatAdapter, ChatPlatformError
from prnotify.adapters.slack import SlackAdapter

__all__ = ["ChatAdapter", "ChatPlatformError", "SlackAdapter"]
