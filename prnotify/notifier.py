"""Deliver message batches to Slack direct messages.

Each message is addressed by GitHub login; the login is mapped to a Slack
email or member ID through the ``users`` config section. Unmapped logins and
failed posts are logged and skipped, the rest of the batch is still sent.
"""

import logging
import re
from typing import Dict, List

from prnotify.adapters import ChatAdapter, ChatPlatformError, SlackAdapter
from prnotify.config import AppConfig
from prnotify.models import Message

LOG = logging.getLogger("prnotify.notifier")

SLACK_MEMBER_ID = re.compile(r"^[UW][A-Z0-9]{2,}$")


class SlackNotifier:
    """Send messages through a chat adapter using the login->contact map."""

    def __init__(self, adapter: ChatAdapter, users: Dict[str, str]) -> None:
        self._adapter = adapter
        self._users = {login.lower(): contact for login, contact in users.items()}
        self._user_ids: Dict[str, str] = {}

    @classmethod
    def from_config(cls, config: AppConfig) -> "SlackNotifier":
        token = config.slack_token_resolved
        if not token:
            LOG.warning("No Slack token configured; messages will fail to send")
        adapter = SlackAdapter(token=token or "", api_url=config.slack.api_url)
        return cls(adapter, config.users)

    def resolve_user_id(self, login: str) -> str | None:
        """Return Slack user ID for a GitHub login, or None when unmapped."""
        contact = self._users.get(login.lower())
        if not contact:
            return None
        if SLACK_MEMBER_ID.match(contact):
            return contact
        if contact not in self._user_ids:
            self._user_ids[contact] = self._adapter.lookup_user_id(contact)
        return self._user_ids[contact]

    def send(self, messages: List[Message]) -> int:
        """Send messages in order. Returns the number delivered."""
        sent = 0
        for message in messages:
            try:
                user_id = self.resolve_user_id(message.recipient)
                if user_id is None:
                    LOG.warning("No Slack contact for GitHub user %s; skipping", message.recipient)
                    continue
                self._adapter.post_direct_message(user_id, message.body)
            except ChatPlatformError as e:
                LOG.warning("Failed to notify %s: %s", message.recipient, e)
                continue
            sent += 1
        LOG.info("Sent %d of %d message(s)", sent, len(messages))
        return sent
