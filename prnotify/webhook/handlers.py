"""Handle GitHub webhook events (review requested, review submitted,
review comment created).

Classifies the delivery and hands the resulting message batch to the
injected send callable.
"""

import logging
from typing import Any, Callable, Dict, List

from prnotify.models import Message
from prnotify.webhook.classifier import classify

SendMessages = Callable[[List[Message]], Any]


def handle_github_event(
    event: str,
    payload: Dict[str, Any],
    send: SendMessages,
    log: logging.Logger | None = None,
) -> List[Message]:
    """Handle a GitHub webhook event.

    Supported events:
    - pull_request (action=review_requested): notify each requested reviewer.
    - pull_request_review (action=submitted): notify the PR author.
    - pull_request_review_comment (action=created): notify the PR author and
      requested reviewers.

    ``send`` is called once with the whole batch, and not at all when there
    is nothing to send. Returns the batch.
    """
    logger = log or logging.getLogger("prnotify.webhook.handlers")
    messages = classify(event, payload)
    if not messages:
        action = payload.get("action") if isinstance(payload, dict) else None
        logger.debug("Ignoring event %s (action=%s)", event, action)
        return messages
    logger.info(
        "Event %s (action=%s): %d message(s) for %s",
        event,
        payload.get("action"),
        len(messages),
        ", ".join(m.recipient for m in messages),
    )
    send(messages)
    return messages
