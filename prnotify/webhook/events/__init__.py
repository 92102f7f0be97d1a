"""Webhook event schemas for GitHub payloads.

Processed events (anything else is ignored):

- pull_request, action=review_requested
- pull_request_review, action=submitted
- pull_request_review_comment, action=created
"""

import logging
from typing import Any, Dict, Type

from pydantic import BaseModel, ValidationError

from prnotify.webhook.events.pull_request import (
    PullRequestEvent,
    ReviewCommentCreated,
    ReviewRequested,
    ReviewSubmitted,
)

LOG = logging.getLogger("prnotify.webhook.events")

# (event name, action) -> schema
EVENT_SCHEMAS: Dict[tuple[str, str], Type[BaseModel]] = {
    (ReviewRequested.event, "review_requested"): ReviewRequested,
    (ReviewSubmitted.event, "submitted"): ReviewSubmitted,
    (ReviewCommentCreated.event, "created"): ReviewCommentCreated,
}


def parse_event(event: str, payload: Any) -> PullRequestEvent | None:
    """Build a typed event from a webhook delivery.

    Returns None for unknown event/action pairs and for payloads that do not
    match the schema.
    """
    if not isinstance(payload, dict):
        return None
    action = payload.get("action")
    if not isinstance(action, str):
        return None
    schema = EVENT_SCHEMAS.get((event, action))
    if schema is None:
        return None
    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        LOG.debug("Ignoring malformed %s payload: %s", event, e)
        return None


__all__ = [
    "EVENT_SCHEMAS",
    "PullRequestEvent",
    "ReviewCommentCreated",
    "ReviewRequested",
    "ReviewSubmitted",
    "parse_event",
]
