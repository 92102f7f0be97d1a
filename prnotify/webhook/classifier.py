"""Classify pull request events and compose notification messages.

Pure functions: no I/O, never raise. Unrecognized events produce an empty
batch.
"""

from typing import Any, Iterable, List, assert_never

from prnotify.models import Message, PullRequest
from prnotify.webhook.events import (
    PullRequestEvent,
    ReviewCommentCreated,
    ReviewRequested,
    ReviewSubmitted,
    parse_event,
)

# Review state -> verb phrase placed before the PR link
REVIEW_VERBS = {
    "APPROVED": "approved",
    "CHANGES_REQUESTED": "requested changes on",
    "COMMENTED": "commented on",
}


def pr_link(pr: PullRequest) -> str:
    """Slack mrkdwn link to the PR, titled when the title is known."""
    if pr.title:
        return f"<{pr.html_url}|{pr.title}>"
    return f"<{pr.html_url}>"


def _with_text(line: str, text: str) -> str:
    return f"{line}: {text}" if text else line


def _messages(recipients: Iterable[str], body: str, actor: str) -> List[Message]:
    return [Message(recipient=login, body=body) for login in recipients if login != actor]


def _review_requested(event: ReviewRequested) -> List[Message]:
    pr = event.pull_request
    body = f"{pr.author} requested your review on {pr_link(pr)}"
    return _messages(pr.reviewer_logins, body, event.requester)


def _review_submitted(event: ReviewSubmitted) -> List[Message]:
    review = event.review
    verb = REVIEW_VERBS.get(review.state.upper())
    if verb is None:
        return []
    pr = event.pull_request
    body = _with_text(f"{review.user.login} {verb} {pr_link(pr)}", review.body)
    return _messages([pr.author], body, review.user.login)


def _review_comment_created(event: ReviewCommentCreated) -> List[Message]:
    comment = event.comment
    pr = event.pull_request
    # Author first, then reviewers; first occurrence wins
    recipients = list(dict.fromkeys([pr.author, *pr.reviewer_logins]))
    body = _with_text(f"{comment.user.login} commented on {pr_link(pr)}", comment.body)
    return _messages(recipients, body, comment.user.login)


def compose(event: PullRequestEvent) -> List[Message]:
    """Derive recipients and message bodies for a recognized event."""
    if isinstance(event, ReviewRequested):
        return _review_requested(event)
    if isinstance(event, ReviewSubmitted):
        return _review_submitted(event)
    if isinstance(event, ReviewCommentCreated):
        return _review_comment_created(event)
    assert_never(event)


def classify(event: str, payload: Any) -> List[Message]:
    """Return the ordered message batch for a webhook delivery.

    ``event`` is the X-GitHub-Event name. Unknown events, unknown actions and
    malformed payloads yield an empty list.
    """
    parsed = parse_event(event, payload)
    if parsed is None:
        return []
    return compose(parsed)
