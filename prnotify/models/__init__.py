"""Data models for pull requests, reviews, comments, messages (Pydantic)."""

from prnotify.models.comment import Comment
from prnotify.models.message import Message
from prnotify.models.pr import PullRequest
from prnotify.models.review import Review
from prnotify.models.user import User

__all__ = ["Comment", "Message", "PullRequest", "Review", "User"]
