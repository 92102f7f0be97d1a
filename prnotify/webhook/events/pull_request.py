"""Event schemas for GitHub pull_request, pull_request_review,
pull_request_review_comment.

Bot processes:
- review requested (pull_request, action=review_requested)
- review submitted (pull_request_review, action=submitted; approved,
  changes_requested, commented)
- review comment created (pull_request_review_comment, action=created)
"""

from typing import ClassVar, Literal

from pydantic import BaseModel, ConfigDict

from prnotify.models import Comment, PullRequest, Review, User


class ReviewRequested(BaseModel):
    """Review requested (pull_request webhook, action=review_requested)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    event: ClassVar[str] = "pull_request"

    action: Literal["review_requested"]
    pull_request: PullRequest
    sender: User | None = None

    @property
    def requester(self) -> str:
        """Login of the user who requested the review."""
        if self.sender is not None:
            return self.sender.login
        return self.pull_request.author


class ReviewSubmitted(BaseModel):
    """Review submitted (pull_request_review webhook, action=submitted).

    Covers approval, changes_requested and commented.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    event: ClassVar[str] = "pull_request_review"

    action: Literal["submitted"]
    pull_request: PullRequest
    review: Review


class ReviewCommentCreated(BaseModel):
    """Line or file review comment created (pull_request_review_comment
    webhook, action=created)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    event: ClassVar[str] = "pull_request_review_comment"

    action: Literal["created"]
    pull_request: PullRequest
    comment: Comment


PullRequestEvent = ReviewRequested | ReviewSubmitted | ReviewCommentCreated
