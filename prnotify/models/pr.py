"""Pull request model (webhook pull_request object)."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from prnotify.models.user import User


class PullRequest(BaseModel):
    """Pull request as delivered in webhook payloads."""

    model_config = ConfigDict(extra="ignore")

    url: str = ""
    html_url: str
    title: str = ""
    user: User
    requested_reviewers: List[User] = Field(default_factory=list)

    @property
    def author(self) -> str:
        return self.user.login

    @property
    def reviewer_logins(self) -> List[str]:
        """Requested reviewer logins in payload order."""
        return [r.login for r in self.requested_reviewers]
