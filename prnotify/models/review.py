"""Pull request review model."""

from pydantic import BaseModel, ConfigDict, field_validator

from prnotify.models.user import User


class Review(BaseModel):
    """Review submitted on a pull request."""

    model_config = ConfigDict(extra="ignore")

    body: str = ""
    html_url: str = ""
    state: str
    user: User

    @field_validator("body", mode="before")
    @classmethod
    def _none_body(cls, v: object) -> object:
        # GitHub sends null for reviews without a summary
        return "" if v is None else v
