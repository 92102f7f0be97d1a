"""Line or file comment on a pull request."""

from pydantic import BaseModel, ConfigDict, field_validator

from prnotify.models.user import User


class Comment(BaseModel):
    """Review comment on a pull request."""

    model_config = ConfigDict(extra="ignore")

    body: str = ""
    html_url: str = ""
    user: User

    @field_validator("body", mode="before")
    @classmethod
    def _none_body(cls, v: object) -> object:
        return "" if v is None else v
