"""GitHub user model."""

from pydantic import BaseModel, ConfigDict


class User(BaseModel):
    """GitHub user; only the login is used."""

    model_config = ConfigDict(extra="ignore")

    login: str
