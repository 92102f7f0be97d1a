"""Outbound notification message."""

from pydantic import BaseModel, ConfigDict


class Message(BaseModel):
    """Direct message for one recipient, addressed by GitHub login."""

    model_config = ConfigDict(frozen=True)

    recipient: str
    body: str
