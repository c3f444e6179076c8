"""Message variants referenced by a dialog's ``top_message``."""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from .peers import Peer


class Message(BaseModel):
    """A delivered message."""

    kind: Literal["message"] = "message"
    id: int
    date: int = Field(..., ge=0, description="Unix timestamp in seconds")
    peer_id: Peer
    message: str = ""
    out: bool = False

    model_config = ConfigDict(frozen=True)


class MessageService(BaseModel):
    """A service message (member joined, title changed, ...)."""

    kind: Literal["service"] = "service"
    id: int
    date: int = Field(..., ge=0, description="Unix timestamp in seconds")
    peer_id: Peer
    action: dict[str, Any] = Field(default_factory=dict)
    out: bool = False

    model_config = ConfigDict(frozen=True)


class MessageEmpty(BaseModel):
    """A deleted or otherwise unavailable message. Carries no date."""

    kind: Literal["empty"] = "empty"
    id: int
    peer_id: Peer | None = None

    model_config = ConfigDict(frozen=True)


AnyMessage = Annotated[Message | MessageService | MessageEmpty, Field(discriminator="kind")]
