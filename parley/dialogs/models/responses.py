"""Raw response payloads returned by the remote API.

A dialogs request answers with one of three shapes:

- ``Dialogs``: the complete list; nothing is left to fetch.
- ``DialogsSlice``: one page plus the server's count of all dialogs.
- ``DialogsNotModified``: the cached copy identified by the request hash is
  still valid. Only legal when a non-zero hash was sent.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from .dialog import RawDialog
from .entities import AnyChat, User
from .messages import AnyMessage


class Dialogs(BaseModel):
    kind: Literal["dialogs"] = "dialogs"
    dialogs: list[RawDialog] = Field(default_factory=list)
    messages: list[AnyMessage] = Field(default_factory=list)
    chats: list[AnyChat] = Field(default_factory=list)
    users: list[User] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class DialogsSlice(BaseModel):
    kind: Literal["slice"] = "slice"
    count: int = Field(..., ge=0, description="Server-side count of all dialogs")
    dialogs: list[RawDialog] = Field(default_factory=list)
    messages: list[AnyMessage] = Field(default_factory=list)
    chats: list[AnyChat] = Field(default_factory=list)
    users: list[User] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class DialogsNotModified(BaseModel):
    kind: Literal["not_modified"] = "not_modified"
    count: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)


DialogsResponse = Annotated[
    Dialogs | DialogsSlice | DialogsNotModified,
    Field(discriminator="kind"),
]


class AffectedHistory(BaseModel):
    """Result of a history deletion."""

    pts: int = 0
    pts_count: int = 0
    offset: int = 0

    model_config = ConfigDict(frozen=True)


class Updates(BaseModel):
    """Opaque update bundle returned by membership changes.

    Only its arrival matters to this library; the content is kept as-is.
    """

    model_config = ConfigDict(frozen=True, extra="allow")
