"""Remote call definitions.

Each request names its remote ``METHOD`` and the ``RESPONSE`` type its result
decodes into. Requests are plain mutable models: ``GetDialogs`` in particular
is the cursor state the dialog iterator updates between pages.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from .peers import AnyInputChannel, InputPeer, InputPeerEmpty, InputUserSelf
from .responses import AffectedHistory, DialogsResponse, Updates


class Request(BaseModel):
    """Base class for remote calls."""

    METHOD: ClassVar[str]
    RESPONSE: ClassVar[Any]

    model_config = ConfigDict(validate_assignment=True)


class GetDialogs(Request):
    """Fetch one page of the caller's dialogs.

    Offsets point just past the last dialog of the previous page: its message
    date and id, and the peer it belongs to. ``hash`` stays 0 so the server
    never answers with a not-modified shortcut.
    """

    METHOD: ClassVar[str] = "messages.getDialogs"
    RESPONSE: ClassVar[Any] = DialogsResponse

    exclude_pinned: bool = False
    folder_id: int | None = None
    offset_date: int = 0
    offset_id: int = 0
    offset_peer: InputPeer = Field(default_factory=InputPeerEmpty)
    limit: int = Field(0, ge=0)
    hash: int = 0


class DeleteHistory(Request):
    METHOD: ClassVar[str] = "messages.deleteHistory"
    RESPONSE: ClassVar[Any] = AffectedHistory

    just_clear: bool = False
    revoke: bool = False
    peer: InputPeer
    max_id: int = 0


class DeleteChatUser(Request):
    METHOD: ClassVar[str] = "messages.deleteChatUser"
    RESPONSE: ClassVar[Any] = Updates

    chat_id: int
    user_id: InputUserSelf = Field(default_factory=InputUserSelf)


class LeaveChannel(Request):
    METHOD: ClassVar[str] = "channels.leaveChannel"
    RESPONSE: ClassVar[Any] = Updates

    channel: AnyInputChannel
