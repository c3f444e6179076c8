"""Peer references and conversation endpoints.

Two families live here:

- ``Peer`` values are what the server uses inside responses to point at a user,
  basic group or channel. They carry ids only and are resolved against the
  entity side-table of the same response.
- ``InputPeer`` values address a conversation endpoint in a request. They carry
  whatever credentials the server needs (access hashes, or the message through
  which the caller saw the peer).

Both are closed unions discriminated by the ``kind`` field.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import PeerKind


class PeerUser(BaseModel):
    """Reference to a user."""

    kind: Literal["user"] = "user"
    user_id: int

    model_config = ConfigDict(frozen=True)

    @property
    def key(self) -> tuple[PeerKind, int]:
        return (PeerKind.USER, self.user_id)


class PeerChat(BaseModel):
    """Reference to a basic group."""

    kind: Literal["chat"] = "chat"
    chat_id: int

    model_config = ConfigDict(frozen=True)

    @property
    def key(self) -> tuple[PeerKind, int]:
        return (PeerKind.CHAT, self.chat_id)


class PeerChannel(BaseModel):
    """Reference to a channel or supergroup."""

    kind: Literal["channel"] = "channel"
    channel_id: int

    model_config = ConfigDict(frozen=True)

    @property
    def key(self) -> tuple[PeerKind, int]:
        return (PeerKind.CHANNEL, self.channel_id)


Peer = Annotated[PeerUser | PeerChat | PeerChannel, Field(discriminator="kind")]


class InputPeerEmpty(BaseModel):
    """Placeholder endpoint; addresses nothing."""

    kind: Literal["empty"] = "empty"

    model_config = ConfigDict(frozen=True)


class InputPeerSelf(BaseModel):
    """The caller's own conversation (saved messages)."""

    kind: Literal["self"] = "self"

    model_config = ConfigDict(frozen=True)


class InputPeerUser(BaseModel):
    kind: Literal["user"] = "user"
    user_id: int
    access_hash: int

    model_config = ConfigDict(frozen=True)


class InputPeerUserFromMessage(BaseModel):
    """A user the caller only knows through a message seen in ``peer``."""

    kind: Literal["user_from_message"] = "user_from_message"
    peer: InputPeer
    msg_id: int
    user_id: int

    model_config = ConfigDict(frozen=True)


class InputPeerChat(BaseModel):
    kind: Literal["chat"] = "chat"
    chat_id: int

    model_config = ConfigDict(frozen=True)


class InputPeerChannel(BaseModel):
    kind: Literal["channel"] = "channel"
    channel_id: int
    access_hash: int

    model_config = ConfigDict(frozen=True)


class InputPeerChannelFromMessage(BaseModel):
    """A channel the caller only knows through a message seen in ``peer``."""

    kind: Literal["channel_from_message"] = "channel_from_message"
    peer: InputPeer
    msg_id: int
    channel_id: int

    model_config = ConfigDict(frozen=True)


InputPeer = Annotated[
    InputPeerEmpty
    | InputPeerSelf
    | InputPeerUser
    | InputPeerUserFromMessage
    | InputPeerChat
    | InputPeerChannel
    | InputPeerChannelFromMessage,
    Field(discriminator="kind"),
]


class InputChannel(BaseModel):
    kind: Literal["channel"] = "channel"
    channel_id: int
    access_hash: int

    model_config = ConfigDict(frozen=True)


class InputChannelFromMessage(BaseModel):
    kind: Literal["channel_from_message"] = "channel_from_message"
    peer: InputPeer
    msg_id: int
    channel_id: int

    model_config = ConfigDict(frozen=True)


AnyInputChannel = Annotated[InputChannel | InputChannelFromMessage, Field(discriminator="kind")]


class InputUserSelf(BaseModel):
    """The calling account, as the target of a membership change."""

    kind: Literal["self"] = "self"

    model_config = ConfigDict(frozen=True)


InputPeerUserFromMessage.model_rebuild()
InputPeerChannelFromMessage.model_rebuild()
InputChannelFromMessage.model_rebuild()
