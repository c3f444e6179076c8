"""Identity records shipped as side-tables alongside a dialogs page."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import PeerKind
from .peers import (
    InputPeerChannel,
    InputPeerChat,
    InputPeerSelf,
    InputPeerUser,
    PeerChannel,
    PeerChat,
    PeerUser,
)


class User(BaseModel):
    """A user account as seen by the caller."""

    kind: Literal["user"] = "user"
    id: int
    access_hash: int = 0
    is_self: bool = Field(False, alias="self")
    bot: bool = False
    first_name: str | None = None
    last_name: str | None = None
    username: str | None = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def key(self) -> tuple[PeerKind, int]:
        return (PeerKind.USER, self.id)

    @property
    def peer(self) -> PeerUser:
        return PeerUser(user_id=self.id)

    @property
    def title(self) -> str:
        """Display name, falling back to the username or the numeric id."""
        name = " ".join(part for part in (self.first_name, self.last_name) if part)
        return name or self.username or str(self.id)

    def input_peer(self) -> InputPeerSelf | InputPeerUser:
        if self.is_self:
            return InputPeerSelf()
        return InputPeerUser(user_id=self.id, access_hash=self.access_hash)


class Chat(BaseModel):
    """A basic group."""

    kind: Literal["chat"] = "chat"
    id: int
    title: str
    participants_count: int = 0
    deactivated: bool = False

    model_config = ConfigDict(frozen=True)

    @property
    def key(self) -> tuple[PeerKind, int]:
        return (PeerKind.CHAT, self.id)

    @property
    def peer(self) -> PeerChat:
        return PeerChat(chat_id=self.id)

    def input_peer(self) -> InputPeerChat:
        return InputPeerChat(chat_id=self.id)


class ChatForbidden(BaseModel):
    """A basic group the caller was removed from."""

    kind: Literal["chat_forbidden"] = "chat_forbidden"
    id: int
    title: str

    model_config = ConfigDict(frozen=True)

    @property
    def key(self) -> tuple[PeerKind, int]:
        return (PeerKind.CHAT, self.id)

    @property
    def peer(self) -> PeerChat:
        return PeerChat(chat_id=self.id)

    def input_peer(self) -> InputPeerChat:
        return InputPeerChat(chat_id=self.id)


class Channel(BaseModel):
    """A broadcast channel or a supergroup (``megagroup``)."""

    kind: Literal["channel"] = "channel"
    id: int
    access_hash: int = 0
    title: str
    username: str | None = None
    broadcast: bool = False
    megagroup: bool = False

    model_config = ConfigDict(frozen=True)

    @property
    def key(self) -> tuple[PeerKind, int]:
        return (PeerKind.CHANNEL, self.id)

    @property
    def peer(self) -> PeerChannel:
        return PeerChannel(channel_id=self.id)

    def input_peer(self) -> InputPeerChannel:
        return InputPeerChannel(channel_id=self.id, access_hash=self.access_hash)


class ChannelForbidden(BaseModel):
    """A channel the caller was banned from."""

    kind: Literal["channel_forbidden"] = "channel_forbidden"
    id: int
    access_hash: int
    title: str

    model_config = ConfigDict(frozen=True)

    @property
    def key(self) -> tuple[PeerKind, int]:
        return (PeerKind.CHANNEL, self.id)

    @property
    def peer(self) -> PeerChannel:
        return PeerChannel(channel_id=self.id)

    def input_peer(self) -> InputPeerChannel:
        return InputPeerChannel(channel_id=self.id, access_hash=self.access_hash)


AnyChat = Annotated[
    Chat | ChatForbidden | Channel | ChannelForbidden,
    Field(discriminator="kind"),
]

Entity = User | Chat | ChatForbidden | Channel | ChannelForbidden

AnyEntity = Annotated[Entity, Field(discriminator="kind")]
