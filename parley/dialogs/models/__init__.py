"""Data models for the dialogs API.

Architecture:
    This module exports the Pydantic v2 models used throughout the library.
    Response-side models are immutable (frozen=True); request models stay
    mutable because ``GetDialogs`` doubles as the iterator's cursor state.

Design Decisions:
    - Closed unions: every polymorphic value (peer, endpoint, message, entity,
      response shape) is a union discriminated by a ``kind`` literal, so an
      unknown variant fails validation instead of slipping through
    - Side-table decoding: ``Dialog`` is built from a ``RawDialog`` and the
      page's entities and messages, and is self-contained afterwards

Model Categories:
    - References: Peer*, InputPeer*, InputChannel*, InputUserSelf
    - Entities: User, Chat, ChatForbidden, Channel, ChannelForbidden
    - Messages: Message, MessageService, MessageEmpty
    - Dialogs: RawDialog, Dialog
    - Responses: Dialogs, DialogsSlice, DialogsNotModified, AffectedHistory, Updates
    - Requests: GetDialogs, DeleteHistory, DeleteChatUser, LeaveChannel
"""

from .dialog import Dialog, RawDialog
from .entities import (
    AnyChat,
    AnyEntity,
    Channel,
    ChannelForbidden,
    Chat,
    ChatForbidden,
    Entity,
    User,
)
from .functions import DeleteChatUser, DeleteHistory, GetDialogs, LeaveChannel, Request
from .messages import AnyMessage, Message, MessageEmpty, MessageService
from .peers import (
    AnyInputChannel,
    InputChannel,
    InputChannelFromMessage,
    InputPeer,
    InputPeerChannel,
    InputPeerChannelFromMessage,
    InputPeerChat,
    InputPeerEmpty,
    InputPeerSelf,
    InputPeerUser,
    InputPeerUserFromMessage,
    InputUserSelf,
    Peer,
    PeerChannel,
    PeerChat,
    PeerUser,
)
from .responses import (
    AffectedHistory,
    Dialogs,
    DialogsNotModified,
    DialogsResponse,
    DialogsSlice,
    Updates,
)

__all__ = [
    "AffectedHistory",
    "AnyChat",
    "AnyEntity",
    "AnyInputChannel",
    "AnyMessage",
    "Channel",
    "ChannelForbidden",
    "Chat",
    "ChatForbidden",
    "DeleteChatUser",
    "DeleteHistory",
    "Dialog",
    "Dialogs",
    "DialogsNotModified",
    "DialogsResponse",
    "DialogsSlice",
    "Entity",
    "GetDialogs",
    "InputChannel",
    "InputChannelFromMessage",
    "InputPeer",
    "InputPeerChannel",
    "InputPeerChannelFromMessage",
    "InputPeerChat",
    "InputPeerEmpty",
    "InputPeerSelf",
    "InputPeerUser",
    "InputPeerUserFromMessage",
    "InputUserSelf",
    "LeaveChannel",
    "Message",
    "MessageEmpty",
    "MessageService",
    "Peer",
    "PeerChannel",
    "PeerChat",
    "PeerUser",
    "RawDialog",
    "Request",
    "Updates",
    "User",
]
