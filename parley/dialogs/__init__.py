"""Parley Dialogs - paginated dialog listing and deletion for messaging APIs."""

from .clients import DialogsClient
from .config import MAX_PAGE_SIZE, TransportConfig
from .core import (
    DialogsError,
    PeerKind,
    ProtocolContractViolation,
    ResponseShape,
    TransportError,
)
from .io import HTTPTransport, Transport
from .models import (
    Channel,
    ChannelForbidden,
    Chat,
    ChatForbidden,
    Dialog,
    InputPeerChannel,
    InputPeerChannelFromMessage,
    InputPeerChat,
    InputPeerEmpty,
    InputPeerSelf,
    InputPeerUser,
    InputPeerUserFromMessage,
    Message,
    MessageEmpty,
    MessageService,
    User,
)
from .runtime import DeleteDispatcher, DialogIter, EntitySet

__version__ = "0.1.0"

__all__ = [
    # Client
    "DialogsClient",
    "DialogIter",
    "DeleteDispatcher",
    "EntitySet",
    # Transport
    "Transport",
    "HTTPTransport",
    "TransportConfig",
    "MAX_PAGE_SIZE",
    # Enums
    "PeerKind",
    "ResponseShape",
    # Models
    "Dialog",
    "User",
    "Chat",
    "ChatForbidden",
    "Channel",
    "ChannelForbidden",
    "Message",
    "MessageService",
    "MessageEmpty",
    "InputPeerEmpty",
    "InputPeerSelf",
    "InputPeerUser",
    "InputPeerUserFromMessage",
    "InputPeerChat",
    "InputPeerChannel",
    "InputPeerChannelFromMessage",
    # Exceptions
    "DialogsError",
    "TransportError",
    "ProtocolContractViolation",
]
