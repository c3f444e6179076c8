"""Core enumerations shared by models and runtime.

Key Types:
    - PeerKind: Which side-table an entity lives in (user, chat, channel)
    - ResponseShape: Classification of a dialogs page (full, slice, not modified)
"""

from enum import Enum


class PeerKind(str, Enum):
    """Kind of entity a peer reference points at.

    User and chat ids are allocated independently, so lookups are always
    keyed by ``(PeerKind, id)``.
    """

    USER = "user"
    CHAT = "chat"
    CHANNEL = "channel"


class ResponseShape(str, Enum):
    """Shape of a dialogs page as returned by the server."""

    FULL = "dialogs"
    SLICE = "slice"
    NOT_MODIFIED = "not_modified"

    @property
    def is_terminal(self) -> bool:
        """A full listing always contains every dialog there is."""
        return self is ResponseShape.FULL
