"""Per-page lookup tables for the entities and messages a page references."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..core.enums import PeerKind
from ..models.dialog import MessageIndex
from ..models.entities import Entity, User
from ..models.messages import AnyMessage
from ..models.peers import PeerChannel, PeerChat, PeerUser


class EntitySet:
    """Users and chats shipped with one page, keyed by ``(PeerKind, id)``.

    Built once per page and read-only afterwards.
    """

    def __init__(self, users: Iterable[User], chats: Iterable[Entity]) -> None:
        self._map: dict[tuple[PeerKind, int], Entity] = {}
        self._self_user: User | None = None
        for user in users:
            self._map[user.key] = user
            if user.is_self:
                self._self_user = user
        for chat in chats:
            self._map[chat.key] = chat

    def get(self, peer: PeerUser | PeerChat | PeerChannel) -> Entity | None:
        return self._map.get(peer.key)

    @property
    def self_user(self) -> User | None:
        """The caller's own account, when the page included it."""
        return self._self_user

    def __len__(self) -> int:
        return len(self._map)

    def __contains__(self, peer: object) -> bool:
        key = getattr(peer, "key", None)
        return key in self._map

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._map.values())


def index_messages(messages: Iterable[AnyMessage]) -> MessageIndex:
    """Index page messages by ``(peer key, message id)``.

    Message ids are only unique within a channel, so the peer is part of the
    key. Messages without a peer are stored under ``None``.
    """
    index: dict[tuple[tuple[PeerKind, int] | None, int], AnyMessage] = {}
    for message in messages:
        peer_key = message.peer_id.key if message.peer_id is not None else None
        index[(peer_key, message.id)] = message
    return index
