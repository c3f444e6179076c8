"""Chunk structures shared by the fetcher and the dialog iterator."""

from __future__ import annotations

from dataclasses import dataclass, field

from ...core.enums import ResponseShape
from ...models.dialog import Dialog, MessageIndex, RawDialog
from ..entities import EntitySet


@dataclass
class DialogsChunk:
    """One classified page of dialogs.

    Attributes:
        shape: Which response shape the server answered with
        dialogs: Raw page items, in server order
        messages: Page messages indexed by ``(peer key, message id)``
        entities: Side-table built from the page's users and chats
        count: Total dialog count implied by the page (its length for a full
            listing, the server-declared count for a slice)
        latency_ms: Round-trip time of the call that produced the page
    """

    shape: ResponseShape
    dialogs: list[RawDialog]
    messages: MessageIndex
    entities: EntitySet
    count: int
    latency_ms: float | None = None
    _decoded: list[Dialog] | None = field(default=None, init=False, repr=False, compare=False)

    @property
    def is_full(self) -> bool:
        return self.shape.is_terminal

    def __len__(self) -> int:
        return len(self.dialogs)

    def decode(self) -> list[Dialog]:
        """Resolve every raw dialog against the page side-tables, keeping order."""
        if self._decoded is None:
            self._decoded = [
                Dialog.from_raw(raw, self.messages, self.entities) for raw in self.dialogs
            ]
        return self._decoded
