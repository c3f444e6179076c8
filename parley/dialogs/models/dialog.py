"""Dialog records: the raw page item and its decoded, self-contained form."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import PeerKind
from ..core.exceptions import ProtocolContractViolation
from .entities import AnyEntity
from .messages import AnyMessage
from .peers import InputPeer, Peer

if TYPE_CHECKING:
    from ..runtime.entities import EntitySet

MessageIndex = Mapping[tuple[tuple[PeerKind, int] | None, int], AnyMessage]


class RawDialog(BaseModel):
    """One entry of a dialogs page, referencing its peer and top message by id."""

    kind: Literal["dialog"] = "dialog"
    peer: Peer
    top_message: int
    pinned: bool = False
    unread_count: int = Field(0, ge=0)
    unread_mentions_count: int = Field(0, ge=0)
    read_inbox_max_id: int = 0
    read_outbox_max_id: int = 0
    folder_id: int | None = None

    model_config = ConfigDict(frozen=True)


class Dialog(BaseModel):
    """A dialog resolved against the side-tables of the page it arrived in.

    Holds everything needed to display the conversation or address it in a
    later request, without further lookups.
    """

    raw: RawDialog
    entity: AnyEntity
    last_message: AnyMessage | None = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_raw(
        cls,
        raw: RawDialog,
        messages: MessageIndex,
        entities: EntitySet,
    ) -> Dialog:
        """Decode a raw dialog.

        Args:
            raw: Dialog as returned in the page
            messages: Page messages indexed by ``(peer key, message id)``
            entities: Side-table built from the same page

        Raises:
            ProtocolContractViolation: If the page did not ship the dialog's entity
        """
        entity = entities.get(raw.peer)
        if entity is None:
            raise ProtocolContractViolation(
                f"Dialog references {raw.peer.kind} {raw.peer.key[1]} "
                "which is missing from the response side-tables",
                payload=raw,
            )
        last_message = messages.get((raw.peer.key, raw.top_message))
        if last_message is None:
            # Empty messages may arrive without a peer
            last_message = messages.get((None, raw.top_message))
        return cls(raw=raw, entity=entity, last_message=last_message)

    @property
    def id(self) -> int:
        return self.entity.id

    @property
    def title(self) -> str:
        return self.entity.title

    @property
    def pinned(self) -> bool:
        return self.raw.pinned

    @property
    def unread_count(self) -> int:
        return self.raw.unread_count

    def input_peer(self) -> InputPeer:
        """Endpoint to use when addressing this dialog in a request."""
        return self.entity.input_peer()
