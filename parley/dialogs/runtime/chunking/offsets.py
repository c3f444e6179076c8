"""Offset derivation for the next dialogs page.

The server does not hand out an opaque cursor. The next page is instead
addressed by the date and id of the newest message of the last dialog seen.
"""

from __future__ import annotations

from ...core.exceptions import ProtocolContractViolation
from ...models.messages import Message, MessageEmpty, MessageService


def message_offsets(
    message: Message | MessageService | MessageEmpty,
    offset_date: int,
) -> tuple[int, int]:
    """Return the ``(offset_date, offset_id)`` pair a message leads to.

    Delivered and service messages move both offsets. An empty message carries
    no timestamp, so it only moves the id and ``offset_date`` is returned as
    given.

    Args:
        message: Last message of the last dialog that has one
        offset_date: Date offset currently set on the request

    Raises:
        ProtocolContractViolation: For a message variant outside the known set
    """
    if isinstance(message, (Message, MessageService)):
        return message.date, message.id
    if isinstance(message, MessageEmpty):
        return offset_date, message.id
    raise ProtocolContractViolation(
        f"Cannot derive offsets from {type(message).__name__}", payload=message
    )
