"""Dialog deletion dispatched on the kind of conversation endpoint.

Deleting a dialog only removes it from the caller's own list. For direct
conversations the history is cleared for the caller alone; for groups and
channels the caller leaves, while the chat itself and its other members stay.
"""

from __future__ import annotations

import logging

from ..core.exceptions import ProtocolContractViolation
from ..io.transport import Transport
from ..models.functions import DeleteChatUser, DeleteHistory, LeaveChannel, Request
from ..models.peers import (
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
)

logger = logging.getLogger(__name__)


def build_delete_request(peer: InputPeer) -> Request | None:
    """Map a conversation endpoint to the remote call that removes it.

    Returns ``None`` for the empty endpoint, which needs no call.

    Raises:
        ProtocolContractViolation: For an endpoint kind outside the known set
    """
    if isinstance(peer, InputPeerEmpty):
        return None
    if isinstance(peer, (InputPeerSelf, InputPeerUser, InputPeerUserFromMessage)):
        return DeleteHistory(just_clear=False, revoke=False, peer=peer, max_id=0)
    if isinstance(peer, InputPeerChat):
        return DeleteChatUser(chat_id=peer.chat_id, user_id=InputUserSelf())
    if isinstance(peer, InputPeerChannel):
        return LeaveChannel(
            channel=InputChannel(channel_id=peer.channel_id, access_hash=peer.access_hash)
        )
    if isinstance(peer, InputPeerChannelFromMessage):
        return LeaveChannel(
            channel=InputChannelFromMessage(
                peer=peer.peer, msg_id=peer.msg_id, channel_id=peer.channel_id
            )
        )
    raise ProtocolContractViolation(
        f"Cannot delete dialog for endpoint {type(peer).__name__}", payload=peer
    )


class DeleteDispatcher:
    """Issues the delete or leave call matching an endpoint's kind."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    async def delete(self, peer: InputPeer) -> None:
        """Remove the dialog for ``peer`` from the caller's list.

        The dialog is only deleted for the caller. Groups and channels are left,
        not deleted; their other members are unaffected.
        """
        request = build_delete_request(peer)
        if request is None:
            return

        # Only success matters; the returned payload is dropped
        await self._transport.invoke(request)
        logger.info(
            "dialog_deleted",
            extra={"peer_kind": peer.kind, "method": request.METHOD},
        )
