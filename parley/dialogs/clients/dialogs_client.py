"""DialogsClient facade over the dialog iterator and delete dispatcher.

Architecture:
    The client owns (or borrows) a transport and hands it to short-lived
    runtime objects:
    - iter_dialogs() builds a fresh DialogIter with its own cursor, so
      independent enumerations never share state
    - delete_dialog() dispatches through DeleteDispatcher

Design Decisions:
    - Transport injection allows testing with a scripted fake transport
    - Context manager pattern closes an owned transport on exit

See Also:
    - DialogIter: Paginated dialog enumeration
    - DeleteDispatcher: Endpoint-kind specific delete calls
"""

from __future__ import annotations

import logging
from typing import Any

from ..config import TransportConfig
from ..io.http import HTTPTransport
from ..io.transport import Transport
from ..models.peers import InputPeer
from ..runtime.delete import DeleteDispatcher
from ..runtime.dialogs import DialogIter

logger = logging.getLogger(__name__)


class DialogsClient:
    """High-level entry point for listing and deleting dialogs.

    Example:
        >>> async with DialogsClient.from_config(TransportConfig.from_env()) as client:
        ...     print(await client.iter_dialogs().total())
        ...     async for dialog in client.iter_dialogs(limit=20):
        ...         print(dialog.title, dialog.unread_count)
    """

    def __init__(self, transport: Transport, *, owns_transport: bool = False) -> None:
        """Initialize the client.

        Args:
            transport: Transport every remote call goes through
            owns_transport: Close the transport when the client is closed
        """
        self._transport = transport
        self._owns_transport = owns_transport
        self._deleter = DeleteDispatcher(transport)
        self._closed = False

    @classmethod
    def from_config(cls, config: TransportConfig) -> DialogsClient:
        """Create a client talking to an HTTP gateway; the client owns the transport."""
        return cls(HTTPTransport(config), owns_transport=True)

    @property
    def transport(self) -> Transport:
        return self._transport

    def iter_dialogs(
        self,
        *,
        limit: int | None = None,
        folder_id: int | None = None,
    ) -> DialogIter:
        """Return a new iterator over the dialogs.

        Args:
            limit: Stop after this many dialogs (default: all of them)
            folder_id: Only list dialogs of this folder (default: the main list)
        """
        dialogs = DialogIter(self._transport, folder_id=folder_id)
        if limit is not None:
            dialogs.limit(limit)
        return dialogs

    async def delete_dialog(self, peer: InputPeer) -> None:
        """Delete a dialog, removing it from the list of open conversations.

        The dialog is only deleted for the caller. Deleting it clears the
        message history and leaves the conversation; for groups and channels
        this is the same as leaving them. The chat itself is **not** deleted
        and the other members remain inside.

        Raises:
            TransportError: If the remote call fails
        """
        await self._deleter.delete(peer)

    # --- Lifecycle -----------------------------------------------------------

    async def close(self) -> None:
        """Close the client and, when owned, its transport."""
        if self._closed:
            return
        self._closed = True
        logger.debug("Closing DialogsClient")
        close = getattr(self._transport, "close", None)
        if self._owns_transport and close is not None:
            await close()

    async def __aenter__(self) -> DialogsClient:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()
