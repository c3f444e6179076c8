"""Iterator over the caller's dialogs.

Pages are requested with offsets taken from the content of the previous page
(date and id of the newest message of its last dialog, plus that dialog's
peer) rather than from a server-issued cursor.
"""

from __future__ import annotations

from ..config import MAX_PAGE_SIZE
from ..io.transport import Transport
from ..models.dialog import Dialog
from ..models.functions import GetDialogs
from ..models.peers import InputPeerEmpty
from .chunking import ChunkFetcher, DialogsChunk, message_offsets
from .chunking.telemetry import log_dialogs_exhausted, log_total_probed
from .iter_buffer import IterBuffer


class DialogIter(IterBuffer[GetDialogs, Dialog]):
    """Lazily fetched sequence of ``Dialog`` values, newest first."""

    def __init__(
        self,
        transport: Transport,
        *,
        folder_id: int | None = None,
    ) -> None:
        super().__init__(
            GetDialogs(
                exclude_pinned=False,
                folder_id=folder_id,
                offset_date=0,
                offset_id=0,
                offset_peer=InputPeerEmpty(),
                limit=0,
                hash=0,
            )
        )
        self._fetcher = ChunkFetcher(transport)
        self._exhaustion_logged = False

    async def total(self) -> int:
        """Determine how many dialogs there are in total.

        Only performs a network call if no page has been fetched before. The
        probe asks for a single dialog and leaves the cursor untouched.
        """
        if self._total is not None:
            return self._total

        probe = self.request.model_copy(update={"limit": 1})
        chunk = await self._fetcher.fetch(probe)
        self._total = chunk.count
        log_total_probed(total=chunk.count, latency_ms=chunk.latency_ms)
        return self._total

    async def next(self) -> Dialog | None:
        """Return the next dialog, fetching a new page when the buffer is empty.

        Returns ``None`` when the limit is reached or there are no dialogs left.
        """
        if self.limit_reached():
            self._log_exhausted()
            return None
        if self._buffer:
            return self.pop_item()
        if self._last_chunk:
            return None

        limit = self.determine_limit(MAX_PAGE_SIZE)
        chunk = await self._fetcher.fetch(self.request.model_copy(update={"limit": limit}))
        dialogs = chunk.decode()

        # Nothing below awaits, so a cancelled fetch leaves the state untouched
        self.request.limit = limit
        self._apply_chunk(chunk, limit)
        self._buffer.extend(dialogs)

        # No need to update offsets if this is the last page
        if not self._last_chunk and self._buffer:
            self._advance_offsets()

        if self._last_chunk:
            self._log_exhausted(fetched=self._fetched + len(self._buffer))

        return self.pop_item()

    def _log_exhausted(self, fetched: int | None = None) -> None:
        if self._exhaustion_logged:
            return
        self._exhaustion_logged = True
        log_dialogs_exhausted(
            chunks_used=self._fetcher.chunks_fetched,
            fetched=self._fetched if fetched is None else fetched,
            total=self._total,
        )

    def _apply_chunk(self, chunk: DialogsChunk, limit: int) -> None:
        if chunk.is_full:
            self._last_chunk = True
        elif len(chunk) < limit:
            self._last_chunk = True
        # The server's count replaces the previous estimate on every page
        self._total = chunk.count

    def _advance_offsets(self) -> None:
        # Pinned dialogs are only returned in the first page
        self.request.exclude_pinned = True

        last_message = next(
            (d.last_message for d in reversed(self._buffer) if d.last_message is not None),
            None,
        )
        if last_message is not None:
            offset_date, offset_id = message_offsets(last_message, self.request.offset_date)
            self.request.offset_date = offset_date
            self.request.offset_id = offset_id

        self.request.offset_peer = self._buffer[-1].input_peer()
