"""Chunk fetching: one round-trip, classified into a ``DialogsChunk``.

The fetcher never retries and never swallows transport failures; it only adds
timing and structured logs around the call.
"""

from __future__ import annotations

from time import perf_counter
from typing import Any

from ...core.enums import ResponseShape
from ...core.exceptions import ProtocolContractViolation
from ...io.transport import Transport
from ...models.functions import GetDialogs
from ...models.responses import Dialogs, DialogsNotModified, DialogsSlice
from ..entities import EntitySet, index_messages
from .definitions import DialogsChunk
from .telemetry import log_chunk_error, log_chunk_fetched


def classify_response(response: Any, *, latency_ms: float | None = None) -> DialogsChunk:
    """Turn a raw dialogs response into a ``DialogsChunk``.

    Raises:
        ProtocolContractViolation: For ``DialogsNotModified`` (requests always
            carry ``hash = 0``) or any payload that is not a dialogs response
    """
    if isinstance(response, Dialogs):
        shape = ResponseShape.FULL
        count = len(response.dialogs)
    elif isinstance(response, DialogsSlice):
        shape = ResponseShape.SLICE
        count = response.count
    elif isinstance(response, DialogsNotModified):
        raise ProtocolContractViolation(
            "API returned DialogsNotModified even though hash = 0", payload=response
        )
    else:
        raise ProtocolContractViolation(
            f"Unexpected dialogs response: {type(response).__name__}", payload=response
        )

    return DialogsChunk(
        shape=shape,
        dialogs=list(response.dialogs),
        messages=index_messages(response.messages),
        entities=EntitySet(response.users, response.chats),
        count=count,
        latency_ms=latency_ms,
    )


class ChunkFetcher:
    """Issues dialogs requests and classifies their responses."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport
        self._chunks_fetched = 0

    @property
    def chunks_fetched(self) -> int:
        """Number of pages fetched successfully so far."""
        return self._chunks_fetched

    async def fetch(self, request: GetDialogs) -> DialogsChunk:
        """Fetch and classify one page.

        Args:
            request: Fully prepared request; it is sent as-is and not modified

        Returns:
            The classified page
        """
        chunk_index = self._chunks_fetched
        start = perf_counter()
        try:
            response = await self._transport.invoke(request)
        except Exception as e:
            log_chunk_error(
                chunk_index=chunk_index,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise
        latency_ms = (perf_counter() - start) * 1000.0

        chunk = classify_response(response, latency_ms=latency_ms)
        self._chunks_fetched += 1
        log_chunk_fetched(chunk_index=chunk_index, limit=request.limit, chunk=chunk)
        return chunk
