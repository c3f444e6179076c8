"""Generic buffered iterator over a paginated remote listing.

``IterBuffer`` owns the state every paginated listing needs: the request that
doubles as cursor, a queue of decoded items, the terminal flag, the memoized
total and an optional caller-imposed limit. Subclasses implement ``next()``
by refilling the queue one page at a time.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from typing import Generic, TypeVar

from ..models.functions import Request

R = TypeVar("R", bound=Request)
T = TypeVar("T")


class IterBuffer(ABC, Generic[R, T]):
    """Buffered, lazily filled async iterator.

    Not safe for concurrent use: ``next()`` mutates the request and the buffer
    in place, so a single task should own each instance.
    """

    def __init__(self, request: R) -> None:
        self.request = request
        self._limit: int | None = None
        self._fetched = 0
        self._buffer: deque[T] = deque()
        self._last_chunk = False
        self._total: int | None = None

    def limit(self, limit: int) -> IterBuffer[R, T]:
        """Stop after yielding ``limit`` items. Returns ``self`` for chaining."""
        if limit < 0:
            raise ValueError("limit must be a non-negative integer")
        self._limit = limit
        return self

    @property
    def fetched(self) -> int:
        """Number of items handed out so far."""
        return self._fetched

    @property
    def is_terminal(self) -> bool:
        """Whether the last page has been received; no further fetches happen."""
        return self._last_chunk

    @property
    def buffered(self) -> int:
        return len(self._buffer)

    def determine_limit(self, max_limit: int) -> int:
        """Page size for the next request, honouring the caller's limit."""
        if self._limit is None:
            return max_limit
        if self._fetched < self._limit:
            return min(self._limit - self._fetched, max_limit)
        # A limit of 0 makes the server pick its own default page size
        return 1

    def limit_reached(self) -> bool:
        return self._limit is not None and self._fetched >= self._limit

    def pop_item(self) -> T | None:
        if not self._buffer:
            return None
        self._fetched += 1
        return self._buffer.popleft()

    @abstractmethod
    async def next(self) -> T | None:
        """Return the next item, or ``None`` once the listing is exhausted."""

    async def collect(self) -> list[T]:
        """Drain the iterator into a list."""
        return [item async for item in self]

    def __aiter__(self) -> IterBuffer[R, T]:
        return self

    async def __anext__(self) -> T:
        item = await self.next()
        if item is None:
            raise StopAsyncIteration
        return item
