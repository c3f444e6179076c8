"""Page fetching layer for the dialog iterator.

Architecture:
    - definitions.py: The classified page structure (DialogsChunk)
    - executors.py: One round-trip per page and response classification
    - offsets.py: Next-page offsets derived from the last message seen
    - telemetry.py: Structured logging
"""

from __future__ import annotations

from .definitions import DialogsChunk
from .executors import ChunkFetcher, classify_response
from .offsets import message_offsets

__all__ = [
    "ChunkFetcher",
    "DialogsChunk",
    "classify_response",
    "message_offsets",
]
