"""Structured logging for dialog page fetches.

This module provides telemetry hooks for the chunk fetcher and the dialog
iterator, emitting structured logs for observability.
"""

from __future__ import annotations

import logging

from .definitions import DialogsChunk

logger = logging.getLogger(__name__)


def log_chunk_fetched(
    *,
    chunk_index: int,
    limit: int,
    chunk: DialogsChunk,
) -> None:
    """Log a completed page fetch.

    Args:
        chunk_index: Zero-based index of the page within the iteration
        limit: Limit the page was requested with
        chunk: Classified page
    """
    logger.debug(
        "dialogs_chunk_fetched",
        extra={
            "chunk_index": chunk_index,
            "limit": limit,
            "shape": chunk.shape.value,
            "items": len(chunk),
            "declared_count": chunk.count,
            "latency_ms": chunk.latency_ms,
        },
    )


def log_chunk_error(
    *,
    chunk_index: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a failed page fetch.

    Args:
        chunk_index: Zero-based index of the page that failed
        error_type: Exception class name
        error_message: Exception message
    """
    logger.error(
        "dialogs_chunk_error",
        extra={
            "chunk_index": chunk_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_dialogs_exhausted(*, chunks_used: int, fetched: int, total: int | None) -> None:
    """Log the end of an iteration (last page received or user limit reached)."""
    logger.info(
        "dialogs_exhausted",
        extra={
            "chunks_used": chunks_used,
            "fetched": fetched,
            "total": total,
        },
    )


def log_total_probed(*, total: int, latency_ms: float | None = None) -> None:
    """Log the result of a standalone total-count probe."""
    logger.debug(
        "dialogs_total_probed",
        extra={"total": total, "latency_ms": latency_ms},
    )
