"""Unit tests for DialogIter.

Tests focus on buffering order, terminal detection, total memoization and the
offsets sent with each follow-up page.
"""

from __future__ import annotations

import asyncio
import logging

import pytest

from parley.dialogs.core import ProtocolContractViolation, TransportError
from parley.dialogs.models import (
    DialogsNotModified,
    DialogsSlice,
    GetDialogs,
    InputPeerEmpty,
    InputPeerUser,
    PeerUser,
    RawDialog,
)
from parley.dialogs.runtime import DialogIter


class TestDialogIterDefaults:
    """Test the initial cursor state."""

    def test_default_request(self, transport):
        """Test a fresh iterator starts from the default cursor."""
        dialogs = DialogIter(transport)

        assert dialogs.request == GetDialogs(
            exclude_pinned=False,
            folder_id=None,
            offset_date=0,
            offset_id=0,
            offset_peer=InputPeerEmpty(),
            limit=0,
            hash=0,
        )
        assert dialogs.is_terminal is False
        assert dialogs.fetched == 0

    def test_folder_id_is_forwarded(self, transport):
        """Test folder_id lands on the request."""
        dialogs = DialogIter(transport, folder_id=1)
        assert dialogs.request.folder_id == 1


class TestDialogIterPagination:
    """Test pulling dialogs across pages."""

    @pytest.mark.asyncio
    async def test_items_arrive_in_page_order(self, transport, page):
        """Test all pages are concatenated in arrival order."""
        transport.queue(
            page(list(range(1, 101)), count=150),
            page(list(range(101, 151)), count=150),
        )
        dialogs = DialogIter(transport)

        result = await dialogs.collect()

        assert [d.id for d in result] == list(range(1, 151))
        assert transport.calls == 2
        assert dialogs.is_terminal is True

    @pytest.mark.asyncio
    async def test_second_request_uses_offsets_from_first_page(self, transport, page):
        """Test follow-up request carries offsets derived from the last dialog."""
        transport.queue(
            page(list(range(1, 101)), count=150),
            page(list(range(101, 151)), count=150),
        )
        dialogs = DialogIter(transport)
        await dialogs.collect()

        first, second = transport.requests
        assert first.limit == 100
        assert first.exclude_pinned is False
        assert first.offset_id == 0
        assert isinstance(first.offset_peer, InputPeerEmpty)

        assert second.limit == 100
        assert second.exclude_pinned is True
        assert second.offset_id == 1000
        assert second.offset_date == 10_000 - 100
        assert second.offset_peer == InputPeerUser(user_id=100, access_hash=100_000)

    @pytest.mark.asyncio
    async def test_buffer_is_drained_before_fetching_again(self, transport, page):
        """Test a single fetch serves a whole page."""
        transport.queue(page(list(range(1, 101)), count=500))
        dialogs = DialogIter(transport)

        for expected in range(1, 101):
            dialog = await dialogs.next()
            assert dialog.id == expected

        assert transport.calls == 1
        assert dialogs.buffered == 0

    @pytest.mark.asyncio
    async def test_full_response_is_terminal(self, transport, page):
        """Test a full listing ends the iteration with no further calls."""
        transport.queue(page([1, 2, 3], full=True))
        dialogs = DialogIter(transport)

        assert (await dialogs.next()).id == 1
        assert dialogs.is_terminal is True
        assert await dialogs.total() == 3
        assert (await dialogs.next()).id == 2
        assert (await dialogs.next()).id == 3
        assert await dialogs.next() is None
        assert transport.calls == 1

    @pytest.mark.asyncio
    async def test_next_after_terminal_never_calls_transport(self, transport, page):
        """Test terminal state is sticky."""
        transport.queue(page([1], count=1))
        dialogs = DialogIter(transport)

        assert (await dialogs.next()).id == 1
        for _ in range(3):
            assert await dialogs.next() is None
        assert transport.calls == 1

    @pytest.mark.asyncio
    async def test_short_slice_is_terminal_and_keeps_offsets(self, transport, page):
        """Test offsets are not updated for the last page."""
        transport.queue(page([1, 2], count=2))
        dialogs = DialogIter(transport)

        await dialogs.next()

        assert dialogs.is_terminal is True
        assert dialogs.request.offset_id == 0
        assert dialogs.request.exclude_pinned is False

    @pytest.mark.asyncio
    async def test_empty_slice_returns_none(self, transport, page):
        """Test an empty page ends the iteration without touching offsets."""
        transport.queue(page([], count=0))
        dialogs = DialogIter(transport)

        assert await dialogs.next() is None
        assert dialogs.is_terminal is True
        assert dialogs.request.offset_id == 0
        assert isinstance(dialogs.request.offset_peer, InputPeerEmpty)

    @pytest.mark.asyncio
    async def test_async_for(self, transport, page):
        """Test the iterator supports async iteration."""
        transport.queue(page([1, 2, 3], full=True))

        seen = [dialog.id async for dialog in DialogIter(transport)]

        assert seen == [1, 2, 3]


class TestDialogIterOffsets:
    """Test offset derivation from the page's last messages."""

    @pytest.mark.asyncio
    async def test_empty_message_keeps_previous_date(self, transport, page):
        """Test an empty last message only moves the id offset."""
        transport.queue(page(list(range(1, 101)), count=300, empty_message_ids=frozenset({100})))
        dialogs = DialogIter(transport)
        dialogs.request.offset_date = 500

        await dialogs.next()

        assert dialogs.request.offset_id == 1000
        assert dialogs.request.offset_date == 500

    @pytest.mark.asyncio
    async def test_dialog_without_message_is_skipped_for_offsets(self, transport, page):
        """Test offsets come from the last dialog that has a message."""
        transport.queue(
            page(list(range(1, 101)), count=300, without_message_ids=frozenset({100}))
        )
        dialogs = DialogIter(transport)

        await dialogs.next()

        assert dialogs.request.offset_id == 990
        assert dialogs.request.offset_date == 10_000 - 99
        # The anchor peer is still the very last dialog
        assert dialogs.request.offset_peer == InputPeerUser(user_id=100, access_hash=100_000)


class TestDialogIterTotal:
    """Test total() memoization."""

    @pytest.mark.asyncio
    async def test_total_probe_uses_limit_one(self, transport, page):
        """Test the first total() call issues a single-dialog request."""
        transport.queue(page([1], count=250))
        dialogs = DialogIter(transport)

        assert await dialogs.total() == 250
        assert transport.calls == 1
        assert transport.requests[0].limit == 1

    @pytest.mark.asyncio
    async def test_total_is_memoized(self, transport, page):
        """Test repeated total() calls do not hit the network."""
        transport.queue(page([1], count=250))
        dialogs = DialogIter(transport)

        assert await dialogs.total() == 250
        assert await dialogs.total() == 250
        assert transport.calls == 1

    @pytest.mark.asyncio
    async def test_probe_leaves_cursor_untouched(self, transport, page):
        """Test next() after a probe starts from the default cursor."""
        transport.queue(page([1], count=250), page(list(range(1, 101)), count=250))
        dialogs = DialogIter(transport)

        await dialogs.total()
        await dialogs.next()

        probe, first_page = transport.requests
        assert probe.limit == 1
        assert first_page.limit == 100
        assert first_page.offset_id == 0
        assert first_page.exclude_pinned is False

    @pytest.mark.asyncio
    async def test_total_stable_across_slices(self, transport, page):
        """Test total reflects the declared count instead of summing pages."""
        transport.queue(
            page(list(range(1, 101)), count=250),
            page(list(range(101, 201)), count=250),
        )
        dialogs = DialogIter(transport)

        await dialogs.next()
        assert await dialogs.total() == 250

        for _ in range(100):
            await dialogs.next()
        assert transport.calls == 2
        assert await dialogs.total() == 250
        assert transport.calls == 2

    @pytest.mark.asyncio
    async def test_total_after_partial_enumeration(self, transport, page):
        """Test total() is unchanged by later next() calls."""
        transport.queue(page([1], count=3), page([1, 2, 3], count=3))
        dialogs = DialogIter(transport)

        before = await dialogs.total()
        await dialogs.next()
        after = await dialogs.total()

        assert before == after == 3


class TestDialogIterLimit:
    """Test the caller-imposed limit."""

    @pytest.mark.asyncio
    async def test_limit_shrinks_page_size(self, transport, page):
        """Test each request asks for at most the remaining quota."""
        transport.queue(
            page(list(range(1, 101)), count=400),
            page(list(range(101, 151)), count=400),
        )
        dialogs = DialogIter(transport).limit(150)

        result = await dialogs.collect()

        assert len(result) == 150
        assert [r.limit for r in transport.requests] == [100, 50]
        assert transport.calls == 2

    @pytest.mark.asyncio
    async def test_limit_below_page_size(self, transport, page):
        """Test a small limit is sent as the page size."""
        transport.queue(page([1, 2, 3, 4, 5], count=400))
        dialogs = DialogIter(transport).limit(5)

        result = await dialogs.collect()

        assert [d.id for d in result] == [1, 2, 3, 4, 5]
        assert transport.requests[0].limit == 5

    @pytest.mark.asyncio
    async def test_reaching_limit_logs_exhaustion_once(self, transport, page, caplog):
        """Test hitting the caller's limit is logged once."""
        transport.queue(page([1, 2, 3], count=400))
        dialogs = DialogIter(transport).limit(3)

        with caplog.at_level(logging.INFO, logger="parley.dialogs.runtime"):
            await dialogs.collect()
            assert await dialogs.next() is None

        records = [r for r in caplog.records if r.getMessage() == "dialogs_exhausted"]
        assert len(records) == 1
        assert records[0].fetched == 3
        assert records[0].total == 400

    @pytest.mark.asyncio
    async def test_last_page_logs_exhaustion_once(self, transport, page, caplog):
        """Test the terminal page is logged once even when the limit is hit too."""
        transport.queue(page([1, 2], full=True))
        dialogs = DialogIter(transport).limit(2)

        with caplog.at_level(logging.INFO, logger="parley.dialogs.runtime"):
            await dialogs.collect()
            await dialogs.next()

        records = [r for r in caplog.records if r.getMessage() == "dialogs_exhausted"]
        assert len(records) == 1

    def test_negative_limit_rejected(self, transport):
        """Test negative limits are refused."""
        with pytest.raises(ValueError):
            DialogIter(transport).limit(-1)


class TestDialogIterErrors:
    """Test error propagation and state preservation."""

    @pytest.mark.asyncio
    async def test_not_modified_is_a_contract_violation(self, transport):
        """Test NotModified with hash=0 fails loudly."""
        transport.queue(DialogsNotModified(count=10))
        dialogs = DialogIter(transport)

        with pytest.raises(ProtocolContractViolation):
            await dialogs.next()
        assert dialogs.is_terminal is False
        assert dialogs.buffered == 0

    @pytest.mark.asyncio
    async def test_not_modified_during_total_probe(self, transport):
        """Test total() rejects NotModified as well."""
        transport.queue(DialogsNotModified(count=10))

        with pytest.raises(ProtocolContractViolation):
            await DialogIter(transport).total()

    @pytest.mark.asyncio
    async def test_transport_error_propagates_unchanged(self, transport, page):
        """Test transport errors are neither wrapped nor swallowed."""
        error = TransportError("connection reset")
        transport.queue(error, page([1, 2], count=2))
        dialogs = DialogIter(transport)

        with pytest.raises(TransportError) as exc_info:
            await dialogs.next()
        assert exc_info.value is error
        assert dialogs.request.limit == 0

        # The failed fetch left no trace; the next call simply retries
        assert (await dialogs.next()).id == 1

    @pytest.mark.asyncio
    async def test_missing_entity_is_a_contract_violation(self, transport):
        """Test a dialog whose peer is absent from the side-tables is rejected."""
        transport.queue(
            DialogsSlice(
                count=1,
                dialogs=[RawDialog(peer=PeerUser(user_id=5), top_message=1)],
            )
        )
        dialogs = DialogIter(transport)

        with pytest.raises(ProtocolContractViolation):
            await dialogs.next()
        assert dialogs.is_terminal is False

    @pytest.mark.asyncio
    async def test_cancelled_fetch_leaves_state_untouched(self, page):
        """Test cancelling a pending fetch does not partially apply it."""

        class BlockingTransport:
            def __init__(self) -> None:
                self.started = asyncio.Event()
                self.first = page(list(range(1, 101)), count=300)

            async def invoke(self, request):
                if self.first is not None:
                    first, self.first = self.first, None
                    return first
                self.started.set()
                await asyncio.Event().wait()

        transport = BlockingTransport()
        dialogs = DialogIter(transport)
        for _ in range(100):
            await dialogs.next()
        snapshot = dialogs.request.model_copy(deep=True)

        task = asyncio.create_task(dialogs.next())
        await transport.started.wait()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        assert dialogs.request == snapshot
        assert dialogs.buffered == 0
        assert dialogs.is_terminal is False
        assert dialogs.fetched == 100
