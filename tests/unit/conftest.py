"""Shared fixtures for unit tests: a scripted transport and page builders."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable
from typing import Any

import pytest

from parley.dialogs.models import (
    Dialogs,
    DialogsSlice,
    Message,
    MessageEmpty,
    PeerUser,
    RawDialog,
    User,
)
from parley.dialogs.models.functions import Request


class ScriptedTransport:
    """Transport returning queued responses (or raising queued exceptions).

    Every request is recorded as a deep copy, so later cursor mutations do not
    rewrite history.
    """

    def __init__(self, *responses: Any) -> None:
        self._responses: deque[Any] = deque(responses)
        self.requests: list[Request] = []
        self.closed = False

    def queue(self, *responses: Any) -> None:
        self._responses.extend(responses)

    @property
    def calls(self) -> int:
        return len(self.requests)

    async def invoke(self, request: Request) -> Any:
        self.requests.append(request.model_copy(deep=True))
        if not self._responses:
            raise AssertionError(f"Unexpected call to {request.METHOD}")
        response = self._responses.popleft()
        if isinstance(response, BaseException):
            raise response
        return response

    async def close(self) -> None:
        self.closed = True


def build_page(
    user_ids: list[int],
    *,
    full: bool = False,
    count: int | None = None,
    empty_message_ids: frozenset[int] = frozenset(),
    without_message_ids: frozenset[int] = frozenset(),
) -> Dialogs | DialogsSlice:
    """Build a dialogs page with one direct conversation per user id.

    Dialog ``n`` has top message ``n * 10`` dated ``10_000 - n``. Ids listed in
    ``empty_message_ids`` get a ``MessageEmpty`` instead; ids listed in
    ``without_message_ids`` get no message at all.
    """
    dialogs = []
    messages: list[Any] = []
    users = []
    for user_id in user_ids:
        peer = PeerUser(user_id=user_id)
        dialogs.append(RawDialog(peer=peer, top_message=user_id * 10))
        users.append(User(id=user_id, access_hash=user_id * 1000, first_name=f"user{user_id}"))
        if user_id in without_message_ids:
            continue
        if user_id in empty_message_ids:
            messages.append(MessageEmpty(id=user_id * 10, peer_id=peer))
        else:
            messages.append(
                Message(id=user_id * 10, date=10_000 - user_id, peer_id=peer, message="hi")
            )

    if full:
        return Dialogs(dialogs=dialogs, messages=messages, users=users)
    return DialogsSlice(
        count=count if count is not None else len(dialogs),
        dialogs=dialogs,
        messages=messages,
        users=users,
    )


@pytest.fixture
def transport() -> ScriptedTransport:
    return ScriptedTransport()


@pytest.fixture
def page() -> Callable[..., Dialogs | DialogsSlice]:
    """Factory fixture for dialogs pages (see ``build_page``)."""
    return build_page
