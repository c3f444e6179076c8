"""Shared fixtures for integration tests."""

import pytest_asyncio

from parley.dialogs import DialogsClient, TransportConfig


@pytest_asyncio.fixture
async def client():
    """Client against the gateway named by PARLEY_GATEWAY_URL."""
    async with DialogsClient.from_config(TransportConfig.from_env()) as client:
        yield client
