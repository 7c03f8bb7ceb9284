"""Shared fixtures for integration tests."""

import os

import pytest
import pytest_asyncio

from curseforge import CompatibilityMode, CurseForgeClient

# Skip all integration tests unless RUN_CURSEFORGE_NETWORK_TESTS=1 and a key is set
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_CURSEFORGE_NETWORK_TESTS") != "1"
    or not os.environ.get("CURSEFORGE_API_KEY"),
    reason="Requires network access. Set RUN_CURSEFORGE_NETWORK_TESTS=1 and CURSEFORGE_API_KEY to run",
)


@pytest_asyncio.fixture
async def client():
    async with CurseForgeClient(
        token=os.environ.get("CURSEFORGE_API_KEY"),
        compatibility=CompatibilityMode.LENIENT,
    ) as client:
        yield client
