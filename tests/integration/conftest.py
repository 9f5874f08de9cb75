"""Fixtures for integration tests against a mocked task API."""

from collections.abc import AsyncGenerator

import pytest
from aioresponses import aioresponses as aioresponses_cls

from task_api_harness.probe import HttpProbe, ProbeConfig

API_BASE_URL = "http://task-api.test"


@pytest.fixture
def config() -> ProbeConfig:
    """Create probe configuration pointing at the mocked service."""
    return ProbeConfig(base_url=API_BASE_URL)


@pytest.fixture
async def probe(
    config: ProbeConfig, aioresponses: aioresponses_cls
) -> AsyncGenerator[HttpProbe, None]:
    """Create probe with managed session."""
    async with HttpProbe.from_config(config) as impl:
        yield impl
