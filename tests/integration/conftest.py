"""Shared fixtures for integration tests against a live SonarQube server."""

import os

import pytest
import pytest_asyncio

from sonarqube.client import SonarClient

# Skip all integration tests unless RUN_SONAR_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_SONAR_NETWORK_TESTS") != "1",
    reason="Requires a SonarQube server. Set RUN_SONAR_NETWORK_TESTS=1 and SONAR_URL to run",
)


@pytest_asyncio.fixture
async def live_sonar():
    client = SonarClient.from_env()
    yield client
    await client.close()
