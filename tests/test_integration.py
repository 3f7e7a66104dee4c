"""End-to-end integration tests against the live PTV API."""

import os

import pytest

from ptv_timetable import PtvTimetableClient, TransportMode
from ptv_timetable.adapters.config import AppConfig

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        not os.getenv("PTV_INTEGRATION_DEVELOPER_ID"),
        reason="PTV_INTEGRATION_DEVELOPER_ID and PTV_INTEGRATION_SECRET_KEY not set",
    ),
]


def _config() -> AppConfig:
    return AppConfig(
        _env_file=None,
        developer_id=int(os.environ["PTV_INTEGRATION_DEVELOPER_ID"]),
        secret_key=os.environ.get("PTV_INTEGRATION_SECRET_KEY", ""),
    )


@pytest.mark.asyncio
async def test_healthcheck_accepts_signature() -> None:
    """Test that the live API accepts our request signature."""
    import aiohttp

    async with aiohttp.ClientSession() as session:
        client = PtvTimetableClient.from_config(_config(), session=session)

        result = await client.healthcheck()

    assert result["securityTokenOK"] is True


@pytest.mark.asyncio
async def test_broad_departures_returns_values() -> None:
    """Test that broad departures at Flinders Street return a list."""
    import aiohttp

    async with aiohttp.ClientSession() as session:
        client = PtvTimetableClient.from_config(_config(), session=session)

        departures = await client.broad_next_departures(TransportMode.TRAIN, 1071, 1)

    assert isinstance(departures, list)
