"""Shared fixtures for PTV timetable tests."""

from typing import Any
from unittest.mock import AsyncMock, MagicMock
from urllib.parse import parse_qsl, urlsplit

import pytest

DEVELOPER_ID = 111111
SECRET_KEY = "secret"


def make_session(
    status: int = 200, body: bytes = b"{}", error: BaseException | None = None
) -> MagicMock:
    """Build a fake aiohttp session whose get() yields a single canned response."""
    response = MagicMock()
    response.status = status
    response.read = AsyncMock(return_value=body)

    session = MagicMock()
    request_context = session.get.return_value
    if error is not None:
        request_context.__aenter__.side_effect = error
    else:
        request_context.__aenter__.return_value = response
    session.response = response
    return session


def requested_url(session: MagicMock, call: int = -1) -> str:
    """Return the URL passed to session.get()."""
    return str(session.get.call_args_list[call].args[0])


def requested_path_and_params(session: MagicMock, call: int = -1) -> tuple[str, list[Any]]:
    """Split the requested URL into its raw path and decoded query parameters."""
    parts = urlsplit(requested_url(session, call))
    return parts.path, parse_qsl(parts.query, keep_blank_values=True)


@pytest.fixture(autouse=True)
def clean_ptv_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep PTV_* variables from the developer's shell out of the tests."""
    for name in (
        "PTV_DEVELOPER_ID",
        "PTV_SECRET_KEY",
        "PTV_BASE_URL",
        "PTV_TIMEOUT_SECONDS",
        "PTV_CONFIG_FILE",
        "PTV_LOG_REQUESTS",
    ):
        monkeypatch.delenv(name, raising=False)
