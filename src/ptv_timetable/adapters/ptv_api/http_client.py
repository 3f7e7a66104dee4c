"""HTTP client for signed PTV timetable API requests."""

import asyncio
import json
import logging
from collections.abc import Mapping
from typing import Any

import aiohttp
from yarl import URL

from ptv_timetable.adapters.api_request_logger import log_api_request
from ptv_timetable.adapters.ptv_api.constants import (
    DEFAULT_TIMEOUT_SECONDS,
    PTV_BASE_URL,
    SIGNATURE_PARAM,
    VERSIONED_ROOT,
)
from ptv_timetable.adapters.ptv_api.signer import sign_request
from ptv_timetable.domain.exceptions import PtvDecodeError, PtvTransportError
from ptv_timetable.domain.models.credentials import Credentials
from ptv_timetable.domain.models.signed_request import SignedRequest

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    """Refuse the NaN and Infinity literals that are not part of JSON."""
    raise ValueError(f"Invalid JSON constant {name!r}")


class PtvHttpClient:
    """Signs requests, performs the GET and decodes the JSON body.

    Requests are never retried. Concurrent calls share nothing but the
    credentials and the advisory in-flight counter.
    """

    def __init__(
        self,
        credentials: Credentials,
        session: aiohttp.ClientSession | None = None,
        base_url: str = PTV_BASE_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize with credentials and an optional shared aiohttp session.

        Args:
            credentials: Developer id and secret key.
            session: Shared ClientSession. When omitted, one session is opened per request.
            base_url: Scheme and host of the API.
            timeout_seconds: Total timeout for requests made with a per-request session.
        """
        self._credentials = credentials
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._active_requests = 0

    @property
    def active_requests(self) -> int:
        """Number of requests currently awaiting a response (diagnostics only)."""
        return self._active_requests

    def endpoint_url(self, path: str) -> str:
        """Return the request URL without query string."""
        return f"{self._base_url}{VERSIONED_ROOT}{path}"

    def build_url(self, signed: SignedRequest) -> URL:
        """Return the full request URL, pre-encoded so it is sent exactly as signed."""
        return URL(f"{self.endpoint_url(signed.path)}?{signed.query_string}", encoded=True)

    async def get_json(self, path: str, params: Mapping[str, str] | None = None) -> Any:
        """Sign and perform a GET request, returning the decoded JSON body.

        Args:
            path: Request path below the versioned root.
            params: Optional query parameters, without devid and signature.

        Returns:
            Decoded JSON document.

        Raises:
            PtvTransportError: Network failure, timeout or non-200 status.
            PtvDecodeError: The body is not valid JSON.
        """
        signed = sign_request(self._credentials, path, params)
        endpoint = self.endpoint_url(path)
        logger.debug(f"PTV API GET {path}")
        log_api_request(
            "GET", endpoint, {**signed.query_params, SIGNATURE_PARAM: signed.signature}
        )

        self._active_requests += 1
        try:
            status, body = await self._fetch(self.build_url(signed), endpoint)
        finally:
            self._active_requests -= 1

        if status != 200:
            raise PtvTransportError(
                f"PTV API returned status {status} for {endpoint}",
                url=endpoint,
                status_code=status,
            )

        return self._decode(body, endpoint)

    async def _fetch(self, url: URL, endpoint: str) -> tuple[int, bytes]:
        """Perform the GET request and return status and raw body."""
        try:
            if self._session is not None:
                return await self._read_response(self._session, url)

            timeout = aiohttp.ClientTimeout(total=self._timeout_seconds)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                return await self._read_response(session, url)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise PtvTransportError(f"Error requesting {endpoint}: {e}", url=endpoint) from e

    @staticmethod
    async def _read_response(session: aiohttp.ClientSession, url: URL) -> tuple[int, bytes]:
        """Read status and body from a single GET."""
        async with session.get(url) as response:
            return response.status, await response.read()

    @staticmethod
    def _decode(body: bytes, endpoint: str) -> Any:
        """Decode a JSON response body."""
        try:
            return json.loads(body, parse_constant=_reject_constant)
        except ValueError as e:
            raise PtvDecodeError(
                f"PTV API response from {endpoint} was not valid JSON: {e}",
                body=body.decode("utf-8", errors="replace"),
            ) from e
