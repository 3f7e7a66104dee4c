"""PTV timetable API client.

One coroutine per remote operation. Each builds the request path, signs the
request, performs a single GET and reshapes the response envelope.
"""

from collections.abc import Iterable
from datetime import UTC, datetime
from email.utils import format_datetime
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from ptv_timetable.adapters.ptv_api.constants import (
    BROAD_DEPARTURES_PATH,
    DEFAULT_TIMEOUT_SECONDS,
    DISRUPTIONS_PATH,
    HEALTHCHECK_PATH,
    LINES_BY_MODE_PATH,
    NEARME_PATH,
    PATH_SAFE_CHARACTERS,
    POI_PATH,
    PTV_BASE_URL,
    SEARCH_PATH,
    SPECIFIC_DEPARTURES_PATH,
    STOP_FACILITIES_PATH,
    STOPPING_PATTERN_PATH,
    STOPS_FOR_LINE_PATH,
)
from ptv_timetable.adapters.ptv_api.http_client import PtvHttpClient
from ptv_timetable.domain.exceptions import PtvDecodeError
from ptv_timetable.domain.models.credentials import Credentials
from ptv_timetable.domain.models.transport_mode import TransportMode
from ptv_timetable.domain.ports.timetable_client import TimetableClient

if TYPE_CHECKING:
    from aiohttp import ClientSession

    from ptv_timetable.adapters.config.app_config import AppConfig


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _format_number(value: Any) -> str:
    """Render a number (or numeric string) in its shortest decimal form."""
    if isinstance(value, int) and not isinstance(value, bool):
        return str(int(value))
    try:
        number = float(value)
    except (TypeError, ValueError):
        # Passed through unvalidated; the API decides what to make of it.
        return _format_text(str(value))
    return str(int(number)) if number.is_integer() else repr(number)


def _format_text(value: str) -> str:
    """Percent-encode free text for use in a path, keeping reserved characters."""
    return quote(value, safe=PATH_SAFE_CHARACTERS)


def _format_list(values: str | Iterable[Any]) -> str:
    """Join a list of codes with commas; strings are used as given."""
    if isinstance(values, str):
        return _format_text(values)
    return ",".join(
        _format_number(v) if isinstance(v, int) else _format_text(str(v)) for v in values
    )


def _format_flag(value: bool | str) -> str:
    """Render a bool as true/false; other values are sent as given."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _format_utc(value: datetime) -> str:
    """Format a datetime as ISO-8601 UTC with milliseconds, e.g. 2024-03-01T08:30:00.000Z."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    value = value.astimezone(UTC)
    return f"{value:%Y-%m-%dT%H:%M:%S}.{value.microsecond // 1000:03d}Z"


def _unwrap_results(payload: Any) -> list[Any]:
    """Unwrap the ``result`` field of each element of a list envelope."""
    if not isinstance(payload, list):
        raise PtvDecodeError(f"Expected a list of results, got {type(payload).__name__}")
    try:
        return [item["result"] for item in payload]
    except (KeyError, TypeError) as e:
        raise PtvDecodeError(f"Result element without 'result' field: {e}") from e


def _extract_values(payload: Any) -> list[Any]:
    """Return only the ``values`` field of an object envelope."""
    if not isinstance(payload, dict) or "values" not in payload:
        raise PtvDecodeError("Expected an object with a 'values' field")
    values: list[Any] = payload["values"]
    return values


class PtvTimetableClient(TimetableClient):
    """Client for the PTV timetable API (v2).

    Example:
        async with aiohttp.ClientSession() as session:
            client = PtvTimetableClient(1000000, "secret", session=session)
            stops = await client.stops_nearby(-37.8239, 144.9462)
    """

    def __init__(
        self,
        developer_id: int,
        secret_key: str,
        session: "ClientSession | None" = None,
        *,
        base_url: str = PTV_BASE_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize with the developer id and secret key issued by PTV.

        Args:
            developer_id: Developer id (devid).
            secret_key: API key used to sign requests.
            session: Optional shared aiohttp ClientSession.
            base_url: Scheme and host of the API.
            timeout_seconds: Timeout used when no session is shared.
        """
        self._credentials = Credentials(developer_id=developer_id, secret_key=secret_key)
        self._http_client = PtvHttpClient(
            self._credentials,
            session=session,
            base_url=base_url,
            timeout_seconds=timeout_seconds,
        )

    @classmethod
    def from_config(
        cls, config: "AppConfig", session: "ClientSession | None" = None
    ) -> "PtvTimetableClient":
        """Create a client from application configuration."""
        credentials = config.require_credentials()
        return cls(
            credentials.developer_id,
            credentials.secret_key.get_secret_value(),
            session=session,
            base_url=config.base_url,
            timeout_seconds=config.timeout_seconds,
        )

    @property
    def developer_id(self) -> int:
        return self._credentials.developer_id

    @property
    def active_requests(self) -> int:
        """Number of requests currently awaiting a response (diagnostics only)."""
        return self._http_client.active_requests

    async def healthcheck(self) -> Any:
        """Return the output of the health check."""
        params = {"timestamp": format_datetime(_utc_now(), usegmt=True)}
        return await self._http_client.get_json(HEALTHCHECK_PATH, params)

    async def stops_nearby(self, latitude: float | str, longitude: float | str) -> list[Any]:
        """Return up to 30 stops nearest to a coordinate.

        Args:
            latitude: Latitude in decimal degrees.
            longitude: Longitude in decimal degrees.

        Returns:
            The ``result`` object of each element of the response.
        """
        path = NEARME_PATH.format(
            latitude=_format_number(latitude), longitude=_format_number(longitude)
        )
        return _unwrap_results(await self._http_client.get_json(path))

    async def transport_pois_by_map(
        self,
        poi: str | list[int],
        lat1: float | str,
        long1: float | str,
        lat2: float | str,
        long2: float | str,
        griddepth: int | str,
        limit: int | str,
    ) -> Any:
        """Return stops and/or myki ticket outlets within a bounding box.

        Args:
            poi: PointOfInterest codes, as a list or a comma-separated string.
            lat1: Latitude of the top left corner.
            long1: Longitude of the top left corner.
            lat2: Latitude of the bottom right corner.
            long2: Longitude of the bottom right corner.
            griddepth: Number of cell blocks per cluster.
            limit: Minimum number of POIs per cluster and maximum number returned.
        """
        path = POI_PATH.format(
            poi=_format_list(poi),
            lat1=_format_number(lat1),
            long1=_format_number(long1),
            lat2=_format_number(lat2),
            long2=_format_number(long2),
            griddepth=_format_number(griddepth),
            limit=_format_number(limit),
        )
        return await self._http_client.get_json(path)

    async def search(self, query: str) -> Any:
        """Return all stops and lines matching the search terms (may include suburb and mode)."""
        return await self._http_client.get_json(SEARCH_PATH.format(query=_format_text(query)))

    async def broad_next_departures(
        self, mode: TransportMode | int, stop: int | str, limit: int | str
    ) -> list[Any]:
        """Return the next departures at a stop for any line and direction.

        Only the ``values`` field of the response is returned.
        """
        path = BROAD_DEPARTURES_PATH.format(
            mode=_format_number(mode), stop=_format_number(stop), limit=_format_number(limit)
        )
        return _extract_values(await self._http_client.get_json(path))

    async def specific_next_departures(
        self,
        mode: TransportMode | int,
        line: int | str,
        stop: int | str,
        direction_id: int | str,
        limit: int | str,
        for_utc: datetime | None = None,
    ) -> Any:
        """Return the next departures at a stop for one line and direction.

        Args:
            mode: Route type of the stop.
            line: line_id of the service.
            stop: stop_id of the stop.
            direction_id: direction_id of the service.
            limit: Number of departures to return.
            for_utc: Starting date/time; defaults to now.
        """
        path = SPECIFIC_DEPARTURES_PATH.format(
            mode=_format_number(mode),
            line=_format_number(line),
            stop=_format_number(stop),
            direction_id=_format_number(direction_id),
            limit=_format_number(limit),
        )
        params = {"for_utc": _format_utc(for_utc or _utc_now())}
        return await self._http_client.get_json(path, params)

    async def stopping_pattern(
        self,
        mode: TransportMode | int,
        run: int | str,
        stop: int | str,
        for_utc: datetime | None = None,
    ) -> Any:
        """Return the stopping pattern (details of the service) of a run.

        The stop is part of the request path, but the API ignores it: the
        response is the same for any stop. Do not rely on it to filter results.
        """
        path = STOPPING_PATTERN_PATH.format(
            mode=_format_number(mode), run=_format_number(run), stop=_format_number(stop)
        )
        params = {"for_utc": _format_utc(for_utc or _utc_now())}
        return await self._http_client.get_json(path, params)

    async def stops_on_a_line(self, mode: TransportMode | int, line: int | str) -> Any:
        """Return all stops on a line."""
        path = STOPS_FOR_LINE_PATH.format(mode=_format_number(mode), line=_format_number(line))
        return await self._http_client.get_json(path)

    async def lines_by_mode(self, mode: TransportMode | int, name: str | None = None) -> Any:
        """Return all lines of a mode, optionally only those whose name contains ``name``."""
        params = {"name": name} if name is not None else {}
        return await self._http_client.get_json(
            LINES_BY_MODE_PATH.format(mode=_format_number(mode)), params
        )

    async def stop_facilities(
        self,
        stop: int | str,
        mode: TransportMode | int,
        location: bool | str | None = None,
        amenity: bool | str | None = None,
        accessibility: bool | str | None = None,
    ) -> Any:
        """Return the facilities at a metro train or V/Line stop.

        The API only honours the location, amenity and accessibility toggles
        when all three are given; with a partial set it returns none of them.
        This client therefore sends either all three or none and raises
        ValueError for a partial set.

        Args:
            stop: stop_id of the stop.
            mode: Either TransportMode.TRAIN or TransportMode.VLINE.
            location: Include location information.
            amenity: Include amenity information.
            accessibility: Include accessibility information.
        """
        flags = {"location": location, "amenity": amenity, "accessibility": accessibility}
        supplied = [name for name, value in flags.items() if value is not None]
        if supplied and len(supplied) != len(flags):
            raise ValueError(
                "location, amenity and accessibility must be given together "
                f"(got only {', '.join(supplied)})"
            )

        params = {"stop_id": _format_number(stop), "route_type": _format_number(mode)}
        params.update(
            {name: _format_flag(value) for name, value in flags.items() if value is not None}
        )
        return await self._http_client.get_json(STOP_FACILITIES_PATH, params)

    async def disruptions(self, modes: str | list[str]) -> Any:
        """Return planned and unplanned disruptions.

        Args:
            modes: DisruptionMode values, as a list or a comma-separated string.
        """
        return await self._http_client.get_json(DISRUPTIONS_PATH.format(modes=_format_list(modes)))


def create_client(
    developer_id: int, secret_key: str, session: "ClientSession | None" = None
) -> PtvTimetableClient:
    """Create a timetable client."""
    return PtvTimetableClient(developer_id, secret_key, session=session)
