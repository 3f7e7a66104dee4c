"""Timetable client port."""

from datetime import datetime
from typing import Any, Protocol

from ptv_timetable.domain.models.transport_mode import TransportMode


class TimetableClient(Protocol):
    """Port for querying the PTV timetable API.

    Numeric arguments may also be given as numeric strings.
    """

    @property
    def active_requests(self) -> int:
        """Number of requests currently awaiting a response."""
        ...

    async def healthcheck(self) -> Any:
        """Return the API health check report."""
        ...

    async def stops_nearby(self, latitude: float | str, longitude: float | str) -> list[Any]:
        """Return up to 30 stops nearest to a coordinate."""
        ...

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
        """Return stops and ticket outlets inside a bounding box."""
        ...

    async def search(self, query: str) -> Any:
        """Return stops and lines matching free-text search terms."""
        ...

    async def broad_next_departures(
        self, mode: TransportMode | int, stop: int | str, limit: int | str
    ) -> list[Any]:
        """Return the next departures at a stop for any line and direction."""
        ...

    async def specific_next_departures(
        self,
        mode: TransportMode | int,
        line: int | str,
        stop: int | str,
        direction_id: int | str,
        limit: int | str,
        for_utc: datetime | None = None,
    ) -> Any:
        """Return the next departures at a stop for one line and direction."""
        ...

    async def stopping_pattern(
        self,
        mode: TransportMode | int,
        run: int | str,
        stop: int | str,
        for_utc: datetime | None = None,
    ) -> Any:
        """Return the stopping pattern of a run."""
        ...

    async def stops_on_a_line(self, mode: TransportMode | int, line: int | str) -> Any:
        """Return all stops on a line."""
        ...

    async def lines_by_mode(self, mode: TransportMode | int, name: str | None = None) -> Any:
        """Return all lines of a transport mode, optionally filtered by name."""
        ...

    async def stop_facilities(
        self,
        stop: int | str,
        mode: TransportMode | int,
        location: bool | str | None = None,
        amenity: bool | str | None = None,
        accessibility: bool | str | None = None,
    ) -> Any:
        """Return the facilities at a train or V/Line stop."""
        ...

    async def disruptions(self, modes: str | list[str]) -> Any:
        """Return planned and unplanned disruptions for the given modes."""
        ...
