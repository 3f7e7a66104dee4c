"""Client for the Public Transport Victoria timetable API."""

from ptv_timetable.adapters.ptv_api import PtvTimetableClient, create_client, sign
from ptv_timetable.domain import (
    Credentials,
    DisruptionMode,
    PointOfInterest,
    PtvDecodeError,
    PtvError,
    PtvTransportError,
    TransportMode,
)

__all__ = [
    "Credentials",
    "DisruptionMode",
    "PointOfInterest",
    "PtvDecodeError",
    "PtvError",
    "PtvTimetableClient",
    "PtvTransportError",
    "TransportMode",
    "create_client",
    "sign",
]
