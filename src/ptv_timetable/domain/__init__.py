"""Domain layer - models, errors and ports."""

from ptv_timetable.domain.exceptions import PtvDecodeError, PtvError, PtvTransportError
from ptv_timetable.domain.models import (
    Credentials,
    DisruptionMode,
    PointOfInterest,
    SignedRequest,
    TransportMode,
)
from ptv_timetable.domain.ports import TimetableClient

__all__ = [
    "Credentials",
    "DisruptionMode",
    "PointOfInterest",
    "PtvDecodeError",
    "PtvError",
    "PtvTransportError",
    "SignedRequest",
    "TimetableClient",
    "TransportMode",
]
