"""Domain models for the PTV timetable API."""

from ptv_timetable.domain.models.credentials import Credentials
from ptv_timetable.domain.models.signed_request import SignedRequest, encode_query
from ptv_timetable.domain.models.transport_mode import (
    DisruptionMode,
    PointOfInterest,
    TransportMode,
)

__all__ = [
    "Credentials",
    "DisruptionMode",
    "PointOfInterest",
    "SignedRequest",
    "TransportMode",
    "encode_query",
]
