"""PTV timetable API adapters."""

from ptv_timetable.adapters.ptv_api.http_client import PtvHttpClient
from ptv_timetable.adapters.ptv_api.signer import sign, sign_request
from ptv_timetable.adapters.ptv_api.timetable_client import PtvTimetableClient, create_client

__all__ = ["PtvHttpClient", "PtvTimetableClient", "create_client", "sign", "sign_request"]
