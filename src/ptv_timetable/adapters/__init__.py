"""Adapters layer - external system integrations."""

from ptv_timetable.adapters.config import AppConfig
from ptv_timetable.adapters.ptv_api import PtvHttpClient, PtvTimetableClient

__all__ = ["AppConfig", "PtvHttpClient", "PtvTimetableClient"]
