"""Ports (interfaces) for the ports-and-adapters architecture."""

from ptv_timetable.domain.ports.timetable_client import TimetableClient

__all__ = ["TimetableClient"]
