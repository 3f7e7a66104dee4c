"""Configuration adapters."""

from ptv_timetable.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
