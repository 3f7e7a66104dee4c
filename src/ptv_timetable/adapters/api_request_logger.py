"""Utility for logging API requests when PTV_LOG_REQUESTS is enabled."""

import logging
import os
from collections.abc import Mapping

from ptv_timetable.domain.models.signed_request import encode_query

logger = logging.getLogger(__name__)

SENSITIVE_PARAMS = frozenset({"devid", "signature"})


def should_log_requests() -> bool:
    """Check if request logging is enabled via PTV_LOG_REQUESTS environment variable."""
    return os.getenv("PTV_LOG_REQUESTS", "").lower() == "true"


def _redact_sensitive_params(params: Mapping[str, str]) -> dict[str, str]:
    """Redact credential-derived parameters from logging."""
    return {k: "***REDACTED***" if k.lower() in SENSITIVE_PARAMS else v for k, v in params.items()}


def _build_url_with_params(url: str, params: Mapping[str, str] | None) -> str:
    """Build full URL with query parameters in request order."""
    if not params:
        return url
    param_str = encode_query(_redact_sensitive_params(params))
    return f"{url}?{param_str}" if "?" not in url else f"{url}&{param_str}"


def log_api_request(method: str, url: str, params: Mapping[str, str] | None = None) -> None:
    """Log API request details if PTV_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method (GET, POST, etc.).
        url: Request URL without query string.
        params: Query parameters (optional, devid and signature are redacted).
    """
    if not should_log_requests():
        return

    logger.info(f"API Request: {method} {_build_url_with_params(url, params)}")
