"""HMAC-SHA1 request signing for the PTV timetable API.

The signature covers the request from the versioned root (inclusive) up to and
including the last query parameter:

    /v2/healthcheck?timestamp=...&devid=1000000

It is the upper-case hex HMAC-SHA1 digest keyed with the developer's secret key
and is sent as the ``signature`` query parameter.
"""

import hashlib
import hmac
from collections.abc import Mapping

from ptv_timetable.adapters.ptv_api.constants import DEVID_PARAM, VERSIONED_ROOT
from ptv_timetable.domain.models.credentials import Credentials
from ptv_timetable.domain.models.signed_request import SignedRequest, encode_query


def build_canonical_request(path: str, params: Mapping[str, str]) -> str:
    """Build the string the signature is computed over."""
    query = encode_query(params)
    if not query:
        return f"{VERSIONED_ROOT}{path}"
    return f"{VERSIONED_ROOT}{path}?{query}"


def sign(secret_key: str, path: str, params: Mapping[str, str]) -> str:
    """Return the signature token for a request.

    Args:
        secret_key: API key issued by PTV.
        path: Request path below the versioned root, without query string.
        params: Query parameters in the order they will be sent, devid included.

    Returns:
        Upper-case hexadecimal HMAC-SHA1 digest.
    """
    canonical = build_canonical_request(path, params)
    digest = hmac.new(secret_key.encode("utf-8"), canonical.encode("utf-8"), hashlib.sha1)
    return digest.hexdigest().upper()


def sign_request(
    credentials: Credentials, path: str, params: Mapping[str, str] | None = None
) -> SignedRequest:
    """Add the developer id to the parameters and sign the request."""
    query = dict(params or {})
    query[DEVID_PARAM] = str(credentials.developer_id)
    signature = sign(credentials.secret_key.get_secret_value(), path, query)
    return SignedRequest(path=path, query_params=query, signature=signature)
