"""Signed request domain model."""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from urllib.parse import quote, urlencode

# Characters left unescaped in query values, matching the querystring encoding
# the API documentation uses when computing signatures.
QUERY_SAFE_CHARACTERS = "!'()*"


def encode_query(params: Mapping[str, str]) -> str:
    """Encode query parameters in insertion order.

    The same encoding is used for signing and for sending, so the two always agree.
    """
    return urlencode(list(params.items()), quote_via=quote, safe=QUERY_SAFE_CHARACTERS)


@dataclass(frozen=True)
class SignedRequest:
    """A request path and parameter set bound to the signature computed over them."""

    path: str
    query_params: Mapping[str, str]
    signature: str

    def __post_init__(self) -> None:
        # Snapshot the parameters so the query cannot drift from the signature.
        object.__setattr__(self, "query_params", MappingProxyType(dict(self.query_params)))

    @property
    def query_string(self) -> str:
        """Encoded query string including the signature."""
        signed = encode_query({"signature": self.signature})
        unsigned = encode_query(self.query_params)
        return f"{unsigned}&{signed}" if unsigned else signed
