"""REST runtime: query encoding, request building and response handling."""

from .http_client import HTTPClient
from .query import QueryEncodable, QueryParam, encode_query, urlencode_pairs
from .request import Credentials, PreparedRequest, build_request, normalize_base_url
from .transport import BinaryStream, check_response, execute, parse_error_message

__all__ = [
    "HTTPClient",
    "QueryEncodable",
    "QueryParam",
    "encode_query",
    "urlencode_pairs",
    "Credentials",
    "PreparedRequest",
    "build_request",
    "normalize_base_url",
    "BinaryStream",
    "check_response",
    "execute",
    "parse_error_message",
]
