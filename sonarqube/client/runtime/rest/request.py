"""Request construction from a base URL, an endpoint and an options model."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import aiohttp
from yarl import URL

from ...core.enums import AuthType
from ...core.exceptions import RequestConstructionError
from .query import encode_query, urlencode_pairs

if TYPE_CHECKING:
    from pydantic import BaseModel

__all__ = [
    "DEFAULT_USER_AGENT",
    "Credentials",
    "PreparedRequest",
    "build_request",
    "normalize_base_url",
]

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "sonarqube-client-python"


@dataclass(frozen=True)
class Credentials:
    """Authentication material sent with every request.

    SonarQube accepts user tokens as the Basic auth username with an empty
    password, so both schemes end up as an ``aiohttp.BasicAuth``.
    """

    auth_type: AuthType = AuthType.NONE
    username: str = ""
    password: str = field(default="", repr=False)
    token: str = field(default="", repr=False)

    @classmethod
    def basic(cls, username: str, password: str) -> Credentials:
        return cls(auth_type=AuthType.BASIC, username=username, password=password)

    @classmethod
    def from_token(cls, token: str) -> Credentials:
        return cls(auth_type=AuthType.TOKEN, token=token)

    def to_basic_auth(self) -> aiohttp.BasicAuth | None:
        if self.auth_type is AuthType.BASIC:
            return aiohttp.BasicAuth(self.username, self.password)
        if self.auth_type is AuthType.TOKEN:
            return aiohttp.BasicAuth(self.token, "")
        return None


@dataclass(frozen=True)
class PreparedRequest:
    """Fully resolved request, ready to hand to the HTTP client."""

    method: str
    url: URL
    headers: dict[str, str] = field(default_factory=dict)
    auth: aiohttp.BasicAuth | None = field(default=None, repr=False)

    def with_header(self, name: str, value: str) -> PreparedRequest:
        return PreparedRequest(
            method=self.method,
            url=self.url,
            headers={**self.headers, name: value},
            auth=self.auth,
        )


def normalize_base_url(url: str | URL) -> URL:
    """Parse a base URL and make sure it ends with a slash.

    Raises:
        RequestConstructionError: If the URL is not an absolute http(s) URL.
    """
    text = str(url)
    if not text.endswith("/"):
        text += "/"
    try:
        parsed = URL(text)
    except (TypeError, ValueError) as exc:
        raise RequestConstructionError(f"failed to parse URL: {exc}", url=text) from exc
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise RequestConstructionError(
            f"base URL must be an absolute http(s) URL, got {text!r}", url=text
        )
    return parsed


def build_request(
    method: str,
    base_url: URL,
    endpoint: str,
    credentials: Credentials,
    options: BaseModel | None = None,
    *,
    user_agent: str = DEFAULT_USER_AGENT,
) -> PreparedRequest:
    """Build a request for ``endpoint`` relative to ``base_url``.

    Options are always carried in the query string, for POST as well as GET,
    which is how the SonarQube web API expects its parameters.

    Raises:
        RequestConstructionError: If the endpoint cannot be joined to the base URL.
    """
    method = method.upper()
    root = str(base_url.with_query(None).with_fragment(None))
    if not root.endswith("/"):
        root += "/"
    query = urlencode_pairs(encode_query(options))
    target = root + endpoint.lstrip("/")
    if query:
        target = f"{target}?{query}"

    try:
        url = URL(target, encoded=True)
    except (TypeError, ValueError) as exc:
        raise RequestConstructionError(f"failed to create request: {exc}", url=target) from exc

    headers = {"Accept": "application/json", "User-Agent": user_agent}
    if method in ("POST", "PUT"):
        headers["Content-Type"] = "application/json"

    logger.debug("Built request", extra={"method": method, "url": str(url)})
    return PreparedRequest(
        method=method,
        url=url,
        headers=headers,
        auth=credentials.to_basic_auth(),
    )
