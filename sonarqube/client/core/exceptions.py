"""Custom exception hierarchy.

Four disjoint error kinds are raised by the request pipeline:

- ``ValidationError``: caller input rejected before any network I/O
- ``RequestConstructionError``: client misconfiguration (bad base URL)
- ``TransportError``: network failure while sending or receiving
- ``APIError``: the server answered with a non-success status

Callers tell them apart with ``isinstance``, never by message text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .enums import ValidationErrorKind

if TYPE_CHECKING:
    import aiohttp


class SonarError(Exception):
    """Base exception for all library errors."""

    pass


class ValidationError(SonarError):
    """Caller input violates a documented constraint.

    Always raised before a request is built, so no partial request is ever sent.
    """

    def __init__(self, field: str, message: str, kind: ValidationErrorKind) -> None:
        super().__init__(f'validation error for field "{field}": {message} ({kind.value})')
        self.field = field
        self.message = message
        self.kind = kind


class RequestConstructionError(SonarError):
    """Request could not be built from the client configuration."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class TransportError(SonarError):
    """Network failure while sending a request or reading its response."""

    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        response: aiohttp.ClientResponse | None = None,
    ) -> None:
        super().__init__(message)
        self.cause = cause
        self.response = response


class ResponseDecodeError(TransportError):
    """A success response body did not match the declared result shape."""

    pass


class APIError(SonarError):
    """Non-success HTTP response returned by the server."""

    def __init__(
        self,
        message: str,
        status_code: int,
        *,
        method: str | None = None,
        url: str | None = None,
        body: str | None = None,
        response: aiohttp.ClientResponse | None = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.method = method
        self.url = url
        self.body = body
        self.response = response
        super().__init__(self._render())

    def _render(self) -> str:
        if self.method and self.url:
            return f"{self.method} {self.url}: {self.status_code} {self.message}"
        return f"{self.status_code} {self.message}"
