"""Response handling: status checks, error parsing and body decoding.

``execute`` is the single place where a prepared request meets the network.
The declared result type picks the decoding strategy:

- ``None``: body ignored (void endpoints)
- ``str``: body returned as text, requested with ``Accept: text/plain``
- ``BinaryStream``: body left open and handed to the caller
- anything else: body decoded as JSON through a pydantic ``TypeAdapter``

The response is released on every path except a successful ``BinaryStream``
call, where the caller takes ownership of it.
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import AsyncIterator
from functools import lru_cache
from typing import TYPE_CHECKING, Any

import aiohttp
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ...core.enums import ResultKind
from ...core.exceptions import APIError, ResponseDecodeError, TransportError

if TYPE_CHECKING:
    from .http_client import HTTPClient
    from .request import PreparedRequest

__all__ = [
    "SUCCESS_STATUSES",
    "BinaryStream",
    "check_response",
    "execute",
    "parse_error_message",
    "result_kind_for",
]

logger = logging.getLogger(__name__)

SUCCESS_STATUSES = frozenset({200, 201, 202, 204, 304})
NO_CONTENT_STATUSES = frozenset({204, 304})


class BinaryStream:
    """Open response body handed over to the caller.

    Use it as an async context manager, or call ``close()`` when done:

        >>> async with stream:
        ...     async for chunk in stream.iter_chunks():
        ...         sink.write(chunk)
    """

    def __init__(self, response: aiohttp.ClientResponse) -> None:
        self.response = response

    @property
    def content(self) -> aiohttp.StreamReader:
        return self.response.content

    @property
    def content_type(self) -> str:
        return self.response.content_type

    @property
    def content_encoding(self) -> str | None:
        return self.response.headers.get("Content-Encoding")

    async def read(self) -> bytes:
        """Read the whole body and release the response."""
        try:
            return await self.response.read()
        finally:
            self.close()

    async def iter_chunks(self, chunk_size: int = 64 * 1024) -> AsyncIterator[bytes]:
        """Yield the body in chunks, releasing the response at the end."""
        try:
            async for chunk in self.response.content.iter_chunked(chunk_size):
                yield chunk
        finally:
            self.close()

    def close(self) -> None:
        self.response.release()

    async def __aenter__(self) -> BinaryStream:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def result_kind_for(result_type: Any) -> ResultKind:
    """Map a declared result type to its decoding strategy."""
    if result_type is None:
        return ResultKind.NONE
    if result_type is str:
        return ResultKind.TEXT
    if result_type is BinaryStream:
        return ResultKind.STREAM
    return ResultKind.JSON


@lru_cache(maxsize=256)
def _adapter(result_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(result_type)


def parse_error_message(raw: Any) -> str:
    """Flatten a decoded JSON error payload into one line.

    Strings are kept, lists render as ``[a, b]`` and objects as
    ``{key: value}`` entries sorted and joined with ``, ``.
    """
    if isinstance(raw, str):
        return raw
    if isinstance(raw, list):
        return "[" + ", ".join(parse_error_message(item) for item in raw) + "]"
    if isinstance(raw, dict):
        entries = sorted(f"{{{key}: {parse_error_message(value)}}}" for key, value in raw.items())
        return ", ".join(entries)
    return f"failed to parse unexpected error type: {type(raw).__name__}"


def _message_from_body(body: str) -> str:
    if not body:
        return ""
    try:
        raw = json.loads(body)
    except ValueError:
        return body
    return parse_error_message(raw)


def _display_url(response: aiohttp.ClientResponse) -> str:
    return str(response.url.with_query(None).with_fragment(None))


async def check_response(response: aiohttp.ClientResponse) -> None:
    """Raise ``APIError`` for any status outside ``SUCCESS_STATUSES``.

    The error body is read best-effort; when it is empty or unreadable the
    HTTP reason phrase is used as the message.
    """
    if response.status in SUCCESS_STATUSES:
        return

    try:
        data = await response.read()
    except (aiohttp.ClientError, asyncio.TimeoutError):
        data = b""
    body = data.decode("utf-8", errors="replace")
    message = _message_from_body(body) or response.reason or ""

    raise APIError(
        message,
        response.status,
        method=response.method,
        url=_display_url(response),
        body=body,
        response=response,
    )


def _decode_json(data: bytes, result_type: Any, response: aiohttp.ClientResponse) -> Any:
    try:
        return _adapter(result_type).validate_json(data)
    except PydanticValidationError as exc:
        raise ResponseDecodeError(
            f"failed to decode response from {_display_url(response)}: {exc}",
            cause=exc,
            response=response,
        ) from exc


def _decode_text(data: bytes, charset: str | None) -> str:
    # Unknown charset names fall back to UTF-8
    try:
        return data.decode(charset or "utf-8", errors="replace")
    except LookupError:
        return data.decode("utf-8", errors="replace")


async def execute(
    http_client: HTTPClient,
    request: PreparedRequest,
    result_type: Any = None,
) -> tuple[Any, aiohttp.ClientResponse]:
    """Send ``request`` and decode its body according to ``result_type``.

    Returns:
        ``(result, response)``. ``result`` is ``None`` for void calls and for
        204/304 responses.

    Raises:
        TransportError: If the request could not be sent or the body read.
        ResponseDecodeError: If a success body does not match ``result_type``.
        APIError: If the server returned a non-success status.
    """
    kind = result_kind_for(result_type)
    if kind is ResultKind.TEXT:
        request = request.with_header("Accept", "text/plain")

    logger.debug(
        "Sending request",
        extra={"method": request.method, "url": str(request.url), "result_kind": kind.value},
    )
    response = await http_client.send(request)

    release = True
    try:
        await check_response(response)
        logger.debug("Received response", extra={"status": response.status})

        if kind is ResultKind.NONE or response.status in NO_CONTENT_STATUSES:
            return None, response

        if kind is ResultKind.STREAM:
            release = False
            return BinaryStream(response), response

        try:
            data = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise TransportError(
                f"failed to read response body: {exc}", cause=exc, response=response
            ) from exc

        if kind is ResultKind.TEXT:
            return _decode_text(data, response.charset), response
        return _decode_json(data, result_type, response), response
    finally:
        if release:
            response.release()
