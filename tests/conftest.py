"""Shared fixtures: an in-process mock SonarQube server and a client bound to it."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from sonarqube.client import SonarClient

Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]


@dataclass
class RecordedRequest:
    method: str
    path: str
    query_string: str
    query: Any
    headers: Any


class MockSonarServer:
    """Routes ``(method, path)`` pairs to canned responses and records every hit."""

    def __init__(self) -> None:
        self.handlers: dict[tuple[str, str], Handler] = {}
        self.requests: list[RecordedRequest] = []
        app = web.Application()
        app.router.add_route("*", "/{tail:.*}", self._dispatch)
        self.server = TestServer(app)

    @property
    def base_url(self) -> str:
        return str(self.server.make_url("/api/"))

    def add(
        self,
        method: str,
        endpoint: str,
        *,
        status: int = 200,
        json: Any = None,
        text: str | None = None,
        body: bytes | None = None,
        headers: dict[str, str] | None = None,
        handler: Handler | None = None,
    ) -> None:
        """Register a response for ``/api/<endpoint>``."""
        if handler is None:

            async def handler(request: web.Request) -> web.StreamResponse:
                if json is not None:
                    return web.json_response(json, status=status, headers=headers)
                if text is not None:
                    return web.Response(text=text, status=status, headers=headers)
                return web.Response(body=body, status=status, headers=headers)

        self.handlers[(method.upper(), f"/api/{endpoint}")] = handler

    @property
    def last(self) -> RecordedRequest:
        assert self.requests, "mock server was never contacted"
        return self.requests[-1]

    async def _dispatch(self, request: web.Request) -> web.StreamResponse:
        self.requests.append(
            RecordedRequest(
                method=request.method,
                path=request.path,
                query_string=request.rel_url.raw_query_string,
                query=request.query,
                headers=request.headers,
            )
        )
        handler = self.handlers.get((request.method, request.path))
        if handler is None:
            return web.json_response({"errors": [{"msg": "Unknown url"}]}, status=404)
        return await handler(request)


@pytest_asyncio.fixture
async def sonar_server():
    mock = MockSonarServer()
    await mock.server.start_server()
    yield mock
    await mock.server.close()


@pytest_asyncio.fixture
async def sonar(sonar_server):
    client = SonarClient(url=sonar_server.base_url, token="squ_test")
    yield client
    await client.close()
