"""Unit tests for request construction."""

from __future__ import annotations

from typing import Annotated

import aiohttp
import pytest
from pydantic import BaseModel
from yarl import URL

from sonarqube.client.core import AuthType, QueryEncoding, RequestConstructionError
from sonarqube.client.runtime.rest import (
    Credentials,
    QueryParam,
    build_request,
    normalize_base_url,
)
from sonarqube.client.runtime.rest.request import DEFAULT_USER_AGENT

BASE = URL("https://sonar.example.com/api/")


class TagsOption(BaseModel):
    project: Annotated[str, QueryParam("project")] = ""
    tags: Annotated[list[str], QueryParam("tags", QueryEncoding.COMMA)] = []


class TestNormalizeBaseURL:
    def test_appends_trailing_slash(self):
        assert str(normalize_base_url("https://sonar.example.com/api")) == (
            "https://sonar.example.com/api/"
        )

    def test_keeps_existing_slash(self):
        assert str(normalize_base_url("http://localhost:9000/api/")) == (
            "http://localhost:9000/api/"
        )

    @pytest.mark.parametrize("url", ["sonar.example.com/api", "ftp://sonar/api", "http:///api"])
    def test_rejects_non_http_urls(self, url):
        with pytest.raises(RequestConstructionError):
            normalize_base_url(url)


class TestBuildRequest:
    def test_joins_endpoint_to_base(self):
        request = build_request("get", BASE, "server/version", Credentials())
        assert request.method == "GET"
        assert str(request.url) == "https://sonar.example.com/api/server/version"

    def test_leading_slash_does_not_double(self):
        request = build_request("GET", BASE, "/server/version", Credentials())
        assert str(request.url) == "https://sonar.example.com/api/server/version"

    def test_base_without_trailing_slash(self):
        request = build_request("GET", URL("https://sonar.example.com/api"), "x", Credentials())
        assert str(request.url) == "https://sonar.example.com/api/x"

    def test_options_in_query_for_post(self):
        option = TagsOption(project="my proj", tags=["a", "b"])
        request = build_request("POST", BASE, "project_tags/set", Credentials(), option)
        assert request.url.raw_query_string == "project=my+proj&tags=a%2Cb"
        assert request.url.query["tags"] == "a,b"

    def test_no_query_without_options(self):
        request = build_request("GET", BASE, "system/ping", Credentials(), TagsOption())
        assert request.url.raw_query_string == ""

    def test_default_headers(self):
        request = build_request("GET", BASE, "system/ping", Credentials())
        assert request.headers["Accept"] == "application/json"
        assert request.headers["User-Agent"] == DEFAULT_USER_AGENT
        assert "Content-Type" not in request.headers

    def test_post_sets_content_type(self):
        request = build_request("POST", BASE, "x", Credentials(), user_agent="ci-bot/1.0")
        assert request.headers["Content-Type"] == "application/json"
        assert request.headers["User-Agent"] == "ci-bot/1.0"

    def test_with_header_returns_copy(self):
        request = build_request("GET", BASE, "x", Credentials())
        changed = request.with_header("Accept", "text/plain")
        assert changed.headers["Accept"] == "text/plain"
        assert request.headers["Accept"] == "application/json"


class TestCredentials:
    def test_basic(self):
        credentials = Credentials.basic("admin", "secret")
        assert credentials.auth_type is AuthType.BASIC
        assert credentials.to_basic_auth() == aiohttp.BasicAuth("admin", "secret")

    def test_token_is_username_with_empty_password(self):
        credentials = Credentials.from_token("squ_abc")
        assert credentials.auth_type is AuthType.TOKEN
        assert credentials.to_basic_auth() == aiohttp.BasicAuth("squ_abc", "")

    def test_anonymous(self):
        assert Credentials().to_basic_auth() is None

    def test_secrets_hidden_from_repr(self):
        assert "secret" not in repr(Credentials.basic("admin", "secret"))

    def test_auth_attached_to_request(self):
        request = build_request("GET", BASE, "x", Credentials.from_token("squ_abc"))
        assert request.auth == aiohttp.BasicAuth("squ_abc", "")
