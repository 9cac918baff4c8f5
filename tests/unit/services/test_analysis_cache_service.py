"""Unit tests for AnalysisCacheService."""

import gzip

import pytest
import pytest_asyncio

from sonarqube.client import SonarClient
from sonarqube.client.core import ValidationError
from sonarqube.client.runtime.rest import BinaryStream, HTTPClient
from sonarqube.client.services import AnalysisCacheClearOption, AnalysisCacheGetOption


@pytest_asyncio.fixture
async def raw_sonar(sonar_server):
    """Client that leaves gzip bodies compressed."""
    http = HTTPClient(auto_decompress=False)
    client = SonarClient(url=sonar_server.base_url, token="squ_test", http_client=http)
    yield client
    await http.close()


class TestGet:
    @pytest.mark.asyncio
    async def test_get_streams_body(self, sonar, sonar_server):
        sonar_server.add("GET", "analysis_cache/get", body=b"\x00\x01cache")

        stream, response = await sonar.analysis_cache.get(
            AnalysisCacheGetOption(project="my_project", branch="main")
        )

        assert isinstance(stream, BinaryStream)
        assert response.status == 200
        assert await stream.read() == b"\x00\x01cache"
        assert sonar_server.last.query_string == "branch=main&project=my_project"

    @pytest.mark.asyncio
    async def test_get_gzip_passthrough(self, raw_sonar, sonar_server):
        compressed = gzip.compress(b"cache-data")
        sonar_server.add(
            "GET",
            "analysis_cache/get",
            body=compressed,
            headers={"Content-Encoding": "gzip"},
        )

        stream, _ = await raw_sonar.analysis_cache.get(
            AnalysisCacheGetOption(project="my_project", gzip=True)
        )

        async with stream:
            assert stream.content_encoding == "gzip"
            data = await stream.read()

        assert gzip.decompress(data) == b"cache-data"
        assert sonar_server.last.headers["Accept-Encoding"] == "gzip"
        assert "gzip" not in sonar_server.last.query

    @pytest.mark.asyncio
    async def test_get_requires_project(self, sonar, sonar_server):
        with pytest.raises(ValidationError) as exc_info:
            await sonar.analysis_cache.get(AnalysisCacheGetOption(branch="main"))

        assert exc_info.value.field == "Project"
        assert sonar_server.requests == []

    @pytest.mark.asyncio
    async def test_get_requires_options(self, sonar, sonar_server):
        with pytest.raises(ValidationError):
            await sonar.analysis_cache.get(None)

        assert sonar_server.requests == []


class TestClear:
    @pytest.mark.asyncio
    async def test_clear_everything(self, sonar, sonar_server):
        sonar_server.add("POST", "analysis_cache/clear", status=204)

        response = await sonar.analysis_cache.clear()

        assert response.status == 204
        assert sonar_server.last.query_string == ""

    @pytest.mark.asyncio
    async def test_clear_branch_needs_project(self, sonar, sonar_server):
        with pytest.raises(ValidationError) as exc_info:
            await sonar.analysis_cache.clear(AnalysisCacheClearOption(branch="feature/x"))

        assert exc_info.value.field == "Project"
        assert sonar_server.requests == []
