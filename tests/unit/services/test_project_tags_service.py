"""Unit tests for ProjectTagsService."""

import pytest

from sonarqube.client.core import ValidationError, ValidationErrorKind
from sonarqube.client.services import (
    ProjectTagsSearch,
    ProjectTagsSearchOption,
    ProjectTagsSetOption,
)


class TestSearch:
    @pytest.mark.asyncio
    async def test_search(self, sonar, sonar_server):
        sonar_server.add("GET", "project_tags/search", json={"tags": ["finance", "offshore"]})

        result, response = await sonar.project_tags.search(
            ProjectTagsSearchOption(query="fin", page_size=10)
        )

        assert result == ProjectTagsSearch(tags=["finance", "offshore"])
        assert response.status == 200
        assert sonar_server.last.query_string == "ps=10&q=fin"

    @pytest.mark.asyncio
    async def test_search_without_options(self, sonar, sonar_server):
        sonar_server.add("GET", "project_tags/search", json={"tags": []})

        result, _ = await sonar.project_tags.search()

        assert result.tags == []
        assert sonar_server.last.query_string == ""

    @pytest.mark.asyncio
    async def test_search_rejects_page_size(self, sonar, sonar_server):
        with pytest.raises(ValidationError) as exc_info:
            await sonar.project_tags.search(ProjectTagsSearchOption(page_size=501))

        assert exc_info.value.field == "PageSize"
        assert sonar_server.requests == []


class TestSet:
    @pytest.mark.asyncio
    async def test_set_tags(self, sonar, sonar_server):
        sonar_server.add("POST", "project_tags/set", status=204)

        response = await sonar.project_tags.set(
            ProjectTagsSetOption(project="my_project", tags=["finance", "offshore"])
        )

        assert response.status == 204
        assert sonar_server.last.query["tags"] == "finance,offshore"

    @pytest.mark.asyncio
    async def test_clear_tags_sends_empty_parameter(self, sonar, sonar_server):
        sonar_server.add("POST", "project_tags/set", status=204)

        await sonar.project_tags.set(ProjectTagsSetOption(project="my_project"))

        assert sonar_server.last.query_string == "project=my_project&tags="

    @pytest.mark.asyncio
    async def test_missing_options_never_reach_server(self, sonar, sonar_server):
        with pytest.raises(ValidationError) as exc_info:
            await sonar.project_tags.set(None)

        assert exc_info.value.kind is ValidationErrorKind.MISSING_REQUIRED
        assert sonar_server.requests == []

    @pytest.mark.asyncio
    async def test_project_required(self, sonar, sonar_server):
        with pytest.raises(ValidationError) as exc_info:
            await sonar.project_tags.set(ProjectTagsSetOption(tags=["a"]))

        assert exc_info.value.field == "Project"
        assert sonar_server.requests == []
