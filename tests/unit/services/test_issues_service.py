"""Unit tests for IssuesService."""

from datetime import date

import pytest

from sonarqube.client import SonarClient
from sonarqube.client.core import ValidationError, ValidationErrorKind
from sonarqube.client.services import IssuesAddCommentOption, IssuesSearchOption

SEARCH_RESPONSE = {
    "paging": {"pageIndex": 1, "pageSize": 2, "total": 3},
    "issues": [
        {
            "key": "01fc972e-2a3c-433e-bcae-0bd7f88f5123",
            "component": "my_project:src/Main.java",
            "project": "my_project",
            "rule": "java:S1144",
            "severity": "MAJOR",
            "issueStatus": "OPEN",
            "line": 81,
            "textRange": {"startLine": 81, "endLine": 81, "startOffset": 2, "endOffset": 9},
            "impacts": [{"softwareQuality": "MAINTAINABILITY", "severity": "MEDIUM"}],
            "tags": ["unused"],
            "creationDate": "2024-01-31T13:00:00+0000",
        },
        {"key": "AU-Tpxb", "rule": "py:S101", "type": "CODE_SMELL"},
    ],
    "components": [{"key": "my_project", "qualifier": "TRK", "name": "My Project"}],
    "facets": [],
}


class TestSearch:
    @pytest.mark.asyncio
    async def test_search_decodes_issues(self, sonar, sonar_server):
        sonar_server.add("GET", "issues/search", json=SEARCH_RESPONSE)

        result, response = await sonar.issues.search(
            IssuesSearchOption(projects=["my_project"], page_size=2)
        )

        assert response.status == 200
        assert result.paging.total == 3
        assert result.paging.has_next
        first = result.issues[0]
        assert first.issue_status == "OPEN"
        assert first.text_range.start_offset == 2
        assert first.impacts[0].software_quality == "MAINTAINABILITY"
        assert result.issues[1].line is None
        assert result.components[0].qualifier == "TRK"

    @pytest.mark.asyncio
    async def test_search_query(self, sonar, sonar_server):
        sonar_server.add("GET", "issues/search", json={"issues": []})

        await sonar.issues.search(
            IssuesSearchOption(
                page=2,
                severities=["MAJOR", "BLOCKER"],
                types=["BUG"],
                resolved=False,
                created_after=date(2024, 1, 31),
            )
        )

        assert sonar_server.last.query_string == (
            "p=2&createdAfter=2024-01-31&resolved=false&severities=MAJOR%2CBLOCKER&types=BUG"
        )

    @pytest.mark.asyncio
    async def test_search_without_options(self, sonar, sonar_server):
        sonar_server.add("GET", "issues/search", json={"issues": []})

        result, _ = await sonar.issues.search()

        assert result.issues == []
        assert result.paging.total == 0

    @pytest.mark.parametrize(
        "kwargs,field",
        [
            ({"severities": ["MAJOR", "SEVERE"]}, "Severities"),
            ({"types": ["SECURITY_HOTSPOT"]}, "Types"),
            ({"statuses": ["REOPENED"]}, "Statuses"),
            ({"issue_statuses": ["CLOSED"]}, "IssueStatuses"),
            ({"impact_severities": ["MAJOR"]}, "ImpactSeverities"),
            ({"impact_software_qualities": ["USABILITY"]}, "ImpactSoftwareQualities"),
            ({"clean_code_attribute_categories": ["TIDY"]}, "CleanCodeAttributeCategories"),
            ({"resolutions": ["DUPLICATE"]}, "Resolutions"),
            ({"scopes": ["DOCS"]}, "Scopes"),
            ({"languages": ["py", "cobol-ish"]}, "Languages"),
        ],
    )
    @pytest.mark.asyncio
    async def test_unknown_values_rejected(self, sonar, sonar_server, kwargs, field):
        with pytest.raises(ValidationError) as exc_info:
            await sonar.issues.search(IssuesSearchOption(**kwargs))

        assert exc_info.value.field == field
        assert exc_info.value.kind is ValidationErrorKind.INVALID_VALUE
        assert sonar_server.requests == []

    def test_known_languages_accepted(self):
        SonarClient().issues.validate_search_opt(IssuesSearchOption(languages=["py", "java"]))

    @pytest.mark.asyncio
    async def test_page_zero_rejected(self, sonar, sonar_server):
        with pytest.raises(ValidationError) as exc_info:
            await sonar.issues.search(IssuesSearchOption(page=0))

        assert exc_info.value.field == "Page"
        assert sonar_server.requests == []


class TestAddComment:
    @pytest.mark.asyncio
    async def test_add_comment(self, sonar, sonar_server):
        sonar_server.add(
            "POST",
            "issues/add_comment",
            json={
                "issue": {
                    "key": "AU-Tpxb",
                    "comments": [
                        {"key": "c1", "login": "admin", "markdown": "Looks *fine*"}
                    ],
                }
            },
        )

        result, _ = await sonar.issues.add_comment(
            IssuesAddCommentOption(issue="AU-Tpxb", text="Looks *fine*")
        )

        assert result.issue.comments[0].markdown == "Looks *fine*"
        assert sonar_server.last.query["text"] == "Looks *fine*"

    @pytest.mark.parametrize(
        "option,field",
        [
            (IssuesAddCommentOption(text="hello"), "Issue"),
            (IssuesAddCommentOption(issue="AU-Tpxb"), "Text"),
        ],
    )
    @pytest.mark.asyncio
    async def test_required_fields(self, sonar, sonar_server, option, field):
        with pytest.raises(ValidationError) as exc_info:
            await sonar.issues.add_comment(option)

        assert exc_info.value.field == field
        assert sonar_server.requests == []
