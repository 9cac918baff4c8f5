"""Shared SonarQube API constants.

Allowed-value sets are plain frozensets. Validators receive them as arguments
so tests can pass their own fixtures.
"""

from __future__ import annotations

DEFAULT_BASE_URL = "http://localhost:9000/api/"
DEFAULT_TIMEOUT = 30.0

# Pagination bounds shared by every list endpoint
MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 500

SEVERITIES = frozenset({"INFO", "MINOR", "MAJOR", "CRITICAL", "BLOCKER"})

IMPACT_SEVERITIES = frozenset({"INFO", "LOW", "MEDIUM", "HIGH", "BLOCKER"})

SOFTWARE_QUALITIES = frozenset({"MAINTAINABILITY", "RELIABILITY", "SECURITY"})

CLEAN_CODE_ATTRIBUTE_CATEGORIES = frozenset(
    {"ADAPTABLE", "CONSISTENT", "INTENTIONAL", "RESPONSIBLE"}
)

ISSUE_TYPES = frozenset({"CODE_SMELL", "BUG", "VULNERABILITY"})

ISSUE_STATUSES = frozenset(
    {"OPEN", "CONFIRMED", "FALSE_POSITIVE", "ACCEPTED", "FIXED", "IN_SANDBOX"}
)

ISSUE_RESOLUTIONS = frozenset({"FALSE-POSITIVE", "WONTFIX", "FIXED", "REMOVED"})

ISSUE_SCOPES = frozenset({"MAIN", "TEST"})

LANGUAGES = frozenset(
    {
        "azureresourcemanager",
        "cloudformation",
        "cs",
        "css",
        "docker",
        "flex",
        "go",
        "ipynb",
        "java",
        "js",
        "json",
        "jsp",
        "kotlin",
        "kubernetes",
        "php",
        "py",
        "ruby",
        "scala",
        "secrets",
        "terraform",
        "text",
        "ts",
        "vbnet",
        "web",
        "xml",
        "yaml",
    }
)

# Project link limits
MAX_LINK_NAME_LENGTH = 128
MAX_LINK_URL_LENGTH = 2048

