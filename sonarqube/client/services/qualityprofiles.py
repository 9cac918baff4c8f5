"""Quality profile rule activation endpoints (``api/qualityprofiles``)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated

from pydantic import Field

from ..core.constants import IMPACT_SEVERITIES, SEVERITIES, SOFTWARE_QUALITIES
from ..core.enums import QueryEncoding
from ..core.validation import (
    validate_map_keys,
    validate_map_values,
    validate_mutually_exclusive,
    validate_options_present,
    validate_required,
    validate_value_authorized,
)
from ..runtime.rest.query import QueryParam
from .base import BaseService, Options

if TYPE_CHECKING:
    import aiohttp


class QualityprofilesActivateRuleOption(Options):
    """Options of ``qualityprofiles/activate_rule``.

    ``impacts`` overrides impact severities per software quality, e.g.
    ``{"MAINTAINABILITY": "HIGH"}``, and cannot be combined with ``severity``.
    ``params`` is ignored by the server when ``reset`` is true.
    """

    key: Annotated[str, QueryParam("key")] = ""
    rule: Annotated[str, QueryParam("rule")] = ""
    impacts: Annotated[dict[str, str], QueryParam("impacts", QueryEncoding.SEMICOLON_MAP)] = (
        Field(default_factory=dict)
    )
    params: Annotated[dict[str, str], QueryParam("params", QueryEncoding.SEMICOLON_MAP)] = (
        Field(default_factory=dict)
    )
    prioritized_rule: Annotated[bool | None, QueryParam("prioritizedRule")] = None
    reset: Annotated[bool, QueryParam("reset")] = False
    severity: Annotated[str, QueryParam("severity")] = ""


class QualityprofilesDeactivateRuleOption(Options):
    key: Annotated[str, QueryParam("key")] = ""
    rule: Annotated[str, QueryParam("rule")] = ""


class QualityprofilesService(BaseService):
    """Activate and deactivate rules on quality profiles."""

    def validate_activate_rule_opt(self, opt: QualityprofilesActivateRuleOption | None) -> None:
        validate_options_present(opt)
        validate_required(opt.key, "Key")
        validate_required(opt.rule, "Rule")
        validate_mutually_exclusive("Impacts", opt.impacts, "Severity", opt.severity)
        validate_value_authorized(opt.severity, SEVERITIES, "Severity")
        validate_map_keys(opt.impacts, SOFTWARE_QUALITIES, "Impacts")
        validate_map_values(opt.impacts, IMPACT_SEVERITIES, "Impacts")

    def validate_deactivate_rule_opt(
        self, opt: QualityprofilesDeactivateRuleOption | None
    ) -> None:
        validate_options_present(opt)
        validate_required(opt.key, "Key")
        validate_required(opt.rule, "Rule")

    async def activate_rule(
        self, opt: QualityprofilesActivateRuleOption | None
    ) -> aiohttp.ClientResponse:
        """Activate a rule on a quality profile, or update an active rule.

        Requires the 'Administer Quality Profiles' permission or edit rights
        on the profile.

        API endpoint: POST /api/qualityprofiles/activate_rule.
        """
        self.validate_activate_rule_opt(opt)
        _, response = await self._call("POST", "qualityprofiles/activate_rule", opt)
        return response

    async def deactivate_rule(
        self, opt: QualityprofilesDeactivateRuleOption | None
    ) -> aiohttp.ClientResponse:
        """Deactivate a rule on a quality profile.

        API endpoint: POST /api/qualityprofiles/deactivate_rule.
        """
        self.validate_deactivate_rule_opt(opt)
        _, response = await self._call("POST", "qualityprofiles/deactivate_rule", opt)
        return response
