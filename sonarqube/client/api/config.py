"""Client configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from ..core.constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from ..runtime.rest.request import DEFAULT_USER_AGENT, Credentials

ENV_URL = "SONAR_URL"
ENV_TOKEN = "SONAR_TOKEN"
ENV_USERNAME = "SONAR_USERNAME"
ENV_PASSWORD = "SONAR_PASSWORD"
ENV_TIMEOUT = "SONAR_TIMEOUT"


class ClientConfig(BaseModel):
    """Immutable connection settings for a ``SonarClient``.

    ``url`` is the API root, normally ending in ``/api/``. A token takes
    precedence over a username/password pair when both are set.
    """

    url: str = DEFAULT_BASE_URL
    token: str | None = Field(None, repr=False)
    username: str | None = None
    password: str | None = Field(None, repr=False)
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientConfig:
        """Build a config from ``SONAR_*`` environment variables.

        Unset variables fall back to the model defaults.
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}
        if env.get(ENV_URL):
            values["url"] = env[ENV_URL]
        if env.get(ENV_TOKEN):
            values["token"] = env[ENV_TOKEN]
        if env.get(ENV_USERNAME):
            values["username"] = env[ENV_USERNAME]
        if env.get(ENV_PASSWORD):
            values["password"] = env[ENV_PASSWORD]
        if env.get(ENV_TIMEOUT):
            values["timeout"] = env[ENV_TIMEOUT]
        return cls.model_validate(values)

    def credentials(self) -> Credentials:
        if self.token:
            return Credentials.from_token(self.token)
        if self.username is not None and self.password is not None:
            return Credentials.basic(self.username, self.password)
        return Credentials()
