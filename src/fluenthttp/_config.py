import os
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from ._utils.constants import (
    DEFAULT_MAX_WORKERS,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    ENV_FOLLOW_REDIRECTS,
    ENV_MAX_WORKERS,
    ENV_PROXY,
    ENV_TIMEOUT,
    HEADER_USER_AGENT,
)

_ENV_FIELDS: dict[str, str] = {
    "timeout": ENV_TIMEOUT,
    "follow_redirects": ENV_FOLLOW_REDIRECTS,
    "proxy": ENV_PROXY,
    "max_workers": ENV_MAX_WORKERS,
}


class HttpConfig(BaseModel):
    """Settings for the default transport and the worker pool.

    Timeouts, redirects and proxies are handed to the underlying
    ``httpx.Client``; fluenthttp itself never enforces them.
    """

    model_config = ConfigDict(frozen=True)

    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    follow_redirects: bool = True
    proxy: Optional[str] = None
    max_workers: int = Field(default=DEFAULT_MAX_WORKERS, ge=1)
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls) -> "HttpConfig":
        """Build a configuration from ``FLUENTHTTP_*`` environment variables.

        Unset or empty variables fall back to the field defaults.

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value.
        """
        values: dict[str, Any] = {}
        for field_name, env_var in _ENV_FIELDS.items():
            value = os.getenv(env_var)
            if value:
                values[field_name] = value
        return cls.model_validate(values)

    def client_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for constructing the default ``httpx.Client``."""
        return {
            "timeout": self.timeout,
            "follow_redirects": self.follow_redirects,
            "proxy": self.proxy,
            "headers": {HEADER_USER_AGENT: self.user_agent},
        }
