"""Configuration contracts."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

AUTH_MODES = ("auto", "token", "env", "gh-cli")
DEFAULT_HOSTNAME = "github.com"
DEFAULT_API_URL = "https://api.github.com"


class HelperConfig(BaseModel):
    auth: str = "auto"
    token: str | None = None
    hostname: str = DEFAULT_HOSTNAME
    api_url: str = DEFAULT_API_URL
    timeout: float = Field(default=30.0, gt=0)

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def default_api_url(cls, data: Any) -> Any:
        """Point an Enterprise ``hostname`` at its own ``/api/v3`` unless ``api_url`` is given."""
        if not isinstance(data, dict) or data.get("api_url"):
            return data
        hostname = data.get("hostname") or DEFAULT_HOSTNAME
        if hostname == DEFAULT_HOSTNAME:
            return data
        return {**data, "api_url": f"https://{hostname}/api/v3"}

    @model_validator(mode="after")
    def validate_auth_token(self) -> HelperConfig:
        if self.auth not in AUTH_MODES:
            raise ValueError(f"auth must be one of: {', '.join(AUTH_MODES)}")
        token = (self.token or "").strip()
        if self.auth == "token" and not token:
            raise ValueError("token auth requires a non-empty token")
        if token and self.auth not in {"auto", "token"}:
            raise ValueError("token must be unset when auth is 'env' or 'gh-cli'")
        return self
