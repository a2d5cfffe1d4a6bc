"""Environment configuration for the control-plane client.

Values come from ``APPCTL_*`` environment variables (or a local
``.env`` file).  The access token is additionally accepted from
``FLY_API_TOKEN`` so existing platform credentials keep working.
"""

from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from appctl.version import __version__


class ClientSettings(BaseSettings):
    """Settings consumed by :class:`~appctl.infra.graphql_client.GraphQLControlPlaneClient`."""

    model_config = SettingsConfigDict(
        env_prefix="APPCTL_",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default="https://api.fly.io",
        min_length=8,
        description="Base URL of the control plane; GraphQL lives under /graphql.",
    )
    access_token: str | None = Field(
        default=None,
        validation_alias=AliasChoices("APPCTL_ACCESS_TOKEN", "FLY_API_TOKEN"),
        description="Bearer token for the control plane.",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default=f"appctl/{__version__}",
        min_length=1,
        description="User-Agent header sent with every request.",
    )

    @property
    def graphql_url(self) -> str:
        return self.api_base_url.rstrip("/") + "/graphql"
