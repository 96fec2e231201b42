"""Per-provider configuration models."""

from pydantic import BaseModel, Field


class ProviderConfig(BaseModel):
    """User overrides for a single hosting provider."""

    remote: str | None = Field(default=None, description="Remote name to use instead of the default")
    hostnames: list[str] = Field(
        default_factory=list, description="Extra hostnames, e.g. a self-hosted GitLab"
    )

    class Config:
        frozen = True
