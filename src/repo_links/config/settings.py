"""Application settings using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from repo_links.core.models.provider import ProviderConfig


class Settings(BaseSettings):
    """Settings loaded from REPO_LINKS_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="REPO_LINKS_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # General
    log_level: str = "INFO"

    # Remote used when a provider has no override
    default_remote: str = "origin"

    # Per-provider overrides, e.g. REPO_LINKS_GITLAB__HOSTNAMES='["git.corp"]'
    github: ProviderConfig = ProviderConfig()
    gitlab: ProviderConfig = ProviderConfig()
    bitbucket: ProviderConfig = ProviderConfig()
    visualstudio: ProviderConfig = ProviderConfig()

    def provider_configs(self) -> dict[str, ProviderConfig]:
        """Provider configs keyed by provider name."""
        return {
            "github": self.github,
            "gitlab": self.gitlab,
            "bitbucket": self.bitbucket,
            "visualstudio": self.visualstudio,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
