"""Factory for creating hosting providers and probing them in order."""

from collections.abc import Mapping

import structlog

from repo_links.core.exceptions import ConfigurationError
from repo_links.core.models import ProviderConfig, UrlInfo, UrlParams
from repo_links.providers.azure import AzureDevOpsProvider
from repo_links.providers.base import BaseProvider, RemoteFinder
from repo_links.providers.bitbucket import BitbucketProvider
from repo_links.providers.github import GithubProvider
from repo_links.providers.gitlab import GitlabProvider

logger = structlog.get_logger(__name__)

# Probe order
PROVIDERS: list[type[BaseProvider]] = [
    BitbucketProvider,
    GitlabProvider,
    GithubProvider,
    AzureDevOpsProvider,
]


class ProviderFactory:
    """Creates providers sharing one config and remote finder."""

    def __init__(
        self,
        config: Mapping[str, ProviderConfig | None],
        default_remote: str,
        find_remote: RemoteFinder,
    ) -> None:
        self._config = config
        self._default_remote = default_remote
        self._find_remote = find_remote

    def create_provider(self, name: str) -> BaseProvider:
        """Create a provider by its config key."""
        name = name.lower()
        for provider_cls in PROVIDERS:
            if provider_cls.PROVIDER_NAME == name:
                return provider_cls(self._config, self._default_remote, self._find_remote)
        raise ConfigurationError(f"Unknown provider: {name}")

    def create_providers(self) -> list[BaseProvider]:
        """Create every provider, in probe order."""
        return [
            provider_cls(self._config, self._default_remote, self._find_remote)
            for provider_cls in PROVIDERS
        ]

    async def resolve_urls(self, params: UrlParams) -> tuple[str, UrlInfo] | None:
        """Return (provider name, urls) from the first provider that applies."""
        for provider in self.create_providers():
            urls = await provider.build_urls(params)
            if urls is not None:
                logger.debug("Provider matched", provider=provider.PROVIDER_NAME)
                return provider.PROVIDER_NAME, urls
        logger.debug("No provider matched")
        return None
