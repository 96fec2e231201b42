"""Hosting providers."""

from repo_links.providers.azure import AzureDevOpsProvider
from repo_links.providers.base import BaseProvider
from repo_links.providers.bitbucket import BitbucketProvider
from repo_links.providers.factory import PROVIDERS, ProviderFactory
from repo_links.providers.github import GithubProvider
from repo_links.providers.gitlab import GitlabProvider

__all__ = [
    "BaseProvider",
    "AzureDevOpsProvider",
    "BitbucketProvider",
    "GithubProvider",
    "GitlabProvider",
    "PROVIDERS",
    "ProviderFactory",
]
