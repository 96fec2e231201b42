"""Core domain models and interfaces for repo-links."""

from repo_links.core.exceptions import ConfigurationError, GitError, RepoLinksError
from repo_links.core.models import (
    Head,
    HeadKind,
    OrgInfo,
    ProviderConfig,
    Selection,
    UrlInfo,
    UrlParams,
    create_branch,
    create_sha,
)

__all__ = [
    # Models
    "Head",
    "HeadKind",
    "OrgInfo",
    "ProviderConfig",
    "Selection",
    "UrlInfo",
    "UrlParams",
    "create_branch",
    "create_sha",
    # Exceptions
    "RepoLinksError",
    "ConfigurationError",
    "GitError",
]
