"""Domain models for repo-links."""

from repo_links.core.models.head import Head, HeadKind, create_branch, create_sha
from repo_links.core.models.provider import ProviderConfig
from repo_links.core.models.urls import OrgInfo, Selection, UrlInfo, UrlParams

__all__ = [
    "Head",
    "HeadKind",
    "create_branch",
    "create_sha",
    "ProviderConfig",
    "OrgInfo",
    "Selection",
    "UrlInfo",
    "UrlParams",
]
