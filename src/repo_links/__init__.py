"""repo-links: jump from a line of code to its hosted view."""

from repo_links.core.models import Head, HeadKind, UrlInfo, UrlParams, create_branch, create_sha
from repo_links.providers import PROVIDERS, ProviderFactory

__all__ = [
    "Head",
    "HeadKind",
    "UrlInfo",
    "UrlParams",
    "create_branch",
    "create_sha",
    "PROVIDERS",
    "ProviderFactory",
]
