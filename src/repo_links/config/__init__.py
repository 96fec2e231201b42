"""Configuration for repo-links."""

from repo_links.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
