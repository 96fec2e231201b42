"""Exceptions for repo-links."""


class RepoLinksError(Exception):
    """Base exception for repo-links."""


class ConfigurationError(RepoLinksError):
    """Raised for invalid configuration, such as an unknown provider name."""


class GitError(RepoLinksError):
    """Raised when a git command fails in a way that is not a plain miss."""
