"""Git integration module for repo-links."""

from repo_links.git.remote import GitRemoteFinder

__all__ = ["GitRemoteFinder"]
