"""Bitbucket provider."""

import re

from repo_links.core.models import OrgInfo
from repo_links.providers.base import PathStyleProvider
from repo_links.utils.paths import encode_query_value, path_join


class BitbucketProvider(PathStyleProvider):
    """bitbucket.org.

    HTTPS remotes usually carry a username: https://user@bitbucket.org/org/repo.git
    """

    PROVIDER_NAME = "bitbucket"
    DEFAULT_HOSTNAMES = ("bitbucket.org",)
    MATCHERS = (
        lambda hostname: re.compile(rf"^git@{hostname}:(.*)/(.*)\.git$"),
        lambda hostname: re.compile(rf"^https://.*{hostname}/(.*)/(.*)\.git$"),
    )

    BLAME_MODE = "annotate"
    HISTORY_MODE = "history-node"

    def format_lines(self, start: int, end: int) -> str:
        return f"lines-{start}:{end}"

    def pr_url(self, root_url: str, info: OrgInfo, head_value: str) -> str:
        base = root_url + path_join(info.org, info.repo, "pull-requests", "new")
        return f"{base}?source={encode_query_value(head_value)}"

    def compare_url(self, root_url: str, info: OrgInfo, head_value: str) -> str:
        return root_url + path_join(info.org, info.repo, "branches", "compare", head_value + "..")
