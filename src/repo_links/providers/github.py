"""GitHub provider."""

import re

from repo_links.core.models import OrgInfo
from repo_links.providers.base import PathStyleProvider
from repo_links.utils.paths import path_join


class GithubProvider(PathStyleProvider):
    """github.com and GitHub Enterprise hosts."""

    PROVIDER_NAME = "github"
    DEFAULT_HOSTNAMES = ("github.com",)
    MATCHERS = (
        lambda hostname: re.compile(rf"^git@{hostname}:(.*)/(.*)(\.git)?$"),
        lambda hostname: re.compile(rf"^https://{hostname}/(.*)/(.*)(\.git)?$"),
    )

    def format_lines(self, start: int, end: int) -> str:
        return f"L{start}-L{end}"

    def pr_url(self, root_url: str, info: OrgInfo, head_value: str) -> str:
        return root_url + path_join(info.org, info.repo, "pull", "new", head_value)

    def compare_url(self, root_url: str, info: OrgInfo, head_value: str) -> str:
        return root_url + path_join(info.org, info.repo, "compare", head_value)
