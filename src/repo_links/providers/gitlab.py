"""GitLab provider."""

import re

from repo_links.core.models import OrgInfo
from repo_links.providers.base import PathStyleProvider
from repo_links.utils.paths import encode_query_value, path_join


class GitlabProvider(PathStyleProvider):
    """gitlab.com and self-hosted GitLab instances."""

    PROVIDER_NAME = "gitlab"
    DEFAULT_HOSTNAMES = ("gitlab.com",)
    MATCHERS = (
        lambda hostname: re.compile(rf"^git@{hostname}:(.*)/(.*)\.git$"),
        lambda hostname: re.compile(rf"^https://{hostname}/(.*)/(.*)\.git$"),
    )

    def format_lines(self, start: int, end: int) -> str:
        # L34-56, no second "L"
        return f"L{start}-{end}"

    def pr_url(self, root_url: str, info: OrgInfo, head_value: str) -> str:
        base = root_url + path_join(info.org, info.repo, "merge_requests", "new")
        return f"{base}?merge_request%5Bsource_branch%5D={encode_query_value(head_value)}"

    def compare_url(self, root_url: str, info: OrgInfo, head_value: str) -> str:
        return root_url + path_join(info.org, info.repo, "compare", head_value)
