"""Azure DevOps provider.

Azure DevOps addresses files through query parameters on the repository
URL rather than path segments:

    https://dev.azure.com/org/_git/repo?path=%2Fsrc%2Fa.py&version=GBmain&line=3&lineEnd=5
"""

import re

from repo_links.core.models import Head, UrlInfo, UrlParams
from repo_links.providers.base import BaseProvider
from repo_links.utils.paths import encode_component, encode_query_value, path_join


def version_token(head: Head) -> str:
    """GB<branch> or GC<commit>."""
    prefix = "GB" if head.is_branch else "GC"
    return encode_query_value(prefix + head.value)


class AzureDevOpsProvider(BaseProvider):
    """dev.azure.com (formerly Visual Studio Team Services)."""

    PROVIDER_NAME = "visualstudio"
    DEFAULT_HOSTNAMES = ("dev.azure.com",)
    MATCHERS = (
        # git@ssh.dev.azure.com:v3/org/project/repo
        lambda hostname: re.compile(rf"^git@ssh\.{hostname}:v3/(.*)/(.*)$"),
        # https://user@dev.azure.com/org/project/_git/repo
        lambda hostname: re.compile(rf"^https://.*@{hostname}/(.*)/_git/(.*)$"),
    )

    async def build_urls(self, params: UrlParams) -> UrlInfo | None:
        info = await self.resolve_org_info()
        if info is None:
            return None

        root_url = f"https://{info.hostname}/"
        repo_url = root_url + path_join(info.org, "_git", info.repo)
        version = version_token(params.head)

        line_range = params.line_range
        lines = f"&line={line_range[0]}&lineEnd={line_range[1]}" if line_range else ""

        blob_url = blame_url = history_url = None
        file_path = params.relative_file_path
        if file_path is not None:
            if not file_path.startswith("/"):
                file_path = "/" + file_path
            base_search = f"path={encode_component(file_path)}&version={version}"
            blob_url = f"{repo_url}?{base_search}{lines}"
            blame_url = f"{repo_url}?{base_search}{lines}&_a=annotate"
            history_url = f"{repo_url}?{base_search}&_a=history"

        compare_base = root_url + path_join(info.org, "_git", info.repo, "branches")
        pr_base = root_url + path_join(info.org, "_git", info.repo, "pullrequestcreate")
        return UrlInfo(
            blob_url=blob_url,
            repo_url=repo_url,
            blame_url=blame_url,
            history_url=history_url,
            pr_url=f"{pr_base}?sourceRef={encode_query_value(params.head.value)}",
            compare_url=f"{compare_base}?targetVersion={version}&_a=commits",
        )
