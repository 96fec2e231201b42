"""Base provider: remote lookup and org/repo resolution."""

import re
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Mapping

import structlog

from repo_links.core.models import OrgInfo, ProviderConfig, UrlInfo, UrlParams
from repo_links.utils.paths import clean_hostname, path_join

logger = structlog.get_logger(__name__)

RemoteFinder = Callable[[str], Awaitable[str | None]]
Matcher = Callable[[str], re.Pattern[str]]


class BaseProvider(ABC):
    """Abstract hosting provider.

    Subclasses declare their config key, built-in hostnames and an ordered
    tuple of matcher factories. Each factory takes an escaped hostname and
    returns a pattern capturing (org, repo) from a remote string.
    """

    PROVIDER_NAME: str
    DEFAULT_HOSTNAMES: tuple[str, ...] = ()
    MATCHERS: tuple[Matcher, ...] = ()

    def __init__(
        self,
        config: Mapping[str, ProviderConfig | None],
        global_default_remote: str,
        find_remote: RemoteFinder,
    ) -> None:
        self._config = config
        self._global_default_remote = global_default_remote
        self._find_remote = find_remote

    @property
    def provider_config(self) -> ProviderConfig | None:
        return self._config.get(self.PROVIDER_NAME)

    @property
    def remote_name(self) -> str:
        """Configured remote for this provider, else the global default."""
        conf = self.provider_config
        if conf is not None and conf.remote:
            return conf.remote
        return self._global_default_remote

    @property
    def hostnames(self) -> list[str]:
        conf = self.provider_config
        extra = conf.hostnames if conf is not None else []
        return [clean_hostname(h) for h in [*self.DEFAULT_HOSTNAMES, *extra]]

    def match_remote(self, remote: str, hostname: str) -> tuple[str, str] | None:
        """Apply every matcher for one hostname.

        The last matcher that matches wins; earlier captures are overwritten.
        """
        escaped = re.escape(hostname)
        org: str | None = None
        repo: str | None = None
        for matcher in self.MATCHERS:
            match = matcher(escaped).match(remote)
            if match is not None:
                org, repo = match.group(1), match.group(2)
        if org is None or repo is None:
            return None
        return org, repo

    async def resolve_org_info(self) -> OrgInfo | None:
        """Resolve {org, repo, hostname} from the provider's remote."""
        remote_name = self.remote_name
        remote = await self._find_remote(remote_name)
        if remote is None:
            logger.debug("Remote not found", provider=self.PROVIDER_NAME, remote=remote_name)
            return None

        for hostname in self.hostnames:
            captured = self.match_remote(remote, hostname)
            if captured is None:
                continue
            org, repo = captured
            repo = re.sub(r"\.git$", "", repo)
            logger.debug(
                "Resolved org info",
                provider=self.PROVIDER_NAME,
                org=org,
                repo=repo,
                hostname=hostname,
            )
            return OrgInfo(org=org, repo=repo, hostname=hostname)

        logger.debug("Remote did not match", provider=self.PROVIDER_NAME, remote=remote)
        return None

    @abstractmethod
    async def build_urls(self, params: UrlParams) -> UrlInfo | None:
        """Build every URL for the given revision, file and selection."""
        ...


class PathStyleProvider(BaseProvider):
    """Provider whose file URLs look like /<org>/<repo>/<mode>/<head>/<path>.

    GitHub, GitLab and Bitbucket differ only in mode names, line fragment
    syntax and the shape of their PR and compare URLs.
    """

    BLOB_MODE = "blob"
    BLAME_MODE = "blame"
    HISTORY_MODE = "commits"

    @abstractmethod
    def format_lines(self, start: int, end: int) -> str:
        """Line fragment for one-based inclusive bounds."""
        ...

    @abstractmethod
    def pr_url(self, root_url: str, info: OrgInfo, head_value: str) -> str:
        ...

    @abstractmethod
    def compare_url(self, root_url: str, info: OrgInfo, head_value: str) -> str:
        ...

    async def build_urls(self, params: UrlParams) -> UrlInfo | None:
        info = await self.resolve_org_info()
        if info is None:
            return None

        root_url = f"https://{info.hostname}/"
        line_range = params.line_range
        lines = self.format_lines(*line_range) if line_range else None
        head_value = params.head.value

        def file_url(mode: str, with_lines: bool = True) -> str | None:
            if params.relative_file_path is None:
                return None
            url = root_url + path_join(
                info.org, info.repo, mode, head_value, params.relative_file_path
            )
            if with_lines and lines:
                url += f"#{lines}"
            return url

        return UrlInfo(
            blob_url=file_url(self.BLOB_MODE),
            repo_url=root_url + path_join(info.org, info.repo),
            blame_url=file_url(self.BLAME_MODE),
            history_url=file_url(self.HISTORY_MODE, with_lines=False),
            pr_url=self.pr_url(root_url, info, head_value),
            compare_url=self.compare_url(root_url, info, head_value),
        )
