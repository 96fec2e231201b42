"""Tests for the Bitbucket provider."""

import pytest

from factories import UrlParamsFactory
from repo_links.core.models import create_sha
from repo_links.providers.bitbucket import BitbucketProvider


@pytest.fixture
def bitbucket(remote_finder):
    def build(remote: str = "git@bitbucket.org:acme/widget.git") -> BitbucketProvider:
        return BitbucketProvider({}, "origin", remote_finder({"origin": remote}))

    return build


@pytest.mark.unit
class TestBitbucketOrgInfo:
    """Tests for Bitbucket remote matching."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "remote",
        [
            "git@bitbucket.org:acme/widget.git",
            "https://bitbucket.org/acme/widget.git",
            "https://jdoe@bitbucket.org/acme/widget.git",
        ],
    )
    async def test_remote_forms(self, bitbucket, remote: str) -> None:
        info = await bitbucket(remote).resolve_org_info()
        assert info is not None
        assert (info.org, info.repo, info.hostname) == ("acme", "widget", "bitbucket.org")


@pytest.mark.unit
class TestBitbucketUrls:
    """Tests for Bitbucket URL building."""

    @pytest.mark.asyncio
    async def test_full_url_set(self, bitbucket) -> None:
        urls = await bitbucket().build_urls(UrlParamsFactory())
        assert urls is not None
        assert urls.blob_url == "https://bitbucket.org/acme/widget/blob/main/src/index.ts#lines-12:16"
        assert urls.blame_url == (
            "https://bitbucket.org/acme/widget/annotate/main/src/index.ts#lines-12:16"
        )
        assert urls.history_url == "https://bitbucket.org/acme/widget/history-node/main/src/index.ts"
        assert urls.repo_url == "https://bitbucket.org/acme/widget"
        assert urls.compare_url == "https://bitbucket.org/acme/widget/branches/compare/main.."
        assert urls.pr_url == "https://bitbucket.org/acme/widget/pull-requests/new?source=main"

    @pytest.mark.asyncio
    async def test_sha_pr_url(self, bitbucket) -> None:
        urls = await bitbucket().build_urls(UrlParamsFactory(head=create_sha("db99a91")))
        assert urls is not None
        assert urls.pr_url.endswith("/pull-requests/new?source=db99a91")
        assert urls.compare_url.endswith("/branches/compare/db99a91..")

    @pytest.mark.asyncio
    async def test_no_file_path(self, bitbucket) -> None:
        urls = await bitbucket().build_urls(UrlParamsFactory(relative_file_path=None))
        assert urls is not None
        assert (urls.blob_url, urls.blame_url, urls.history_url) == (None, None, None)
        assert urls.pr_url is not None
