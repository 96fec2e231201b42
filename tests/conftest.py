"""Pytest configuration and fixtures."""

import subprocess
from collections.abc import Awaitable, Callable
from pathlib import Path

import pytest

from repo_links.config.settings import get_settings
from repo_links.core.models import ProviderConfig


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; start each test from a clean read."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def remote_finder() -> Callable[..., Callable[[str], Awaitable[str | None]]]:
    """Build a fake remote finder from a {remote name: url} mapping.

    Looked-up names are recorded on the returned callable's ``calls`` list.
    """

    def build(remotes: dict[str, str] | None = None):
        remotes = remotes or {}
        calls: list[str] = []

        async def find_remote(name: str) -> str | None:
            calls.append(name)
            return remotes.get(name)

        find_remote.calls = calls  # type: ignore[attr-defined]
        return find_remote

    return build


@pytest.fixture
def empty_config() -> dict[str, ProviderConfig | None]:
    return {}


def _git(repo_path: Path, *args: str) -> None:
    subprocess.run(["git", *args], cwd=repo_path, capture_output=True, check=True)


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Create a temporary Git repository on branch main with one commit."""
    repo_path = tmp_path / "widget"
    repo_path.mkdir()

    _git(repo_path, "init")
    _git(repo_path, "symbolic-ref", "HEAD", "refs/heads/main")
    _git(repo_path, "config", "user.email", "test@test.com")
    _git(repo_path, "config", "user.name", "Test")
    _git(repo_path, "remote", "add", "origin", "git@github.com:acme/widget.git")

    (repo_path / "src").mkdir()
    (repo_path / "src" / "index.ts").write_text("export const x = 1\n")
    (repo_path / "README.md").write_text("# Widget\n")

    _git(repo_path, "add", ".")
    _git(repo_path, "commit", "-m", "Initial commit")

    return repo_path
