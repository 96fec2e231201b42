"""Git remote and revision lookup using subprocess."""

import asyncio
import subprocess
from pathlib import Path

import structlog

from repo_links.core.exceptions import GitError
from repo_links.core.models import Head, create_branch, create_sha

logger = structlog.get_logger(__name__)


class GitRemoteFinder:
    """Reads remotes, the current revision and repo-relative paths.

    Uses subprocess + git CLI directly (no gitpython dependency).
    """

    def __init__(self, path: str | Path) -> None:
        path = Path(path).resolve()
        self._cwd = path if path.is_dir() else path.parent

    @property
    def cwd(self) -> Path:
        return self._cwd

    def _run_git(self, *args: str) -> str:
        """Run a git command and return stdout."""
        result = subprocess.run(
            ["git", *args],
            cwd=self._cwd,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.strip()

    def is_git_repo(self) -> bool:
        """Check if the path is inside a git work tree."""
        try:
            self._run_git("rev-parse", "--git-dir")
            return True
        except (subprocess.CalledProcessError, FileNotFoundError):
            return False

    def repo_root(self) -> Path:
        """Top-level directory of the work tree."""
        try:
            return Path(self._run_git("rev-parse", "--show-toplevel")).resolve()
        except subprocess.CalledProcessError as e:
            raise GitError(f"Not a git repository: {self._cwd}") from e

    def get_remote_url(self, name: str) -> str | None:
        """Get the URL of a named remote, if configured."""
        try:
            url = self._run_git("remote", "get-url", name)
            return url if url else None
        except subprocess.CalledProcessError:
            logger.debug("git remote get-url failed", remote=name)
            return None

    async def find_remote(self, name: str) -> str | None:
        """Async remote lookup, suitable as a provider's remote finder."""
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(None, self.get_remote_url, name)

    def get_current_commit(self) -> str:
        """Get the current HEAD commit hash."""
        try:
            return self._run_git("rev-parse", "HEAD")
        except subprocess.CalledProcessError as e:
            raise GitError("Repository has no commits") from e

    def get_current_branch(self) -> str | None:
        """Get the current branch name, or None when HEAD is detached."""
        try:
            branch = self._run_git("rev-parse", "--abbrev-ref", "HEAD")
        except subprocess.CalledProcessError:
            return None
        return None if branch == "HEAD" else branch

    def get_head(self, prefer_sha: bool = False) -> Head:
        """Current branch, or the commit hash when detached or requested."""
        if not prefer_sha:
            branch = self.get_current_branch()
            if branch is not None:
                return create_branch(branch)
        return create_sha(self.get_current_commit())

    def relative_path(self, file_path: str | Path) -> str:
        """POSIX path of a file relative to the repository root."""
        absolute = Path(file_path).resolve()
        root = self.repo_root()
        try:
            return absolute.relative_to(root).as_posix()
        except ValueError as e:
            raise GitError(f"{absolute} is outside repository {root}") from e
