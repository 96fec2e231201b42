"""CLI for repo-links."""

import asyncio
import sys
from pathlib import Path

import click
import structlog

from repo_links.config.logging import configure_logging

logger = structlog.get_logger(__name__)

URL_KINDS = ("blob", "blame", "history", "repo", "pr", "compare")


def run_async(coro):
    """Run an async function synchronously."""
    return asyncio.run(coro)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(verbose: bool) -> None:
    """repo-links: open a line of code on its hosting provider."""
    from repo_links.config.settings import get_settings

    log_level = "DEBUG" if verbose else get_settings().log_level
    configure_logging(log_level=log_level)


@cli.command()
@click.argument("file_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--line", "-l", type=click.IntRange(min=1), help="First selected line (1-based)")
@click.option("--end", "-e", type=click.IntRange(min=1), help="Last selected line (default: --line)")
@click.option(
    "--kind",
    "-k",
    type=click.Choice([*URL_KINDS, "all"]),
    default="blob",
    show_default=True,
    help="Which URL to print",
)
@click.option("--remote", "-r", help="Remote name (default: settings)")
@click.option("--sha", is_flag=True, help="Link to the current commit instead of the branch")
def url(
    file_path: str,
    line: int | None,
    end: int | None,
    kind: str,
    remote: str | None,
    sha: bool,
) -> None:
    """Print hosted URL(s) for FILE_PATH.

    Probes Bitbucket, GitLab, GitHub and Azure DevOps in order and uses
    the first provider that recognises the remote.
    """
    from repo_links.config.settings import get_settings
    from repo_links.core.exceptions import GitError
    from repo_links.core.models import UrlParams
    from repo_links.git.remote import GitRemoteFinder
    from repo_links.providers.factory import ProviderFactory

    settings = get_settings()
    finder = GitRemoteFinder(file_path)
    if not finder.is_git_repo():
        click.echo(f"Error: Not a git repository: {finder.cwd}", err=True)
        sys.exit(1)

    try:
        head = finder.get_head(prefer_sha=sha)
        relative_path = finder.relative_path(file_path)
    except GitError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if end is not None and line is None:
        line = end
    selection = (line - 1, (end or line) - 1) if line is not None else (None, None)
    params = UrlParams(head=head, selection=selection, relative_file_path=relative_path)

    factory = ProviderFactory(
        settings.provider_configs(),
        remote or settings.default_remote,
        finder.find_remote,
    )
    result = run_async(factory.resolve_urls(params))
    if result is None:
        click.echo("Error: No provider recognises the remote.", err=True)
        sys.exit(1)

    provider_name, urls = result
    logger.debug("Resolved URLs", provider=provider_name, path=relative_path)
    if kind == "all":
        for name in URL_KINDS:
            click.echo(f"{name}: {getattr(urls, f'{name}_url')}")
    else:
        click.echo(getattr(urls, f"{kind}_url"))


@cli.command()
def providers() -> None:
    """List providers in probe order with their remote and hostnames."""
    from repo_links.config.settings import get_settings
    from repo_links.providers.factory import PROVIDERS

    settings = get_settings()

    async def _no_remote(name: str) -> str | None:
        return None

    for provider_cls in PROVIDERS:
        provider = provider_cls(settings.provider_configs(), settings.default_remote, _no_remote)
        click.echo(f"{provider.PROVIDER_NAME}")
        click.echo(f"  remote:    {provider.remote_name}")
        click.echo(f"  hostnames: {', '.join(provider.hostnames)}")


if __name__ == "__main__":
    cli()
