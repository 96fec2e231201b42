"""URL request and result models."""

from pydantic import BaseModel

from repo_links.core.models.head import Head

# Zero-based inclusive (start, end) line bounds.
Selection = tuple[int | None, int | None]


class OrgInfo(BaseModel):
    """Repository identity resolved from a remote string."""

    org: str
    repo: str
    hostname: str

    class Config:
        frozen = True


class UrlParams(BaseModel):
    """Input for building provider URLs."""

    head: Head
    selection: Selection = (None, None)
    relative_file_path: str | None = None

    class Config:
        frozen = True

    @property
    def line_range(self) -> tuple[int, int] | None:
        """One-based (start, end), or None unless both bounds are set."""
        start, end = self.selection
        if start is None or end is None:
            return None
        return start + 1, end + 1


class UrlInfo(BaseModel):
    """Every URL a provider can build for a file and revision."""

    blob_url: str | None = None
    repo_url: str | None = None
    blame_url: str | None = None
    history_url: str | None = None
    pr_url: str | None = None
    compare_url: str | None = None

    class Config:
        frozen = True
