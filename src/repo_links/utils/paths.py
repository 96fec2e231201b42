"""URL path and hostname helpers."""

from urllib.parse import quote

# Characters encodeURIComponent leaves alone besides letters, digits and "_.-~".
_COMPONENT_SAFE = "!*'()"


def encode_component(value: str) -> str:
    """Percent-encode a single path segment or query value, slashes included."""
    return quote(value, safe=_COMPONENT_SAFE)


def encode_query_value(value: str) -> str:
    """Percent-encode a query value, keeping "/" readable (e.g. feature/x)."""
    return quote(value, safe="/" + _COMPONENT_SAFE)


def path_join(*parts: str) -> str:
    """Join URL path segments, encoding every segment independently.

    Each argument is split on "/", so ``path_join("a/b", "c")`` and
    ``path_join("a", "b", "c")`` give the same result. Empty segments are
    dropped.
    """
    segments = [segment for part in parts for segment in part.split("/") if segment]
    return "/".join(encode_component(segment) for segment in segments)


def clean_hostname(hostname: str) -> str:
    """Normalize a configured hostname.

    Handles:
    - surrounding whitespace and upper case
    - a pasted scheme: https://git.corp -> git.corp
    - a trailing slash: git.corp/ -> git.corp
    """
    hostname = hostname.strip().lower()
    for scheme in ("https://", "http://"):
        if hostname.startswith(scheme):
            hostname = hostname[len(scheme):]
    return hostname.rstrip("/")
