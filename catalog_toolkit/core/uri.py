from __future__ import annotations

"""Url helpers used to derive canonical document urls.

These helpers are side-effect-free; they can be used across all layers of the
toolkit.
"""

from urllib.parse import urljoin

__all__ = ["absolute_url", "strip_hash"]


def absolute_url(url: str, base: str = "") -> str:
    """Resolve *url* against *base*.

    An empty *base* leaves *url* untouched, so root-relative urls such as
    ``/a`` stay as written.
    """
    if not base:
        return url
    return urljoin(base, url)


def strip_hash(url: str) -> str:
    """Return *url* without its fragment identifier."""
    return url.split("#", 1)[0]
