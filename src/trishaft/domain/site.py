"""Pure domain functions for site-wide display strings."""

from __future__ import annotations

from typing import Final

SITE_TITLE: Final[str] = "TRISHAFT"

#: Literal placed between a page fragment and the site title.
TITLE_SEPARATOR: Final[str] = " - "


def get_title(title: str | None = None) -> str:
    r"""Compose the page title shown in the browser tab.

    An absent or empty fragment yields the bare site title. Any other
    fragment is kept verbatim (whitespace-only fragments included) and
    suffixed with the separator and the site title.

    Args:
        title: Optional page-specific fragment.

    Returns:
        The composed page title.

    Example:
        >>> get_title("Blog")
        'Blog - TRISHAFT'
        >>> get_title()
        'TRISHAFT'
        >>> get_title("")
        'TRISHAFT'
    """
    if not title:
        return SITE_TITLE
    return f"{title}{TITLE_SEPARATOR}{SITE_TITLE}"


__all__ = [
    "SITE_TITLE",
    "TITLE_SEPARATOR",
    "get_title",
]
