"""Static package metadata surfaced to CLI commands and documentation.

Values here must stay in sync with ``pyproject.toml``; the metadata sync
tests fail when they drift.

Contents:
    * Identity constants (``name``, ``title``, ``version``, ``homepage``, ...).
    * ``LAYEREDCONF_*`` identifiers used to resolve configuration paths.
    * :func:`print_info` - render the metadata block for ``trishaft info``.
"""

from __future__ import annotations

from typing import Final

#: Distribution name.
name: Final[str] = "trishaft"
#: One-line description shown in CLI help.
title: Final[str] = "Site constants and page title helpers for the TRISHAFT blog"
version: Final[str] = "1.0.0"
homepage: Final[str] = "https://github.com/trishaft/trishaft"
author: Final[str] = "TRISHAFT"
author_email: Final[str] = "info@trishaft.dev"
#: Console script name.
shell_command: Final[str] = "trishaft"

#: Vendor directory name used on macOS/Windows configuration paths.
LAYEREDCONF_VENDOR: Final[str] = "trishaft"
#: Application directory name used on macOS/Windows configuration paths.
LAYEREDCONF_APP: Final[str] = "trishaft"
#: Slug used for XDG configuration paths on Linux.
LAYEREDCONF_SLUG: Final[str] = "trishaft"


def print_info() -> None:
    """Print the summarised metadata block.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for trishaft:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
