"""Command-line interface: the ``trishaft`` group, its commands and entry point."""

from __future__ import annotations

from .commands import cli_categories, cli_category, cli_config, cli_info, cli_title
from .exit_codes import ExitCode
from .main import main
from .root import SiteContext, cli

__all__ = [
    "ExitCode",
    "SiteContext",
    "cli",
    "cli_categories",
    "cli_category",
    "cli_config",
    "cli_info",
    "cli_title",
    "main",
]
