"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Info command from :mod:`.info`
    * Title and category commands from :mod:`.site`
    * Config command from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config
from .info import cli_info
from .site import cli_categories, cli_category, cli_title

__all__ = [
    "cli_categories",
    "cli_category",
    "cli_config",
    "cli_info",
    "cli_title",
]
