"""Root ``trishaft`` command group.

The group loads the layered configuration once, starts lib_log_rich from its
``[lib_log_rich]`` section and leaves a :class:`SiteContext` in ``ctx.obj``
for the subcommands.
"""

from __future__ import annotations

from dataclasses import dataclass

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

from trishaft import __init__conf__
from trishaft.adapters.config import loader
from trishaft.adapters.logging import init_logging

from .commands._options import CONTEXT_SETTINGS
from .exit_codes import ExitCode


@dataclass(frozen=True, slots=True)
class SiteContext:
    """State the root group hands to subcommands."""

    config: Config
    profile: str | None = None


def _load_config(profile: str | None) -> Config:
    try:
        return loader.get_config(profile=profile)
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Load configuration from a named profile (e.g., 'production', 'test')",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None) -> None:
    """Print site titles and the category taxonomy.

    Example:
        >>> from click.testing import CliRunner
        >>> CliRunner().invoke(cli, ["title", "Blog"]).stdout  # doctest: +SKIP
        'Blog - TRISHAFT\\n'
    """
    config = _load_config(profile)
    init_logging(config)
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback
    ctx.obj = SiteContext(config=config, profile=profile)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# The command modules import this package, so they are attached once ``cli`` exists.
def _register_commands() -> None:
    from .commands import cli_categories, cli_category, cli_config, cli_info, cli_title

    for cmd in (cli_info, cli_title, cli_categories, cli_category, cli_config):
        cli.add_command(cmd)


_register_commands()


__all__ = ["SiteContext", "cli"]
