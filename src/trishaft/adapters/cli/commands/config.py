"""``config`` command: show the merged configuration the root group loaded."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import lib_log_rich.runtime
import rich_click as click

from trishaft.adapters.config.display import display_config
from trishaft.domain.enums import OutputFormat

from ..exit_codes import ExitCode
from ._options import CONTEXT_SETTINGS, format_option

if TYPE_CHECKING:
    from ..root import SiteContext

logger = logging.getLogger(__name__)


@click.command("config", context_settings=CONTEXT_SETTINGS)
@format_option
@click.option(
    "--section",
    type=str,
    default=None,
    help="Show only a specific configuration section (e.g., 'lib_log_rich')",
)
@click.pass_obj
def cli_config(site: SiteContext, output_format: str, section: str | None) -> None:
    """Display the current merged configuration from all sources.

    Precedence: defaults -> app -> host -> user -> dotenv -> env
    """
    fmt = OutputFormat(output_format.lower())
    extra = {"command": "config", "format": fmt.value, "profile": site.profile}
    with lib_log_rich.runtime.bind(job_id="cli-config", extra=extra):
        logger.info("Displaying configuration", extra={"section": section})
        try:
            display_config(site.config, output_format=fmt, section=section, profile=site.profile)
        except ValueError as exc:
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


__all__ = ["cli_config"]
