"""Render merged configuration through lib_layered_config's Rich display."""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LibOutputFormat
from lib_layered_config import display_config as _lib_display
from rich.console import Console

from trishaft.domain.enums import OutputFormat


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Write ``config`` (or one ``section`` of it) to the console.

    Pending log records are flushed first so they do not interleave with
    the rendered configuration.

    Args:
        config: Loaded layered configuration.
        output_format: ``OutputFormat.HUMAN`` (TOML-like) or ``OutputFormat.JSON``.
        section: Optional top-level section to show on its own.
        console: Optional Rich console, mostly for tests.
        profile: Profile name quoted in provenance comments.

    Raises:
        ValueError: If ``section`` does not exist.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()

    _lib_display(
        config,
        output_format=LibOutputFormat(output_format.value),
        section=section,
        profile=profile,
        console=console,
    )


__all__ = ["display_config"]
