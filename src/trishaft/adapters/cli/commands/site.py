"""Site content commands: page titles and the category taxonomy.

Contents:
    * :func:`cli_title` - Print a composed page title.
    * :func:`cli_categories` - List categories in display order.
    * :func:`cli_category` - Show the display information of one category.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

import lib_log_rich.runtime
import orjson
import rich_click as click

from trishaft.domain.categories import CategoryInfo, category_info, list_categories, parse_category
from trishaft.domain.enums import OutputFormat
from trishaft.domain.errors import UnknownCategoryError
from trishaft.domain.site import get_title

from ..exit_codes import ExitCode
from ._options import CONTEXT_SETTINGS, format_option

logger = logging.getLogger(__name__)


def _as_dict(info: CategoryInfo) -> dict[str, str]:
    return {"category": info.category.value, "title": info.title}


def _as_line(info: CategoryInfo) -> str:
    return f"{info.category.value}\t{info.title}"


def _render_one(info: CategoryInfo, fmt: OutputFormat) -> str:
    """Render one record as a ``tag<TAB>Title`` line or a JSON object."""
    if fmt is OutputFormat.JSON:
        return orjson.dumps(_as_dict(info), option=orjson.OPT_INDENT_2).decode()
    return _as_line(info)


def _render_many(infos: Iterable[CategoryInfo], fmt: OutputFormat) -> str:
    """Render records as ``tag<TAB>Title`` lines or a JSON array, keeping their order."""
    if fmt is OutputFormat.JSON:
        return orjson.dumps([_as_dict(info) for info in infos], option=orjson.OPT_INDENT_2).decode()
    return "\n".join(_as_line(info) for info in infos)


def _emit(text: str) -> None:
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()
    click.echo(text)


@click.command("title", context_settings=CONTEXT_SETTINGS)
@click.argument("fragment", required=False, default=None)
def cli_title(fragment: str | None) -> None:
    """Print the page title for FRAGMENT, or the bare site title without one."""
    with lib_log_rich.runtime.bind(job_id="cli-title", extra={"command": "title"}):
        logger.info("Composing page title", extra={"fragment": fragment})
        _emit(get_title(fragment))


@click.command("categories", context_settings=CONTEXT_SETTINGS)
@format_option
def cli_categories(output_format: str) -> None:
    """List every category with its display title, in display order."""
    fmt = OutputFormat(output_format.lower())
    with lib_log_rich.runtime.bind(job_id="cli-categories", extra={"command": "categories", "format": fmt.value}):
        logger.info("Listing categories")
        _emit(_render_many((category_info(c) for c in list_categories()), fmt))


@click.command("category", context_settings=CONTEXT_SETTINGS)
@click.argument("tag")
@format_option
def cli_category(tag: str, output_format: str) -> None:
    """Show the display information for the category TAG."""
    fmt = OutputFormat(output_format.lower())
    with lib_log_rich.runtime.bind(job_id="cli-category", extra={"command": "category", "tag": tag}):
        try:
            category = parse_category(tag)
        except UnknownCategoryError as exc:
            logger.warning("Unknown category requested", extra={"tag": tag})
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc
        logger.info("Showing category", extra={"category": category.value})
        _emit(_render_one(category_info(category), fmt))


__all__ = ["cli_categories", "cli_category", "cli_title"]
