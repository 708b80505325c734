"""Run the ``trishaft`` group and turn its outcome into a process exit code."""

from __future__ import annotations

import sys
import threading
from collections.abc import Sequence

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from trishaft import __init__conf__

from .commands._options import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .root import cli


def _run(args: list[str]) -> int:
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
        return 0
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except SystemExit as exc:
        # Commands print their own message before exiting.
        return lib_cli_exit_tools.get_system_exit_code(exc)
    except BaseException as exc:
        verbose = bool(lib_cli_exit_tools.config.traceback)
        limit = TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT
        lib_cli_exit_tools.print_exception_message(trace_back=verbose, length_limit=limit)
        return lib_cli_exit_tools.get_system_exit_code(exc)


def main(argv: Sequence[str] | None = None) -> int:
    """Execute the CLI for ``argv`` (``sys.argv[1:]`` when omitted) and return its exit code.

    The traceback flags of ``lib_cli_exit_tools`` are restored afterwards so
    repeated in-process runs do not leak ``--traceback`` into each other.

    Example:
        >>> main(["title", "Blog"])  # doctest: +SKIP
        Blog - TRISHAFT
        0
    """
    args = list(argv) if argv is not None else sys.argv[1:]
    previous = (lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color)
    try:
        return _run(args)
    finally:
        lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color = previous
        # Worker threads may still be logging; only the main thread tears down.
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
