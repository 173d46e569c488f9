"""Typer application factory and CLI entry point for oasmodel.

This module wires together the top-level Typer application and registers the
built-in commands (``new``, ``fmt``, ``resolve`` and the ``inspect`` group).

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``. It installs signal handlers and invokes the Typer app;
:class:`~oasmodel.exceptions.OasModelError` escaping a command is reported
on stderr and mapped to its exit code.

See Also:
    :mod:`oasmodel.config`: Settings resolution used in :func:`main_callback`.
    :mod:`oasmodel.output`: Output formatting initialised in :func:`main_callback`.
"""

from __future__ import annotations

import logging
import signal
import sys
from typing import Any

import typer

from oasmodel import __version__
from oasmodel.commands.document import fmt_command, new_command, resolve_command
from oasmodel.commands.inspect import inspect_app
from oasmodel.exceptions import ConfigError, InvalidUsageError
from oasmodel.exit_codes import EXIT_GENERIC_FAILURE

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="oasmodel",
    help="Build, inspect and re-encode OpenAPI 3.0 documents.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

app.command("new")(new_command)
app.command("fmt")(fmt_command)
app.command("resolve")(resolve_command)
app.add_typer(inspect_app, name="inspect", help="Inspect document details.")


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"oasmodel {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    json_output: bool = typer.Option(
        False, "--json", help="JSON output format."
    ),
    plain_output: bool = typer.Option(
        False, "--plain", help="Plain text output."
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable color output."
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output."
    ),
) -> None:
    """Root callback executed before every sub-command.

    Resolves :class:`~oasmodel.config.Settings`, initialises the global
    :class:`~oasmodel.output.OutputManager` and the logging level from CLI
    flags, and stores the settings in the Typer context so that sub-commands
    can read them via ``ctx.obj``.

    Raises:
        InvalidUsageError: If ``--json`` and ``--plain`` are both given.
        ConfigError: If the settings or the configured output format are
            invalid.
    """
    from oasmodel.config import load_settings
    from oasmodel.output import OutputFormat, OutputManager, set_output

    if json_output and plain_output:
        raise InvalidUsageError("--json and --plain are mutually exclusive")

    settings = load_settings()
    if json_output:
        fmt = OutputFormat.JSON
    elif plain_output:
        fmt = OutputFormat.PLAIN
    else:
        try:
            fmt = OutputFormat(settings.output_format)
        except ValueError as exc:
            raise ConfigError(
                f"Unknown output format '{settings.output_format}'"
            ) from exc

    set_output(
        OutputManager(format=fmt, no_color=no_color, quiet=quiet, verbose=verbose)
    )
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["verbose"] = verbose


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)

    signal.signal(signal.SIGINT, _handler)


def main() -> None:
    """CLI entry point invoked by the ``oasmodel`` console script.

    Unhandled :class:`~oasmodel.exceptions.OasModelError` instances cause a
    clean exit with the error's ``exit_code``. All other exceptions are
    logged with their traceback and exit with a generic failure.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)
    except Exception as exc:
        from oasmodel.exceptions import OasModelError
        from oasmodel.output import error

        if isinstance(exc, OasModelError):
            error(str(exc))
            sys.exit(exc.exit_code)
        logger.exception("Unexpected error")
        error(f"Unexpected error: {exc}")
        sys.exit(EXIT_GENERIC_FAILURE)
