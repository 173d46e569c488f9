"""Document commands -- create, re-encode, and query documents.

Provides the ``oasmodel new``, ``oasmodel fmt`` and ``oasmodel resolve``
commands. They are thin wrappers around :func:`~oasmodel.models.new_document`,
the codec, and :meth:`~oasmodel.models.Document.resolve_ref`; their output is
the JSON text of the document or schema on stdout, diagnostics on stderr.
"""

from __future__ import annotations

from typing import List, NoReturn, Optional

import typer

from oasmodel.codec import encode_document, to_data
from oasmodel.config import Settings
from oasmodel.exceptions import NotFoundError, OasModelError
from oasmodel.loader import load_document, save_document
from oasmodel.models import Document, Info, Server, new_document
from oasmodel.output import debug, error, format_response, print_data, success


def _settings(ctx: typer.Context) -> Settings:
    """Return the settings resolved by the root callback, or defaults."""
    obj = ctx.obj or {}
    return obj.get("settings") or Settings()


def fail(exc: OasModelError) -> NoReturn:
    """Report *exc* on stderr and exit with its exit code."""
    error(str(exc))
    raise typer.Exit(code=exc.exit_code)


def load_document_or_exit(ctx: typer.Context, source: str) -> Document:
    """Load the document at *source*, exiting with a diagnostic on failure.

    Args:
        ctx: Typer invocation context holding the resolved settings.
        source: File path, URL, or ``-`` for stdin.

    Returns:
        The decoded document.

    Raises:
        typer.Exit: With the error's exit code (7 for unreadable or
            malformed documents).
    """
    settings = _settings(ctx)
    debug(f"Loading document from {source}")
    try:
        return load_document(source, timeout=settings.http_timeout)
    except OasModelError as exc:
        fail(exc)


def _emit(document: Document, output: Optional[str], indent: Optional[int]) -> None:
    """Write *document* to *output*, or to stdout when no file is given."""
    if output:
        path = save_document(document, output, indent=indent)
        success(f"Wrote {path}")
    else:
        print_data(encode_document(document, indent=indent).decode("utf-8"))


def new_command(
    ctx: typer.Context,
    title: str = typer.Option(..., "--title", "-t", help="API title."),
    api_version: str = typer.Option(
        "1.0.0", "--api-version", help="Version of the described API."
    ),
    openapi: Optional[str] = typer.Option(
        None, "--openapi", help="OpenAPI version tag (defaults to the configured one)."
    ),
    description: str = typer.Option("", "--description", "-d", help="API description."),
    server: Optional[List[str]] = typer.Option(
        None, "--server", "-s", help="Server URL. Repeat for several servers."
    ),
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="Write to this file instead of stdout."
    ),
) -> None:
    """Create a new, empty document.

    Example::

        oasmodel new --title "Pet Store" --api-version 2.0.0 -s https://api.example.com
    """
    settings = _settings(ctx)
    document = new_document(openapi or settings.openapi_version)
    document.info = Info(title=title, description=description, version=api_version)
    document.servers = [Server(url=url) for url in server or []]
    _emit(document, output, settings.indent)


def fmt_command(
    ctx: typer.Context,
    source: str = typer.Argument(..., help="Document file, URL, or '-' for stdin."),
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="Write to this file instead of stdout."
    ),
    indent: Optional[int] = typer.Option(
        None, "--indent", min=0, help="Indentation (defaults to the configured one)."
    ),
    compact: bool = typer.Option(False, "--compact", help="Emit compact JSON."),
) -> None:
    """Decode a document and encode it again in canonical form.

    Keys the model does not know are dropped and empty optional fields are
    omitted.

    Example::

        oasmodel fmt openapi.json -o openapi.json
        cat openapi.json | oasmodel fmt - --compact
    """
    settings = _settings(ctx)
    document = load_document_or_exit(ctx, source)
    if compact:
        width: Optional[int] = None
    elif indent is not None:
        width = indent
    else:
        width = settings.indent
    _emit(document, output, width)


def resolve_command(
    ctx: typer.Context,
    source: str = typer.Argument(..., help="Document file, URL, or '-' for stdin."),
    ref: str = typer.Argument(..., help="Reference, e.g. '#/components/schemas/Pet'."),
) -> None:
    """Print the schema a reference points at.

    Exits with code 4 when the reference does not resolve.

    Example::

        oasmodel resolve openapi.json '#/components/schemas/Pet'
    """
    document = load_document_or_exit(ctx, source)
    name, schema = document.resolve_ref(ref)
    if schema is None:
        fail(NotFoundError(f"Unresolved reference: {ref}"))
    debug(f"Resolved {ref} to schema '{name}'")
    format_response(to_data(schema))
