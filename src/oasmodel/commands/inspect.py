"""Inspect commands -- examine document details.

Provides the ``oasmodel inspect`` sub-command group with read-only
commands for viewing the contents of a document: paths (operations),
schemas, and general API info. Every sub-command loads the document from a
file, URL or stdin and presents the data in table or structured form.
"""

from __future__ import annotations

import typer

from oasmodel.commands.document import load_document_or_exit
from oasmodel.output import format_response, info, print_table


inspect_app = typer.Typer(no_args_is_help=True)

_SOURCE_HELP = "Document file, URL, or '-' for stdin."


@inspect_app.command("paths")
def inspect_paths(
    ctx: typer.Context,
    source: str = typer.Argument(..., help=_SOURCE_HELP),
) -> None:
    """List all operations.

    Displays a table of every operation with its HTTP verb, path, summary,
    parameter count and response keys.

    Example::

        oasmodel inspect paths openapi.json
    """
    document = load_document_or_exit(ctx, source)

    rows: list[list[str]] = []
    for path in sorted(document.paths):
        for verb, operation in document.paths[path].operations_by_verb().items():
            rows.append([
                verb,
                path,
                operation.summary or "-",
                str(len(operation.parameters)),
                ", ".join(operation.responses) or "-",
            ])

    if not rows:
        info("No operations defined in this document.")
        return

    print_table(
        ["Method", "Path", "Summary", "Parameters", "Responses"],
        rows,
        title=f"{document.info.title} -- Paths ({len(rows)})",
    )


@inspect_app.command("schemas")
def inspect_schemas(
    ctx: typer.Context,
    source: str = typer.Argument(..., help=_SOURCE_HELP),
) -> None:
    """List all schemas registered under ``components/schemas``.

    Shows each schema's type (or reference target) and up to five property
    names.

    Example::

        oasmodel inspect schemas openapi.json
    """
    document = load_document_or_exit(ctx, source)

    schemas = document.components.schemas if document.components else {}
    if not schemas:
        info("No schemas defined in this document.")
        return

    rows: list[list[str]] = []
    for name, schema in sorted(schemas.items()):
        if schema.ref:
            kind = schema.ref
        else:
            kind = schema.type.value if schema.type else "-"
        prop_names = list(schema.properties)
        props = ", ".join(prop_names[:5])
        if len(prop_names) > 5:
            props += "..."
        rows.append([name, kind, props])

    print_table(["Schema", "Type", "Properties"], rows, title=f"Schemas ({len(rows)})")


@inspect_app.command("info")
def inspect_info(
    ctx: typer.Context,
    source: str = typer.Argument(..., help=_SOURCE_HELP),
) -> None:
    """Show API info (title, version, description, servers, counts).

    Example::

        oasmodel inspect info openapi.json
    """
    document = load_document_or_exit(ctx, source)
    api = document.info

    data: dict = {
        "title": api.title,
        "version": api.version,
        "openapi": document.openapi,
        "description": api.description or "-",
        "servers": [server.url for server in document.servers],
        "paths": len(document.paths),
        "operations": sum(len(item.operations_by_verb()) for item in document.paths.values()),
        "schemas": len(document.components.schemas) if document.components else 0,
    }
    if api.contact and api.contact.email:
        data["contact"] = api.contact.email
    if api.license and api.license.name:
        data["license"] = api.license.name

    format_response(data)
