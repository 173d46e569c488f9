"""Built-in CLI sub-commands for oasmodel.

This package groups the Typer command modules that form the CLI's command
tree:

* :mod:`~oasmodel.commands.document` -- ``new``, ``fmt`` and ``resolve``:
  create, re-encode and query whole documents.
* :mod:`~oasmodel.commands.inspect` -- examine paths, schemas and API info
  defined in a document.

Each module either exports a :class:`typer.Typer` sub-application (for
multi-command groups like ``inspect``) or plain callback functions
registered directly on the root app.
"""
