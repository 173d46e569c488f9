"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~oasmodel.exceptions.OasModelError` subclass.
Shell wrappers can inspect the exit code to tell a malformed document from
an unresolved reference without parsing stderr.

Example::

    $ oasmodel resolve openapi.json '#/components/schemas/Missing'
    $ echo $?
    4   # EXIT_NOT_FOUND -- the reference did not resolve
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments."""

EXIT_NOT_FOUND = 4
"""A schema reference could not be resolved."""

EXIT_DOCUMENT_ERROR = 7
"""The document could not be read or decoded."""
