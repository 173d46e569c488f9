"""Exception hierarchy for oasmodel.

All exceptions inherit from :class:`OasModelError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`oasmodel.exit_codes`.
The CLI entry point in :func:`oasmodel.app.main` catches ``OasModelError``
and exits with the appropriate code.

The document model itself never raises on construction or encoding; only
decoding and the peripheral layers (loader, config, CLI) do.

Subclass hierarchy::

    OasModelError (exit 1)
    +-- InvalidUsageError   (exit 2)
    +-- NotFoundError       (exit 4)
    +-- DecodeError         (exit 7)
    +-- DocumentLoadError   (exit 7)
    +-- ConfigError         (exit 1)
"""

from __future__ import annotations

from typing import Any, Optional

from oasmodel.exit_codes import (
    EXIT_DOCUMENT_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_NOT_FOUND,
)


class OasModelError(Exception):
    """Base exception for all oasmodel errors.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(OasModelError):
    """Raised for invalid CLI arguments."""

    exit_code = EXIT_INVALID_USAGE


class NotFoundError(OasModelError):
    """Raised by the CLI when a schema reference does not resolve.

    The resolver itself reports a miss as ``("", None)``; this exception only
    exists at the command-line boundary.
    """

    exit_code = EXIT_NOT_FOUND


class DecodeError(OasModelError):
    """Raised when text does not describe a valid document.

    Args:
        message: Human-readable error description.
        path: Dotted path of the first offending field, e.g.
            ``paths./pets.get.parameters.0.in``. Empty when the fault is at
            the top level (malformed JSON, non-object root).
        errors: Every violation found, as reported by Pydantic.
    """

    exit_code = EXIT_DOCUMENT_ERROR

    def __init__(
        self,
        message: str,
        path: str = "",
        errors: Optional[list[dict[str, Any]]] = None,
    ):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


class DocumentLoadError(OasModelError):
    """Raised when a document source cannot be read (missing file, HTTP failure, empty stdin)."""

    exit_code = EXIT_DOCUMENT_ERROR


class ConfigError(OasModelError):
    """Raised for configuration problems (invalid JSON, bad environment overrides)."""

    exit_code = EXIT_GENERIC_FAILURE
