"""JSON encoding and decoding of :class:`~oasmodel.models.Document` trees.

Encoding delegates to Pydantic's serializer with aliases enabled, so every
field is written under its wire key and the presence rule of
:class:`~oasmodel.models.Entity` drops empty optional fields. URL values are
written back as the text they were parsed from, and
:class:`~oasmodel.models.Items` encodes flat because it is a
:class:`~oasmodel.models.Schema`.

Decoding is strict: a string where an integer is expected, an integer where
a boolean is expected, an unknown enum tag or an unparsable URL is an error
rather than being coerced. It is also all-or-nothing: on failure a
:class:`~oasmodel.exceptions.DecodeError` is raised and no partial document
is returned. Keys the model does not know are ignored.

The core performs no I/O and no logging; see :mod:`oasmodel.loader` for
reading documents from files, stdin or URLs.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Union

from pydantic import ValidationError

from oasmodel.exceptions import DecodeError
from oasmodel.models import Document, Entity


def encode_document(document: Document, indent: Optional[int] = None) -> bytes:
    """Encode *document* as UTF-8 JSON.

    Args:
        document: The document to encode. It is not validated; incomplete
            documents encode as given.
        indent: Pretty-print with this many spaces. ``None`` gives the
            compact form.

    Returns:
        The encoded text as bytes.
    """
    return document.model_dump_json(by_alias=True, indent=indent).encode("utf-8")


def to_data(entity: Entity) -> dict[str, Any]:
    """Return the JSON-compatible object tree for any model node.

    Applies the same presence rule and wire keys as :func:`encode_document`,
    which makes it handy for rendering a single schema or operation.
    """
    return entity.model_dump(mode="json", by_alias=True)


def decode_document(data: Union[bytes, str]) -> Document:
    """Decode a document from JSON text.

    A missing ``paths`` key yields an empty mapping, as does every other
    absent optional collection.

    Args:
        data: UTF-8 JSON text.

    Returns:
        The decoded :class:`~oasmodel.models.Document`.

    Raises:
        DecodeError: If *data* is not valid JSON, is not an object, or any
            field holds a value of the wrong kind. ``path`` on the exception
            locates the first offending field.

    Example::

        doc = decode_document(b'{"openapi": "3.0.1", "info": {"title": "T", "version": "1"}}')
        doc.paths  # {}
    """
    try:
        return Document.model_validate_json(data, strict=True)
    except ValidationError as exc:
        errors = exc.errors(include_url=False)
        first = errors[0]
        path = format_location(first["loc"])
        where = f" at '{path}'" if path else ""
        more = f" (and {len(errors) - 1} more)" if len(errors) > 1 else ""
        raise DecodeError(
            f"Invalid document{where}: {first['msg']}{more}",
            path=path,
            errors=errors,
        ) from exc


def format_location(loc: Sequence[Union[str, int]]) -> str:
    """Join a Pydantic error location into a dotted field path."""
    return ".".join(str(part) for part in loc)
