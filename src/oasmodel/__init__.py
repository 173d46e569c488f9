"""oasmodel -- a typed model of OpenAPI 3.0 documents with a JSON codec.

Programs build an API description (paths, operations, parameters,
responses, reusable schemas) as a tree of Pydantic models and emit it as
standard OpenAPI JSON for UI renderers, validators and client generators.
The same text decodes back into an equal tree.

Typical usage::

    from oasmodel import Info, Operation, PathItem, Response, new_document

    doc = new_document()
    doc.info = Info(title="Pet Store", version="1.0.0")
    doc.paths["/pets"] = PathItem(
        get=Operation(summary="List pets", responses={"200": Response(description="ok")})
    )
    text = doc.encode()

Modules:
    models: The document tree, presence rules and controlled vocabularies.
    codec: JSON encoding and strict, all-or-nothing decoding.
    resolver: ``#/components/schemas/<name>`` reference lookup.
    loader: Reading documents from files, stdin or URLs; atomic saving.
    config: XDG-aware settings with environment overrides.
    exceptions: Exception hierarchy with exit-code mapping.
    app: Typer CLI entry point.
"""

__version__ = "0.1.0"

from oasmodel.codec import decode_document, encode_document  # noqa: E402
from oasmodel.exceptions import DecodeError  # noqa: E402
from oasmodel.models import (  # noqa: E402
    DEFAULT_OPENAPI_VERSION,
    URL,
    Components,
    Contact,
    Discriminator,
    Document,
    Encoding,
    Header,
    HTTPMethod,
    Info,
    Items,
    License,
    MediaType,
    Operation,
    Parameter,
    ParameterLocation,
    PathItem,
    Response,
    Schema,
    SchemaFormat,
    SchemaType,
    Server,
    ServerVariable,
    new_document,
)
from oasmodel.resolver import resolve_ref  # noqa: E402

__all__ = [
    "DEFAULT_OPENAPI_VERSION",
    "URL",
    "Components",
    "Contact",
    "DecodeError",
    "Discriminator",
    "Document",
    "Encoding",
    "HTTPMethod",
    "Header",
    "Info",
    "Items",
    "License",
    "MediaType",
    "Operation",
    "Parameter",
    "ParameterLocation",
    "PathItem",
    "Response",
    "Schema",
    "SchemaFormat",
    "SchemaType",
    "Server",
    "ServerVariable",
    "decode_document",
    "encode_document",
    "new_document",
    "resolve_ref",
]
