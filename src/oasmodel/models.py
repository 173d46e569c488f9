"""Canonical Pydantic models for an OpenAPI 3.0 document.

This is the single source of truth for the document tree. Every entity of the
`OpenAPI Specification <https://spec.openapis.org/oas/v3.0.3>`_ that the
package understands is declared here, from :class:`Document` at the root down
to :class:`Schema` and :class:`Discriminator` at the leaves.

Python attribute names are snake_case; the wire key is the field alias (for
example ``terms_of_service`` is emitted as ``termsOfService`` and ``ref`` as
``$ref``). Models accept either spelling at construction time.

**Field presence.** Each field is either *optional* or *required* on the
wire:

* Optional fields are left out of the encoded text when they hold an empty
  value: ``None``, ``""``, ``[]``, ``{}`` or ``False``.
* Required fields are annotated with :data:`REQUIRED` and are always
  emitted, even when empty (``"paths": {}``, ``"description": ""``).

Nothing is validated beyond the field types: callers may build documents
that are incomplete or semantically wrong, and they encode as given.

Encoding, decoding and reference lookup are implemented in
:mod:`oasmodel.codec` and :mod:`oasmodel.resolver`; :class:`Document`
exposes them as methods for convenience.
"""

from __future__ import annotations

import enum
from typing import Annotated, Any, Optional

import httpx
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    PlainValidator,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    model_serializer,
)

DEFAULT_OPENAPI_VERSION = "3.0.1"
"""Version tag written by :func:`new_document` unless told otherwise."""


class _Required:
    """Marker for fields that are emitted even when empty."""

    def __repr__(self) -> str:
        return "REQUIRED"


REQUIRED = _Required()

def _parse_url(value: Any) -> Optional[httpx.URL]:
    if isinstance(value, httpx.URL):
        return value
    if not isinstance(value, str):
        raise ValueError("URL must be a string")
    if not value:
        return None
    try:
        return httpx.URL(value)
    except httpx.InvalidURL as exc:
        raise ValueError(f"Invalid URL: {exc}") from exc


URL = Annotated[httpx.URL, PlainValidator(_parse_url), PlainSerializer(str, return_type=str)]
"""Parsed URL value, absolute or relative. Encodes back to the text it was parsed from."""

Int64 = Annotated[int, Field(ge=-(2**63), le=2**63 - 1)]
"""Signed 64-bit integer used for numeric and length bounds."""


# --- Controlled vocabularies ---


class ParameterLocation(str, enum.Enum):
    """Locations where a parameter can appear, per the OpenAPI ``in`` field."""

    QUERY = "query"
    HEADER = "header"
    PATH = "path"
    COOKIE = "cookie"


class SchemaType(str, enum.Enum):
    """Primitive data types a :class:`Schema` may declare."""

    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"


class SchemaFormat(str, enum.Enum):
    """Well-known format hints.

    ``Schema.format`` is a free-form string; these are only the common values.
    """

    INT32 = "int32"
    INT64 = "int64"
    FLOAT = "float"
    DOUBLE = "double"
    BINARY = "binary"  # sequence of octets
    BYTE = "byte"  # base64
    DATE = "date"  # RFC 3339 full-date
    DATE_TIME = "date-time"  # RFC 3339 date-time
    PASSWORD = "password"


class HTTPMethod(str, enum.Enum):
    """HTTP verbs a :class:`PathItem` can hold an operation for.

    The value is the wire key; the member name is the verb used by
    :meth:`PathItem.operations_by_verb`.
    """

    GET = "get"
    POST = "post"
    PUT = "put"
    PATCH = "patch"
    DELETE = "delete"


# --- Base ---


def _is_empty(value: Any) -> bool:
    if value is None or value is False:
        return True
    return isinstance(value, (str, list, dict)) and len(value) == 0


class Entity(BaseModel):
    """Base class for every node of the document tree.

    Applies the presence rule on serialisation: optional fields holding an
    empty value are dropped, fields annotated with :data:`REQUIRED` are kept.
    """

    model_config = ConfigDict(populate_by_name=True)

    @model_serializer(mode="wrap")
    def omit_empty_fields(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> dict[str, Any]:
        data = handler(self)
        for name, field in type(self).model_fields.items():
            if any(marker is REQUIRED for marker in field.metadata):
                continue
            if _is_empty(getattr(self, name)):
                key = field.alias if info.by_alias and field.alias else name
                data.pop(key, None)
        return data


# --- Schemas ---


class Discriminator(Entity):
    """Selects among polymorphic schema variants by a property value."""

    property_name: Annotated[str, REQUIRED] = Field(default="", alias="propertyName")
    mapping: dict[str, str] = Field(
        default_factory=dict,
        description="Property values mapped to schema names or references",
    )


class Schema(Entity):
    """A data type, or a reference to one in ``components/schemas``.

    A schema carrying ``ref`` is expected to have no other structural fields,
    but nothing enforces it. ``properties`` is only meaningful for the
    ``object`` type and ``items`` only for ``array``.

    Numeric and length bounds are optional integers, so an explicit ``0`` is
    emitted while an unset bound is not. ``minimum`` and ``maximum`` are
    inclusive.

    Example::

        Schema(
            type=SchemaType.OBJECT,
            properties={
                "id": Schema(type=SchemaType.INTEGER, format="int64"),
                "tags": Schema(
                    type=SchemaType.ARRAY,
                    items=Items(type=SchemaType.STRING),
                ),
            },
        )
    """

    type: Optional[SchemaType] = None
    format: str = ""
    minimum: Optional[Int64] = None
    maximum: Optional[Int64] = None
    max_length: Optional[Int64] = Field(default=None, alias="maxLength")
    min_length: Optional[Int64] = Field(default=None, alias="minLength")
    max_items: Optional[Int64] = Field(default=None, alias="maxItems")
    min_items: Optional[Int64] = Field(default=None, alias="minItems")
    nullable: bool = False
    pattern: str = Field(default="", description="ECMA 262 regular expression")
    discriminator: Optional[Discriminator] = None
    read_only: bool = Field(default=False, alias="readOnly")
    write_only: bool = Field(default=False, alias="writeOnly")
    deprecated: bool = False
    properties: dict[str, Schema] = Field(default_factory=dict)
    ref: str = Field(
        default="",
        alias="$ref",
        description="Reference such as #/components/schemas/Pet",
    )
    items: Optional[Items] = None
    description: str = ""
    x_type: str = Field(default="", alias="x-ee.type")


class Items(Schema):
    """Element schema of an array.

    Items *is* a :class:`Schema`, so it encodes as an inline schema object
    rather than a wrapper around one.
    """

    @classmethod
    def wrap(cls, schema: Schema) -> Items:
        """Return an :class:`Items` holding the same fields as *schema*."""
        return cls(**{name: getattr(schema, name) for name in Schema.model_fields})

    def unwrap(self) -> Schema:
        """Return the plain :class:`Schema` with the same fields."""
        return Schema(**{name: getattr(self, name) for name in Schema.model_fields})


Schema.model_rebuild()
Items.model_rebuild()


# --- Operations ---


class Header(Entity):
    """A response header. Shaped like :class:`Parameter` without name and location."""

    description: Annotated[str, REQUIRED] = ""
    required: bool = False
    deprecated: bool = False
    schema_: Optional[Schema] = Field(default=None, alias="schema")


class Encoding(Entity):
    """Serialisation rules for a single schema property of a media type."""

    content_type: str = Field(default="", alias="contentType")
    headers: dict[str, Header] = Field(default_factory=dict)
    style: str = ""
    explode: bool = False
    allow_reserved: bool = Field(default=False, alias="allowReserved")


class MediaType(Entity):
    """Schema (and optional property encodings) for one content type."""

    schema_: Annotated[Schema, REQUIRED] = Field(default_factory=Schema, alias="schema")
    encoding: dict[str, Encoding] = Field(default_factory=dict)


class Parameter(Entity):
    """A path, query, header or cookie parameter.

    A parameter is unique per ``name`` and ``location`` within an operation.
    Its data type is described by either ``schema_`` or ``content``; both may
    be set, nothing checks that only one is. An unset location still
    encodes, as ``"in": null``.
    """

    name: Annotated[str, REQUIRED] = ""
    location: Annotated[Optional[ParameterLocation], REQUIRED] = Field(default=None, alias="in")
    description: Annotated[str, REQUIRED] = ""
    required: bool = Field(default=False, description="Must be true for path parameters")
    deprecated: bool = False
    schema_: Optional[Schema] = Field(default=None, alias="schema")
    content: dict[str, MediaType] = Field(default_factory=dict)


class Response(Entity):
    """A single response of an operation."""

    description: Annotated[str, REQUIRED] = ""
    headers: dict[str, Header] = Field(default_factory=dict)
    content: dict[str, MediaType] = Field(default_factory=dict)


class Operation(Entity):
    """Behaviour of one HTTP verb on a path.

    ``responses`` is keyed by status code (``"200"``) or ``"default"``.
    """

    tags: list[str] = Field(default_factory=list)
    summary: str = ""
    description: str = ""
    parameters: list[Parameter] = Field(default_factory=list)
    responses: Annotated[dict[str, Response], REQUIRED] = Field(default_factory=dict)


class PathItem(Entity):
    """The operations available on a single path."""

    summary: str = ""
    description: str = ""
    get: Optional[Operation] = None
    post: Optional[Operation] = None
    put: Optional[Operation] = None
    patch: Optional[Operation] = None
    delete: Optional[Operation] = None

    def operations_by_verb(self) -> dict[str, Operation]:
        """Return the operations that are set, keyed by upper-case verb.

        Computed on every call; absent verbs are left out, so an empty
        path item yields an empty dict.

        Example::

            item = PathItem(get=Operation(summary="List pets"))
            item.operations_by_verb()  # {"GET": Operation(...)}
        """
        operations: dict[str, Operation] = {}
        for method in HTTPMethod:
            operation = getattr(self, method.value)
            if operation is not None:
                operations[method.name] = operation
        return operations


# --- Servers ---


class ServerVariable(Entity):
    """Substitution rule for a ``{name}`` placeholder in a server URL."""

    enum: list[str] = Field(default_factory=list)
    default: Annotated[str, REQUIRED] = ""
    description: Annotated[str, REQUIRED] = ""


class Server(Entity):
    """A target host. ``url`` is kept as written, placeholders included."""

    url: Annotated[str, REQUIRED] = ""
    description: str = ""
    variables: dict[str, ServerVariable] = Field(default_factory=dict)


# --- Info ---


class Contact(Entity):
    """Contact details of the API maintainer."""

    name: str = ""
    url: Optional[URL] = None
    email: str = ""


class License(Entity):
    """License the API is published under."""

    name: Annotated[str, REQUIRED] = ""
    url: Optional[URL] = None


class Info(Entity):
    """Metadata about the API. ``title`` and ``version`` are required."""

    title: Annotated[str, REQUIRED] = ""
    description: str = ""
    terms_of_service: Optional[URL] = Field(default=None, alias="termsOfService")
    contact: Optional[Contact] = None
    license: Optional[License] = None
    version: Annotated[str, REQUIRED] = ""


# --- Root ---


class Components(Entity):
    """Registry of reusable, named schema definitions."""

    schemas: dict[str, Schema] = Field(default_factory=dict)


class Document(Entity):
    """Root of an OpenAPI 3.0 document.

    ``paths`` is always present: it defaults to an empty dict when built and
    when decoded from text without a ``paths`` key.

    See Also:
        :func:`new_document`: Factory filling in the version tag.
        :func:`~oasmodel.codec.encode_document`: Text encoding.
        :func:`~oasmodel.resolver.resolve_ref`: Schema reference lookup.
    """

    openapi: Annotated[str, REQUIRED] = ""
    info: Annotated[Info, REQUIRED] = Field(default_factory=Info)
    servers: list[Server] = Field(default_factory=list)
    paths: Annotated[dict[str, PathItem], REQUIRED] = Field(default_factory=dict)
    components: Optional[Components] = None

    def encode(self, indent: Optional[int] = None) -> bytes:
        """Encode the document as UTF-8 JSON text."""
        from oasmodel.codec import encode_document

        return encode_document(self, indent=indent)

    @classmethod
    def decode(cls, data: bytes | str) -> Document:
        """Decode a document from JSON text.

        Raises:
            DecodeError: If *data* does not describe a valid document.
        """
        from oasmodel.codec import decode_document

        return decode_document(data)

    def resolve_ref(self, ref: str) -> tuple[str, Optional[Schema]]:
        """Look up a ``#/components/schemas/<name>`` reference.

        Returns:
            ``(name, schema)`` with a copy of the registered schema, or
            ``("", None)`` when the reference cannot be resolved.
        """
        from oasmodel.resolver import resolve_ref

        return resolve_ref(self, ref)

    def __str__(self) -> str:
        return self.encode().decode("utf-8")


def new_document(openapi: str = DEFAULT_OPENAPI_VERSION) -> Document:
    """Return an empty document tagged with *openapi*, ready to be filled in."""
    return Document(openapi=openapi, paths={})
