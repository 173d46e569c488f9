"""Look up ``$ref`` schema references in a document's component registry.

Only references of the form ``#/components/schemas/<name>`` are understood.
External files and other component kinds (responses, parameters, ...) are
outside the model and always miss.

A miss is a normal outcome, not an error: :func:`resolve_ref` returns
``("", None)`` and the caller decides what to do. Resolution is one level
deep; when the returned schema itself carries a ``ref``, following it is up
to the caller, so reference cycles need no special handling here.
"""

from __future__ import annotations

from typing import Optional

from oasmodel.models import Document, Schema

SCHEMA_REF_PREFIX = "#/components/schemas/"


def resolve_ref(document: Document, ref: str) -> tuple[str, Optional[Schema]]:
    """Resolve *ref* against ``document.components.schemas``.

    Args:
        document: The document holding the registry.
        ref: A reference string such as ``"#/components/schemas/Pet"``.

    Returns:
        ``(name, schema)`` where *schema* is a deep copy of the registered
        definition, so edits to it never reach the registry and vice versa.
        ``("", None)`` when *ref* has another shape, the document has no
        components, or no schema is registered under the name.

    Example::

        name, schema = resolve_ref(doc, "#/components/schemas/Pet")
        if schema is None:
            ...  # unresolved
    """
    if not ref.startswith(SCHEMA_REF_PREFIX):
        return "", None

    name = ref[len(SCHEMA_REF_PREFIX):]
    if document.components is None:
        return "", None

    schema = document.components.schemas.get(name)
    if schema is None:
        return "", None
    return name, schema.model_copy(deep=True)


def schema_ref(name: str) -> str:
    """Return the reference string pointing at the schema registered as *name*."""
    return SCHEMA_REF_PREFIX + name
