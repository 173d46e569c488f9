"""Shared test fixtures for oasmodel.

Provides reusable fixtures for the fixture document, a document built in
code, isolated config environments, output state, and running CLI commands.
These fixtures are automatically discovered by pytest and available to all
test modules without explicit imports.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from oasmodel.models import (
    Components,
    Contact,
    Discriminator,
    Document,
    Header,
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
    SchemaType,
    Server,
    ServerVariable,
)
from oasmodel.output import reset_output


FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time. When Typer's CliRunner redirects those streams during
    a test and the test finishes, the cached references become stale.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Document fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def petstore_path() -> Path:
    """Path to the petstore JSON fixture."""
    return FIXTURES_DIR / "petstore.json"


@pytest.fixture
def petstore_bytes(petstore_path: Path) -> bytes:
    """Raw bytes of the petstore JSON fixture."""
    return petstore_path.read_bytes()


@pytest.fixture
def built_document() -> Document:
    """A document exercising every entity, built field by field."""
    pet = Schema(
        type=SchemaType.OBJECT,
        discriminator=Discriminator(property_name="kind", mapping={"cat": "Cat"}),
        properties={
            "id": Schema(type=SchemaType.INTEGER, format="int64", read_only=True),
            "name": Schema(type=SchemaType.STRING, min_length=1, max_length=64),
            "tags": Schema(
                type=SchemaType.ARRAY,
                min_items=0,
                max_items=10,
                items=Items(type=SchemaType.STRING, pattern="^[a-z]+$"),
            ),
        },
    )
    list_pets = Operation(
        tags=["pets", "pets"],
        summary="List pets",
        description="Returns *all* pets",
        parameters=[
            Parameter(
                name="limit",
                location=ParameterLocation.QUERY,
                description="Page size",
                schema_=Schema(type=SchemaType.INTEGER, minimum=1, maximum=100),
            ),
        ],
        responses={
            "200": Response(
                description="ok",
                headers={"X-Rate-Limit": Header(description="calls left", schema_=Schema(type=SchemaType.INTEGER))},
                content={
                    "application/json": MediaType(
                        schema_=Schema(type=SchemaType.ARRAY, items=Items(ref="#/components/schemas/Pet"))
                    )
                },
            ),
            "default": Response(description="error"),
        },
    )
    return Document(
        openapi="3.0.1",
        info=Info(
            title="Pets",
            description="Pet API",
            terms_of_service="https://example.com/terms",
            contact=Contact(name="Support", url="https://example.com/support", email="s@example.com"),
            license=License(name="MIT", url="https://opensource.org/licenses/MIT"),
            version="1.2.3",
        ),
        servers=[
            Server(
                url="https://{env}.example.com",
                description="main",
                variables={"env": ServerVariable(enum=["prod", "dev"], default="prod", description="stage")},
            )
        ],
        paths={
            "/pets": PathItem(get=list_pets, post=Operation(responses={"201": Response(description="created")})),
        },
        components=Components(schemas={"Pet": pet}),
    )


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate configuration to a temporary directory.

    Points XDG_CONFIG_HOME at tmp_path, clears all OASMODEL_* environment
    variables and changes the working directory to tmp_path.

    Returns:
        The tmp_path root directory for additional file creation.
    """
    monkeypatch.setattr("oasmodel.config._is_xdg_platform", lambda: True)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    for var in [
        "OASMODEL_OPENAPI_VERSION",
        "OASMODEL_INDENT",
        "OASMODEL_OUTPUT_FORMAT",
        "OASMODEL_HTTP_TIMEOUT",
        "NO_COLOR",
    ]:
        monkeypatch.delenv(var, raising=False)

    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# CLI runner fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
