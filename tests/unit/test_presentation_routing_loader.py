"""Unit tests for route discovery.

Tests cover:
- Sorted, underscore-skipping file discovery
- Single definition and list exports; falsy exports skipped
- Errors: missing directory, wrong export type, failing module
- Repeated loads yield the same definitions
"""

from pathlib import Path

import pytest

from routeforge.core.errors import ConfigurationError
from routeforge.presentation.routing.loader import (
    discover_route_files,
    load_route_definitions,
    normalize_exports,
)
from routeforge.presentation.routing.metadata import HTTPMethod, define_route

SINGLE_ROUTE = """\
from routeforge import define_route

routes = define_route(method="GET", path="/{name}", handler=lambda request: {{}})
"""

LIST_ROUTES = """\
from routeforge import define_route

routes = [
    define_route(method="GET", path="/{name}", handler=lambda request: []),
    define_route(method="POST", path="/{name}", handler=lambda request: {{}}),
]
"""


def write_route(directory: Path, filename: str, content: str) -> Path:
    path = directory / filename
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def routes_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "routes"
    directory.mkdir()
    return directory


@pytest.mark.unit
class TestDiscoverRouteFiles:
    """Test candidate file discovery."""

    def test_sorted_and_filtered(self, routes_dir):
        """Test files are sorted by name; _-prefixed and non-.py files skipped."""
        for filename in ["users.py", "places.py", "__init__.py", "_helpers.py"]:
            write_route(routes_dir, filename, "")
        write_route(routes_dir, "notes.txt", "")
        (routes_dir / "nested").mkdir()

        files = discover_route_files(routes_dir)

        assert [path.name for path in files] == ["places.py", "users.py"]

    def test_missing_directory_raises(self, tmp_path):
        """Test a missing directory raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match="Routes directory does not exist"):
            discover_route_files(tmp_path / "nope")


@pytest.mark.unit
class TestLoadRouteDefinitions:
    """Test loading definitions from route modules."""

    async def test_single_and_list_exports(self, routes_dir):
        """Test one-definition and list exports, in file then declaration order."""
        write_route(routes_dir, "b_places.py", LIST_ROUTES.format(name="places"))
        write_route(routes_dir, "a_hello.py", SINGLE_ROUTE.format(name="hello"))

        definitions = await load_route_definitions(routes_dir)

        assert [(d.method, d.path) for d in definitions] == [
            (HTTPMethod.GET, "/hello"),
            (HTTPMethod.GET, "/places"),
            (HTTPMethod.POST, "/places"),
        ]

    async def test_module_without_export_contributes_nothing(self, routes_dir):
        """Test modules with no routes attribute (or None) are skipped."""
        write_route(routes_dir, "empty.py", "x = 1\n")
        write_route(routes_dir, "none.py", "routes = None\n")
        write_route(routes_dir, "hello.py", SINGLE_ROUTE.format(name="hello"))

        definitions = await load_route_definitions(routes_dir)

        assert [d.path for d in definitions] == ["/hello"]

    async def test_empty_directory(self, routes_dir):
        """Test an empty directory yields no definitions."""
        assert await load_route_definitions(routes_dir) == []

    async def test_repeated_loads_are_equivalent(self, routes_dir):
        """Test loading twice yields the same routes in the same order."""
        write_route(routes_dir, "places.py", LIST_ROUTES.format(name="places"))

        first = await load_route_definitions(routes_dir)
        second = await load_route_definitions(routes_dir)

        assert [(d.method, d.path) for d in first] == [
            (d.method, d.path) for d in second
        ]

    async def test_wrong_export_type_raises(self, routes_dir):
        """Test a routes value that is not a RouteDefinition is rejected."""
        write_route(routes_dir, "bad.py", 'routes = ["GET /x"]\n')

        with pytest.raises(ConfigurationError, match="must hold RouteDefinition"):
            await load_route_definitions(routes_dir)

    async def test_failing_module_raises(self, routes_dir):
        """Test an import error inside a route module becomes ConfigurationError."""
        write_route(routes_dir, "broken.py", "raise RuntimeError('boom')\n")

        with pytest.raises(ConfigurationError, match="boom"):
            await load_route_definitions(routes_dir)

    async def test_missing_directory_raises(self, tmp_path):
        """Test loading from a missing directory raises ConfigurationError."""
        with pytest.raises(ConfigurationError):
            await load_route_definitions(tmp_path / "missing")


@pytest.mark.unit
class TestNormalizeExports:
    """Test export normalization."""

    def test_single_definition_wrapped(self):
        """Test a lone definition becomes a one-element list."""
        definition = define_route(method="GET", path="/x", handler=lambda r: None)

        assert normalize_exports(definition, "x.py") == [definition]

    def test_falsy_entries_skipped(self):
        """Test None entries inside a list are ignored."""
        definition = define_route(method="GET", path="/x", handler=lambda r: None)

        assert normalize_exports([None, definition], "x.py") == [definition]

    @pytest.mark.parametrize("exported", [None, [], ()])
    def test_empty_exports(self, exported):
        """Test missing and empty exports produce no definitions."""
        assert normalize_exports(exported, "x.py") == []
