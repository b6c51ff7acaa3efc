"""Route discovery.

Scans a directory for route modules and yields the RouteDefinitions they
export through their ``routes`` attribute.

Discovery rules:
    - only ``*.py`` files directly inside the directory
    - files starting with ``_`` (``__init__.py``, private helpers) are ignored
    - files are visited in sorted filename order
    - ``routes`` may be one RouteDefinition or a list/tuple of them
    - a module without ``routes`` (or with a falsy value) contributes nothing

Each module is executed fresh on every load, in a worker thread so the
event loop keeps serving while route modules import their dependencies.
"""

import asyncio
import importlib.util
import sys
from collections.abc import AsyncIterator, Iterable
from pathlib import Path
from types import ModuleType
from typing import Any

from routeforge.core.errors import ConfigurationError
from routeforge.presentation.routing.metadata import RouteDefinition

ROUTE_FILE_SUFFIX = ".py"
EXPORT_NAME = "routes"
_MODULE_NAMESPACE = "routeforge_routes"


def resolve_routes_dir(routes_dir: str | Path) -> Path:
    """Return ``routes_dir`` as an absolute path (relative to the cwd)."""
    return Path(routes_dir).expanduser().resolve()


def ensure_routes_dir(routes_dir: str | Path) -> Path:
    """Resolve ``routes_dir`` and check that it is a directory.

    Raises:
        ConfigurationError: If the directory does not exist.
    """
    path = resolve_routes_dir(routes_dir)
    if not path.is_dir():
        msg = f"Routes directory does not exist: {path}"
        raise ConfigurationError(msg)
    return path


def discover_route_files(routes_dir: str | Path) -> list[Path]:
    """List candidate route modules in deterministic order.

    Raises:
        ConfigurationError: If the directory does not exist.
    """
    path = ensure_routes_dir(routes_dir)
    return sorted(
        (
            entry
            for entry in path.iterdir()
            if entry.is_file()
            and entry.suffix == ROUTE_FILE_SUFFIX
            and not entry.name.startswith("_")
        ),
        key=lambda entry: entry.name,
    )


def _import_route_module(file_path: Path) -> ModuleType:
    module_name = f"{_MODULE_NAMESPACE}.{file_path.parent.name}.{file_path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, file_path)
    if spec is None or spec.loader is None:
        msg = f"Cannot load route module: {file_path}"
        raise ConfigurationError(msg)

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        sys.modules.pop(module_name, None)
        msg = f"Failed to import route module {file_path}: {exc}"
        raise ConfigurationError(msg) from exc
    return module


def normalize_exports(exported: Any, source: Path | str) -> list[RouteDefinition]:
    """Turn a module's ``routes`` value into a list of definitions.

    Args:
        exported: Value of the module attribute.
        source: File the value came from (error messages only).

    Returns:
        Definitions in declaration order; falsy entries skipped.

    Raises:
        ConfigurationError: If an entry is not a RouteDefinition.
    """
    if not exported:
        return []

    items: Iterable[Any] = (
        exported if isinstance(exported, (list, tuple)) else [exported]
    )
    definitions: list[RouteDefinition] = []
    for item in items:
        if not item:
            continue
        if not isinstance(item, RouteDefinition):
            msg = (
                f"{source}: '{EXPORT_NAME}' must hold RouteDefinition values, "
                f"got {type(item).__name__}"
            )
            raise ConfigurationError(msg)
        definitions.append(item)
    return definitions


async def iter_route_definitions(
    routes_dir: str | Path,
) -> AsyncIterator[RouteDefinition]:
    """Yield every RouteDefinition found in ``routes_dir``.

    Raises:
        ConfigurationError: Missing directory, unloadable module or a
            ``routes`` value of the wrong type.
    """
    for file_path in discover_route_files(routes_dir):
        module = await asyncio.to_thread(_import_route_module, file_path)
        for definition in normalize_exports(
            getattr(module, EXPORT_NAME, None), file_path
        ):
            yield definition


async def load_route_definitions(routes_dir: str | Path) -> list[RouteDefinition]:
    """Collect :func:`iter_route_definitions` into a list."""
    return [definition async for definition in iter_route_definitions(routes_dir)]
