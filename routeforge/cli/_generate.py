"""``routeforge generate crud``: controller, service and route generation.

Writes three modules for an entity:

- ``app/services/<entity>_service.py``: in-memory service
- ``app/controllers/<entity>_controller.py``: handlers
- ``app/routes/<entity>.py``: route definitions for ``/<entity>s``

Existing files are left untouched.
"""

import argparse
import re
import sys
from dataclasses import dataclass
from pathlib import Path

from routeforge.cli._scaffold import (
    APP_PACKAGE,
    PACKAGES,
    ensure_package,
    write_if_missing,
)
from routeforge.cli._templates import (
    CONTROLLER_PY,
    ID_PARAMS_CLASS,
    ROUTES_PY,
    SERVICE_PY,
)

_ENTITY = re.compile(r"^[A-Za-z][A-Za-z0-9_-]*$")


@dataclass(frozen=True, slots=True)
class EntityNames:
    """Names derived from the entity argument."""

    module: str
    pascal: str
    path: str

    @classmethod
    def from_entity(cls, entity: str) -> "EntityNames":
        """Derive names (``user-profile`` → ``user_profile``, ``UserProfile``).

        Raises:
            ValueError: If ``entity`` cannot be a Python module name.
        """
        if not _ENTITY.match(entity):
            msg = f"Invalid entity name: {entity!r}"
            raise ValueError(msg)
        parts = [part for part in re.split(r"[-_]", entity) if part]
        return cls(
            module="_".join(part.lower() for part in parts),
            pascal="".join(part[:1].upper() + part[1:] for part in parts),
            path=f"/{entity.lower()}s",
        )


def schema_module_name(schema: str) -> str:
    """Turn a schema file path or dotted module into an import path.

    ``./app/schemas/user.py`` and ``app.schemas.user`` both give
    ``app.schemas.user``.
    """
    if schema.endswith(".py") or "/" in schema or "\\" in schema:
        path = Path(schema.removesuffix(".py"))
        return ".".join(part for part in path.parts if part not in (".", ""))
    return schema


def render_routes(
    names: EntityNames,
    *,
    validation: bool,
    schema: str | None = None,
    export: str | None = None,
) -> str:
    """Render the route module for ``names``."""
    body_schema = export if validation and schema else None

    lines: list[str] = []
    if validation:
        lines += ["from pydantic import BaseModel", ""]
    lines.append(
        f"from app.controllers.{names.module}_controller "
        f"import {names.pascal}Controller"
    )
    if body_schema:
        lines.append(f"from {schema_module_name(schema or '')} import {body_schema}")
    lines.append("from routeforge import HTTPMethod, define_route")
    imports = "\n".join(lines) + "\n"
    if validation:
        imports += ID_PARAMS_CLASS.format(pascal=names.pascal)
    imports += "\n"

    indent = "\n        "
    params = f'"params": {names.pascal}Params'
    body = f'"body": {body_schema}'
    id_validation = f"{indent}validate={{{params}}}," if validation else ""
    create_validation = f"{indent}validate={{{body}}}," if body_schema else ""
    if body_schema:
        update_validation = f"{indent}validate={{{params}, {body}}},"
    else:
        update_validation = id_validation

    return ROUTES_PY.format(
        imports=imports,
        pascal=names.pascal,
        path=names.path,
        id_validation=id_validation,
        create_validation=create_validation,
        update_validation=update_validation,
    )


def generate_crud_files(
    root: Path,
    entity: str,
    *,
    validation: bool = False,
    schema: str | None = None,
    export: str | None = None,
) -> dict[Path, bool]:
    """Write the CRUD modules for ``entity`` under ``root``.

    Returns:
        Mapping of target path → True when written, False when it existed.

    Raises:
        ValueError: If ``entity`` is not a valid name.
    """
    names = EntityNames.from_entity(entity)
    export = export or f"{names.pascal}Schema"

    for package in ("", "controllers", "services", "routes"):
        ensure_package(root, package, PACKAGES[package])

    app_dir = root / APP_PACKAGE
    controller = app_dir / "controllers" / f"{names.module}_controller.py"
    service = app_dir / "services" / f"{names.module}_service.py"
    route_module = app_dir / "routes" / f"{names.module}.py"
    files = {
        controller: CONTROLLER_PY.format(pascal=names.pascal, entity=names.module),
        service: SERVICE_PY.format(pascal=names.pascal, entity=names.module),
        route_module: render_routes(
            names, validation=validation, schema=schema, export=export
        ),
    }
    return {path: write_if_missing(path, content) for path, content in files.items()}


def generate_crud(args: argparse.Namespace) -> None:
    """Generate CRUD modules in the current working directory."""
    root = Path.cwd()
    try:
        results = generate_crud_files(
            root,
            args.entity,
            validation=args.validation,
            schema=args.schema,
            export=args.export,
        )
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    for path, written in results.items():
        status = "Created" if written else "Skipped (exists)"
        print(f"{status}: {path.relative_to(root)}")
