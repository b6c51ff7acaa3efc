"""``routeforge init``: project scaffolding command.

Creates the conventional ``app/`` layout in the current directory plus an
example route module. Existing files are never overwritten, so running it
twice is harmless.
"""

import argparse
from pathlib import Path

from routeforge.cli._templates import HELLO_ROUTE_PY, PACKAGE_INIT_PY

APP_PACKAGE = "app"

PACKAGES: dict[str, str] = {
    "": "Application package.",
    "routes": "Route modules: each exposes ``routes``.",
    "middleware": "Chain steps shared by routes.",
    "controllers": "Request handlers.",
    "services": "Business logic and storage.",
    "schemas": "Pydantic request schemas.",
}


def write_if_missing(path: Path, content: str) -> bool:
    """Write ``content`` to ``path`` unless the file already exists.

    Returns:
        True when the file was created.
    """
    if path.exists():
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return True


def ensure_package(root: Path, name: str, doc: str) -> bool:
    """Create ``root/app/<name>/__init__.py`` if missing."""
    package_dir = root / APP_PACKAGE / name if name else root / APP_PACKAGE
    created_dir = not package_dir.exists()
    package_dir.mkdir(parents=True, exist_ok=True)
    write_if_missing(package_dir / "__init__.py", PACKAGE_INIT_PY.format(doc=doc))
    return created_dir


def scaffold_project(root: Path) -> list[Path]:
    """Create the app layout under ``root``.

    Returns:
        Paths created by this call (directories and the example route).
    """
    created: list[Path] = []
    for name, doc in PACKAGES.items():
        if ensure_package(root, name, doc):
            created.append(root / APP_PACKAGE / name if name else root / APP_PACKAGE)

    hello = root / APP_PACKAGE / "routes" / "hello.py"
    if write_if_missing(hello, HELLO_ROUTE_PY):
        created.append(hello)
    return created


def init_project(args: argparse.Namespace) -> None:
    """Scaffold a project in the current working directory."""
    root = Path.cwd()
    created = scaffold_project(root)

    for path in created:
        kind = "folder" if path.is_dir() else "example route"
        print(f"Created {kind}: {path.relative_to(root)}")
    if not created:
        print("Nothing to do: project layout already exists")
    print("routeforge project initialized")
