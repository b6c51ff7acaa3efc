"""routeforge CLI: project scaffolding, CRUD generation and mock server.

Entry point registered as ``routeforge`` in ``pyproject.toml``::

    [project.scripts]
    routeforge = "routeforge.cli:main"
"""

import argparse
import sys


def build_parser() -> argparse.ArgumentParser:
    """Build the ``routeforge`` argument parser."""
    parser = argparse.ArgumentParser(
        prog="routeforge",
        description="routeforge: declarative route registration for FastAPI.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- routeforge init --------------------------------------------------
    subparsers.add_parser("init", help="Create the app/ project layout")

    # -- routeforge generate crud -----------------------------------------
    generate_parser = subparsers.add_parser("generate", help="Generate code")
    generate_sub = generate_parser.add_subparsers(dest="generator")
    crud_parser = generate_sub.add_parser(
        "crud", help="Controller, service and routes for an entity"
    )
    crud_parser.add_argument("entity", help="Entity name (e.g. user)")
    crud_parser.add_argument(
        "--schema",
        default=None,
        help="Schema module path or dotted name (e.g. app/schemas/user.py)",
    )
    crud_parser.add_argument(
        "--export",
        default=None,
        help="Schema class exported by --schema (default: <Entity>Schema)",
    )
    crud_parser.add_argument(
        "--validation",
        action="store_true",
        help="Validate :id params and bodies in the generated routes",
    )

    # -- routeforge mock --------------------------------------------------
    mock_parser = subparsers.add_parser("mock", help="Serve fake records for a model")
    mock_parser.add_argument(
        "entity", help="Entity name (served at /api/mock/<entity>)"
    )
    mock_parser.add_argument(
        "--schema",
        required=True,
        help="Schema module path or dotted name holding the pydantic model",
    )
    mock_parser.add_argument(
        "--export",
        default=None,
        help="Model class name (default: <Entity>Schema)",
    )
    mock_parser.add_argument(
        "--count", type=int, default=10, help="Records per response (default: 10)"
    )
    mock_parser.add_argument(
        "--port", type=int, default=None, help="Bind port (default: settings.mock_port)"
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``routeforge`` command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "init":
        from routeforge.cli._scaffold import init_project

        init_project(args)
    elif args.command == "generate":
        if args.generator != "crud":
            print(
                "Usage: routeforge generate crud <entity> [--schema PATH] "
                "[--export NAME] [--validation]",
                file=sys.stderr,
            )
            sys.exit(1)
        from routeforge.cli._generate import generate_crud

        generate_crud(args)
    elif args.command == "mock":
        from routeforge.cli._mock import start_mock_server

        start_mock_server(args)
