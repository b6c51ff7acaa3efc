"""``routeforge mock``: serve fake records for a pydantic model.

Loads a model class from a file path or dotted module, fabricates records
with Faker and serves them at ``GET /api/mock/<entity>``. Values are picked
from the field name first (``email``, ``name``, ``city``...) and the
annotation second; every record is validated by the model before it is
served.
"""

import argparse
import importlib
import importlib.util
import sys
import types
import typing
from collections.abc import Callable
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Any
from uuid import UUID

import uvicorn
from faker import Faker
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from pydantic.fields import FieldInfo

from routeforge.core.config import get_settings
from routeforge.core.errors import ConfigurationError

MAX_LIST_ITEMS = 3

# Field name → (value type, generator); used when the annotation matches.
NAME_PROVIDERS: dict[str, tuple[type, Callable[[Faker], Any]]] = {
    "email": (str, lambda fake: fake.email()),
    "name": (str, lambda fake: fake.name()),
    "full_name": (str, lambda fake: fake.name()),
    "first_name": (str, lambda fake: fake.first_name()),
    "last_name": (str, lambda fake: fake.last_name()),
    "username": (str, lambda fake: fake.user_name()),
    "phone": (str, lambda fake: fake.phone_number()),
    "phone_number": (str, lambda fake: fake.phone_number()),
    "address": (str, lambda fake: fake.address()),
    "street": (str, lambda fake: fake.street_address()),
    "city": (str, lambda fake: fake.city()),
    "country": (str, lambda fake: fake.country()),
    "zip_code": (str, lambda fake: fake.postcode()),
    "company": (str, lambda fake: fake.company()),
    "title": (str, lambda fake: fake.sentence(nb_words=4).rstrip(".")),
    "description": (str, lambda fake: fake.paragraph()),
    "text": (str, lambda fake: fake.text(max_nb_chars=200)),
    "url": (str, lambda fake: fake.url()),
    "website": (str, lambda fake: fake.url()),
    "latitude": (float, lambda fake: float(fake.latitude())),
    "longitude": (float, lambda fake: float(fake.longitude())),
    "id": (str, lambda fake: fake.uuid4()),
}

TYPE_PROVIDERS: dict[type, Callable[[Faker], Any]] = {
    bool: lambda fake: fake.pybool(),
    int: lambda fake: fake.random_int(min=0, max=1000),
    float: lambda fake: fake.pyfloat(min_value=0, max_value=1000, right_digits=2),
    Decimal: lambda fake: fake.pydecimal(left_digits=4, right_digits=2, positive=True),
    str: lambda fake: fake.word(),
    datetime: lambda fake: fake.date_time(),
    date: lambda fake: fake.date_object(),
    UUID: lambda fake: fake.uuid4(cast_to=None),
}


# =============================================================================
# Model loading
# =============================================================================


def load_model(schema: str, export: str) -> type[BaseModel]:
    """Load ``export`` from a schema file path or dotted module.

    Raises:
        ConfigurationError: Module cannot be loaded, or the export is
            missing or not a pydantic model class.
    """
    try:
        if schema.endswith(".py") or Path(schema).is_file():
            path = Path(schema).resolve()
            spec = importlib.util.spec_from_file_location(
                f"routeforge_mock.{path.stem}", path
            )
            if spec is None or spec.loader is None:
                msg = f"Cannot load schema module: {schema}"
                raise ConfigurationError(msg)
            module = importlib.util.module_from_spec(spec)
            sys.modules[spec.name] = module
            spec.loader.exec_module(module)
        else:
            module = importlib.import_module(schema)
    except ConfigurationError:
        raise
    except Exception as exc:
        msg = f"Failed to load schema {schema}: {exc}"
        raise ConfigurationError(msg) from exc

    model = getattr(module, export, None)
    if not (isinstance(model, type) and issubclass(model, BaseModel)):
        msg = f'Export "{export}" in {schema} is not a pydantic model'
        raise ConfigurationError(msg)
    return model


# =============================================================================
# Fake data
# =============================================================================


def _unwrap_optional(annotation: Any) -> tuple[Any, bool]:
    origin = typing.get_origin(annotation)
    if origin in (typing.Union, types.UnionType):
        args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0], True
    return annotation, False


def fake_value(name: str, annotation: Any, fake: Faker) -> Any:
    """Fabricate a value for one field."""
    annotation, optional = _unwrap_optional(annotation)
    origin = typing.get_origin(annotation)

    if origin in (list, set, tuple, frozenset):
        args = typing.get_args(annotation)
        item_type = args[0] if args else str
        return [
            fake_value(name, item_type, fake)
            for _ in range(fake.random_int(min=1, max=MAX_LIST_ITEMS))
        ]
    if origin is typing.Literal:
        return fake.random_element(typing.get_args(annotation))

    if isinstance(annotation, type):
        if issubclass(annotation, BaseModel):
            return fake_record(annotation, fake)
        if issubclass(annotation, Enum):
            return fake.random_element(list(annotation)).value

    named = NAME_PROVIDERS.get(name.lower())
    if named is not None and annotation in (named[0], Any):
        return named[1](fake)

    for kind, type_provider in TYPE_PROVIDERS.items():
        if annotation is kind:
            return type_provider(fake)

    if optional:
        return None
    return fake.pystr()


def _field_value(name: str, field: FieldInfo, fake: Faker) -> tuple[str, Any]:
    key = field.alias or name
    return key, fake_value(name, field.annotation, fake)


def fake_record(model: type[BaseModel], fake: Faker) -> dict[str, Any]:
    """Fabricate one record for ``model`` as JSON-compatible data.

    Raises:
        pydantic.ValidationError: If the fabricated values violate the
            model's constraints.
    """
    raw = dict(
        _field_value(name, field, fake) for name, field in model.model_fields.items()
    )
    return model.model_validate(raw).model_dump(mode="json")


def build_fake_records(
    model: type[BaseModel], count: int, fake: Faker | None = None
) -> list[dict[str, Any]]:
    """Fabricate ``count`` records for ``model``."""
    fake = fake or Faker()
    return [fake_record(model, fake) for _ in range(count)]


# =============================================================================
# Server
# =============================================================================


def mock_path(entity: str) -> str:
    return f"/api/mock/{entity}"


def build_mock_app(
    entity: str,
    model: type[BaseModel],
    count: int = 10,
    fake: Faker | None = None,
) -> FastAPI:
    """Build an app serving fresh fake records on every request."""
    fake = fake or Faker()
    app = FastAPI(title=f"{entity} mock API")
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["GET"])

    async def list_records() -> list[dict[str, Any]]:
        return build_fake_records(model, count, fake)

    app.add_api_route(
        mock_path(entity),
        list_records,
        methods=["GET"],
        name=f"mock_{entity}",
        response_model=None,
    )
    return app


def start_mock_server(args: argparse.Namespace) -> None:
    """Load the schema and serve the mock API until interrupted."""
    if args.count < 0:
        print("Error: --count must be zero or more", file=sys.stderr)
        raise SystemExit(1)

    export = args.export or f"{args.entity[:1].upper()}{args.entity[1:]}Schema"
    try:
        model = load_model(args.schema, export)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    settings = get_settings()
    port = args.port or settings.mock_port
    app = build_mock_app(args.entity, model, args.count)
    print(
        f'Mock API for "{args.entity}" ready at '
        f"http://localhost:{port}{mock_path(args.entity)}"
    )
    uvicorn.run(app, host=settings.host, port=port, log_level="warning")
