"""Unit tests for the mock data server.

Tests cover:
- Model loading from files and dotted modules, with errors
- Fake values chosen from field names and annotations
- The mock app endpoint and CORS header
"""

from datetime import datetime
from enum import Enum
from typing import Literal

import pytest
from faker import Faker
from fastapi.testclient import TestClient
from pydantic import BaseModel, Field

from routeforge.cli import main
from routeforge.cli._mock import build_fake_records, build_mock_app, load_model
from routeforge.core.errors import ConfigurationError


class Status(Enum):
    ACTIVE = "active"
    DISABLED = "disabled"


class Address(BaseModel):
    city: str
    country: str


class UserSchema(BaseModel):
    id: str
    name: str
    email: str
    age: int = Field(ge=0)
    score: float
    active: bool
    status: Status
    plan: Literal["free", "pro"]
    nickname: str | None = None
    tags: list[str]
    address: Address
    created_at: datetime


SCHEMA_SOURCE = """\
from pydantic import BaseModel


class UserSchema(BaseModel):
    name: str
    email: str


NOT_A_MODEL = 42
"""


@pytest.fixture
def fake():
    Faker.seed(1234)
    return Faker()


@pytest.mark.unit
class TestLoadModel:
    """Test schema loading."""

    def test_load_from_file(self, tmp_path):
        """Test a model class is loaded from a .py file."""
        schema_file = tmp_path / "user.py"
        schema_file.write_text(SCHEMA_SOURCE)

        model = load_model(str(schema_file), "UserSchema")

        assert issubclass(model, BaseModel)
        assert set(model.model_fields) == {"name", "email"}

    def test_load_from_dotted_module(self):
        """Test a model class is loaded from an importable module."""
        model = load_model("example_app.schemas.place", "PlaceCreate")

        assert model.__name__ == "PlaceCreate"

    def test_export_not_a_model(self, tmp_path):
        """Test a non-model export raises ConfigurationError."""
        schema_file = tmp_path / "user.py"
        schema_file.write_text(SCHEMA_SOURCE)

        with pytest.raises(ConfigurationError, match="not a pydantic model"):
            load_model(str(schema_file), "NOT_A_MODEL")

    def test_missing_module(self):
        """Test an unknown module raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match="Failed to load schema"):
            load_model("no_such_package.schemas", "UserSchema")

    def test_main_reports_bad_schema(self, tmp_path, capsys):
        """Test the mock command exits 1 when the schema cannot be used."""
        with pytest.raises(SystemExit) as exc_info:
            main(["mock", "user", "--schema", str(tmp_path / "missing.py")])

        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err


@pytest.mark.unit
class TestFakeRecords:
    """Test record fabrication."""

    def test_records_validate_against_model(self, fake):
        """Test every record satisfies the model."""
        records = build_fake_records(UserSchema, 5, fake)

        assert len(records) == 5
        for record in records:
            UserSchema.model_validate(record)

    def test_values_follow_field_names_and_types(self, fake):
        """Test name heuristics and annotations shape the values."""
        record = build_fake_records(UserSchema, 1, fake)[0]

        assert "@" in record["email"]
        assert isinstance(record["age"], int)
        assert isinstance(record["active"], bool)
        assert record["status"] in {"active", "disabled"}
        assert record["plan"] in {"free", "pro"}
        assert isinstance(record["nickname"], str)
        assert 1 <= len(record["tags"]) <= 3
        assert set(record["address"]) == {"city", "country"}

    def test_zero_count(self, fake):
        """Test count=0 yields an empty list."""
        assert build_fake_records(UserSchema, 0, fake) == []


@pytest.mark.unit
class TestMockApp:
    """Test the mock HTTP app."""

    def test_serves_records(self, fake):
        """Test GET /api/mock/<entity> returns count records."""
        app = build_mock_app("user", UserSchema, count=3, fake=fake)

        with TestClient(app) as client:
            response = client.get(
                "/api/mock/user", headers={"Origin": "http://localhost:3000"}
            )

        assert response.status_code == 200
        assert len(response.json()) == 3
        assert response.headers["access-control-allow-origin"] == "*"

    def test_other_paths_not_served(self, fake):
        """Test only the entity path is mounted."""
        app = build_mock_app("user", UserSchema, count=1, fake=fake)

        with TestClient(app) as client:
            assert client.get("/api/mock/place").status_code == 404
