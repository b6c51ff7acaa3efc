"""Place request schemas."""

from pydantic import BaseModel, Field


class PlaceCreate(BaseModel):
    """Body for creating or replacing a place."""

    name: str = Field(min_length=1, max_length=120)
    description: str | None = Field(default=None, max_length=1000)
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class PlaceParams(BaseModel):
    """Path parameters of ``/places/:id``."""

    id: str = Field(min_length=1)


class PlaceQuery(BaseModel):
    """Pagination query for ``GET /places``."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)
