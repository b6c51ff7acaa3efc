"""In-memory place storage."""

from collections.abc import Mapping
from typing import Any

from uuid_extensions import uuid7


class PlaceService:
    """Stores places in a dict keyed by id (insertion ordered)."""

    def __init__(self) -> None:
        self._places: dict[str, dict[str, Any]] = {}

    async def find_all(self, page: int = 1, limit: int = 10) -> dict[str, Any]:
        skip = (page - 1) * limit
        places = list(self._places.values())
        return {
            "data": places[skip : skip + limit],
            "total": len(places),
            "page": page,
            "limit": limit,
        }

    async def find_by_id(self, place_id: str) -> dict[str, Any] | None:
        return self._places.get(place_id)

    async def create(self, data: Mapping[str, Any]) -> dict[str, Any]:
        place = {**data, "id": str(uuid7())}
        self._places[place["id"]] = place
        return place

    async def update(
        self, place_id: str, data: Mapping[str, Any]
    ) -> dict[str, Any] | None:
        if place_id not in self._places:
            return None
        place = {**self._places[place_id], **data, "id": place_id}
        self._places[place_id] = place
        return place

    async def delete(self, place_id: str) -> bool:
        return self._places.pop(place_id, None) is not None

    def clear(self) -> None:
        """Drop every stored place."""
        self._places.clear()
