"""Request schemas for the example application."""

from example_app.schemas.place import PlaceCreate, PlaceParams, PlaceQuery

__all__ = ["PlaceCreate", "PlaceParams", "PlaceQuery"]
