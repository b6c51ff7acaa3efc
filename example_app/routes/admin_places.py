"""Validated, token-protected variant of the place routes."""

from example_app.controllers.place_controller import PlaceController
from example_app.schemas.place import PlaceCreate, PlaceParams, PlaceQuery
from routeforge import HTTPMethod, define_route

routes = [
    define_route(
        method=HTTPMethod.GET,
        path="/admin/places",
        auth=True,
        validate={"query": PlaceQuery},
        handler=PlaceController.find_all,
        name="admin_find_all",
        tags=["admin"],
    ),
    define_route(
        method=HTTPMethod.POST,
        path="/admin/places",
        auth=True,
        validate={"body": PlaceCreate},
        handler=PlaceController.create,
        name="admin_create",
        tags=["admin"],
    ),
    define_route(
        method=HTTPMethod.GET,
        path="/admin/places/:id",
        auth=True,
        validate={"params": PlaceParams},
        handler=PlaceController.find_by_id,
        name="admin_find_by_id",
        tags=["admin"],
    ),
    define_route(
        method=HTTPMethod.PUT,
        path="/admin/places/:id",
        auth=True,
        validate={"params": PlaceParams, "body": PlaceCreate},
        handler=PlaceController.update,
        name="admin_update",
        tags=["admin"],
    ),
    define_route(
        method=HTTPMethod.DELETE,
        path="/admin/places/:id",
        auth=True,
        validate={"params": PlaceParams},
        handler=PlaceController.delete,
        name="admin_delete",
        tags=["admin"],
    ),
]
