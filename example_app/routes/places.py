from example_app.controllers.place_controller import PlaceController
from routeforge import HTTPMethod, define_route

routes = [
    define_route(
        method=HTTPMethod.GET,
        path="/places",
        handler=PlaceController.find_all,
        tags=["places"],
    ),
    define_route(
        method=HTTPMethod.POST,
        path="/places",
        handler=PlaceController.create,
        tags=["places"],
    ),
    define_route(
        method=HTTPMethod.GET,
        path="/places/:id",
        handler=PlaceController.find_by_id,
        tags=["places"],
    ),
    define_route(
        method=HTTPMethod.PUT,
        path="/places/:id",
        handler=PlaceController.update,
        tags=["places"],
    ),
    define_route(
        method=HTTPMethod.DELETE,
        path="/places/:id",
        handler=PlaceController.delete,
        tags=["places"],
    ),
]
