from routeforge import define_route


def hello(request):
    return {"message": "Hello from routeforge!"}


routes = define_route(method="GET", path="/hello", handler=hello)
