"""Example application: places CRUD served through routeforge."""
