"""API tests for the validated, token-protected place routes.

- GET    /api/v1/admin/places      (auth + query validation)
- POST   /api/v1/admin/places      (auth + body validation)
- PUT    /api/v1/admin/places/:id  (auth + params/body validation)
- DELETE /api/v1/admin/places/:id  (auth + params validation)
"""

import pytest

PLACE = {
    "name": "Central Park",
    "description": "Urban park",
    "latitude": 40.7829,
    "longitude": -73.9654,
}


def create_place(client, bearer, **overrides) -> dict:
    response = client.post(
        "/api/v1/admin/places", json=PLACE | overrides, headers=bearer
    )
    assert response.status_code == 201
    return response.json()


@pytest.mark.api
class TestAdminList:
    """Test GET /api/v1/admin/places."""

    def test_pagination(self, client, bearer):
        """Test validated page and limit select the requested slice."""
        names = [f"Place {index}" for index in range(7)]
        for name in names:
            create_place(client, bearer, name=name)

        response = client.get(
            "/api/v1/admin/places", params={"page": 2, "limit": 5}, headers=bearer
        )

        assert response.status_code == 200
        assert [place["name"] for place in response.json()["data"]] == names[5:]

    def test_invalid_pagination(self, client, bearer):
        """Test a non-numeric page is a validation failure."""
        response = client.get(
            "/api/v1/admin/places", params={"page": "two"}, headers=bearer
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "page"

    def test_requires_token(self, client):
        """Test listing without a token answers 401."""
        response = client.get("/api/v1/admin/places")

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"


@pytest.mark.api
class TestAdminCreate:
    """Test POST /api/v1/admin/places."""

    def test_create(self, client, bearer):
        """Test a valid body with a token creates the place."""
        place = create_place(client, bearer)

        assert place["name"] == "Central Park"
        assert client.get(f"/api/v1/places/{place['id']}").json() == place

    def test_invalid_body_reports_fields(self, client, bearer):
        """Test out-of-range coordinates are reported per field."""
        response = client.post(
            "/api/v1/admin/places",
            json=PLACE | {"latitude": 120, "longitude": -200},
            headers=bearer,
        )

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Validation failed"
        assert {error["field"] for error in body["errors"]} == {"latitude", "longitude"}

    def test_empty_body_reports_required_fields(self, client, bearer):
        """Test an empty body lists every required field."""
        response = client.post("/api/v1/admin/places", headers=bearer)

        assert response.status_code == 400
        assert {error["field"] for error in response.json()["errors"]} == {
            "name",
            "latitude",
            "longitude",
        }

    def test_validation_precedes_auth(self, client):
        """Test a bad body without a token answers 400, not 401."""
        response = client.post("/api/v1/admin/places", json={"name": ""})

        assert response.status_code == 400

    def test_missing_token(self, client):
        """Test a valid body without a token answers 401."""
        response = client.post("/api/v1/admin/places", json=PLACE)

        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized: Missing token"}

    def test_invalid_token(self, client):
        """Test a forged token answers 401 Invalid token."""
        response = client.post(
            "/api/v1/admin/places",
            json=PLACE,
            headers={"Authorization": "Bearer not.a.token"},
        )

        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized: Invalid token"}

    def test_malformed_json(self, client, bearer):
        """Test an unparseable body answers 400."""
        response = client.post(
            "/api/v1/admin/places",
            content=b"{broken",
            headers=bearer | {"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["errors"] == [
            {"field": "body", "message": "Malformed JSON body"}
        ]


@pytest.mark.api
class TestAdminById:
    """Test PUT/DELETE /api/v1/admin/places/:id."""

    def test_update(self, client, bearer):
        """Test PUT replaces the place fields."""
        place = create_place(client, bearer)

        response = client.put(
            f"/api/v1/admin/places/{place['id']}",
            json=PLACE | {"name": "Bryant Park"},
            headers=bearer,
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Bryant Park"

    def test_update_missing(self, client, bearer):
        """Test PUT on an unknown id answers 404 after validation and auth."""
        response = client.put(
            "/api/v1/admin/places/unknown", json=PLACE, headers=bearer
        )

        assert response.status_code == 404

    def test_delete_requires_auth(self, client):
        """Test DELETE without a token answers 401."""
        response = client.delete("/api/v1/admin/places/unknown")

        assert response.status_code == 401

    def test_delete(self, client, bearer):
        """Test DELETE with a token answers 204."""
        place = create_place(client, bearer)

        response = client.delete(f"/api/v1/admin/places/{place['id']}", headers=bearer)

        assert response.status_code == 204
