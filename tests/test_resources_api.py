"""Users, locations and bucket list item routes, plus app-level endpoints."""
import pytest

from conftest import auth_header


@pytest.fixture
def token(register, login):
    register()
    return login().get_json()["accessToken"]


class TestAppEndpoints:
    def test_root(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.get_json() == {"test": "hello,world"}

    def test_health(self, client):
        assert client.get("/health").get_json() == {"status": "ok", "version": "1.0.0"}

    def test_unknown_route_uses_error_envelope(self, client):
        resp = client.get("/nope")
        assert resp.status_code == 404
        assert resp.get_json()["ok"] is False
        assert resp.get_json()["code"] == "NOT_FOUND"

    def test_api_spec_lists_routes(self, client):
        resp = client.get("/apispec.json")
        assert resp.status_code == 200
        paths = resp.get_json()["paths"]
        assert "/login" in paths
        assert "/refresh_token" in paths


class TestUsers:
    def test_register_never_returns_password(self, client, register):
        user = register()
        assert user["email"] == "alice@example.com"
        assert user["name"] == "Alice"
        assert "password" not in user
        assert "password_hash" not in user

    def test_register_normalizes_email(self, client, register, login):
        register(email="  Alice@Example.COM ")
        assert login("alice@example.com").status_code == 200

    def test_duplicate_email_conflicts(self, client, register):
        register()
        resp = client.post("/users", json={"email": "alice@example.com", "password": "another-secret"})
        assert resp.status_code == 409
        assert resp.get_json()["ok"] is False

    @pytest.mark.parametrize(
        "payload",
        [
            {"email": "not-an-email", "password": "secret123"},
            {"email": "bob@example.com", "password": "short"},
            {"password": "secret123"},
        ],
    )
    def test_register_validation(self, client, payload):
        resp = client.post("/users", json=payload)
        assert resp.status_code == 422
        assert resp.get_json()["code"] == "VALIDATION_ERROR"

    def test_list_users_requires_token(self, client, register, token):
        register(email="bob@example.com", name="Bob")
        resp = client.get("/users", headers=auth_header(token))
        assert resp.status_code == 200
        users = resp.get_json()
        assert sorted(u["email"] for u in users) == ["alice@example.com", "bob@example.com"]
        assert all(set(u) == {"id", "email", "name"} for u in users)

    def test_get_user(self, client, register):
        user = register()
        resp = client.get(f"/users/{user['id']}")
        assert resp.status_code == 200
        assert resp.get_json()["email"] == "alice@example.com"
        assert client.get("/users/missing").status_code == 404


class TestBucketListItems:
    def test_create_requires_token_and_sets_author(self, client, token):
        resp = client.post("/bucketlistitems", json={"title": "See the northern lights"}, headers=auth_header(token))
        assert resp.status_code == 201
        item = resp.get_json()
        assert item["title"] == "See the northern lights"
        assert item["author"]["email"] == "alice@example.com"
        assert item["authorId"] == item["author"]["id"]

    def test_blank_title_rejected(self, client, token):
        resp = client.post("/bucketlistitems", json={"title": "   "}, headers=auth_header(token))
        assert resp.status_code == 422

    def test_list_and_get_with_location(self, client, token):
        item = client.post(
            "/bucketlistitems", json={"title": "Walk the Camino"}, headers=auth_header(token)
        ).get_json()
        client.post("/locations", json={"country": "Spain", "city": "Santiago", "bucketListItemId": item["id"]})

        listed = client.get("/bucketlistitems").get_json()
        assert [i["id"] for i in listed] == [item["id"]]

        detail = client.get(f"/bucketlistitems/{item['id']}").get_json()
        assert detail["location"]["country"] == "Spain"
        assert detail["location"]["bucketListItemId"] == item["id"]

    def test_get_without_location(self, client, token):
        item = client.post("/bucketlistitems", json={"title": "Learn to sail"}, headers=auth_header(token)).get_json()
        assert client.get(f"/bucketlistitems/{item['id']}").get_json()["location"] is None

    def test_get_missing(self, client):
        assert client.get("/bucketlistitems/missing").status_code == 404


class TestLocations:
    def test_create_list_get(self, client):
        resp = client.post("/locations", json={"country": "Japan", "state": "Kyoto", "city": "Kyoto"})
        assert resp.status_code == 201
        location = resp.get_json()
        assert location["bucketListItemId"] is None

        assert [loc["id"] for loc in client.get("/locations").get_json()] == [location["id"]]
        assert client.get(f"/locations/{location['id']}").get_json()["city"] == "Kyoto"

    def test_get_missing(self, client):
        resp = client.get("/locations/missing")
        assert resp.status_code == 404
        assert resp.get_json()["error"] == "Location not found"

    def test_country_required(self, client):
        resp = client.post("/locations", json={"city": "Nowhere"})
        assert resp.status_code == 422
        assert "country" in resp.get_json()["details"]

    def test_unknown_item(self, client):
        resp = client.post("/locations", json={"country": "Peru", "bucketListItemId": "missing"})
        assert resp.status_code == 404

    @pytest.mark.parametrize("item_id", ["", "   "])
    def test_blank_item_id_means_unattached(self, client, item_id):
        resp = client.post("/locations", json={"country": "Peru", "bucketListItemId": item_id})
        assert resp.status_code == 201
        assert resp.get_json()["bucketListItemId"] is None

    def test_one_location_per_item(self, client, token):
        item = client.post("/bucketlistitems", json={"title": "Machu Picchu"}, headers=auth_header(token)).get_json()
        first = client.post("/locations", json={"country": "Peru", "bucketListItemId": item["id"]})
        assert first.status_code == 201
        second = client.post("/locations", json={"country": "Peru", "bucketListItemId": item["id"]})
        assert second.status_code == 409
