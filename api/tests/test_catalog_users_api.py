"""Category, location, user and activity log endpoint tests."""

from asset_registry.api.deps import get_actor
from tests.conftest import ADMIN_HEADERS, USER_HEADERS


class TestCatalog:
    """Tests for category and location endpoints."""

    def test_categories_sorted_by_name(self, client_with_db):
        for name in ("Tools", "Furniture", "Vehicles"):
            response = client_with_db.post("/v1/categories/", json={"name": name}, headers=ADMIN_HEADERS)
            assert response.status_code == 201
        names = [c["name"] for c in client_with_db.get("/v1/categories/").json()]
        assert names == ["Furniture", "Tools", "Vehicles"]

    def test_duplicate_category_any_case(self, client_with_db):
        client_with_db.post("/v1/categories/", json={"name": "Tools"})
        response = client_with_db.post("/v1/categories/", json={"name": "  tools "})
        assert response.status_code == 409

    def test_blank_name_rejected(self, client_with_db):
        assert client_with_db.post("/v1/locations/", json={"name": "   "}).status_code == 422

    def test_locations(self, client_with_db):
        response = client_with_db.post("/v1/locations/", json={"name": " Warehouse "})
        assert response.status_code == 201
        assert response.json()["name"] == "Warehouse"
        assert client_with_db.post("/v1/locations/", json={"name": "warehouse"}).status_code == 409
        assert [l["name"] for l in client_with_db.get("/v1/locations/").json()] == ["Warehouse"]


class TestUsers:
    """Tests for user endpoints."""

    def test_placeholder_then_account(self, client_with_db):
        response = client_with_db.post("/v1/users/", json={"name": "Maria"}, headers=USER_HEADERS)
        assert response.status_code == 201
        user = response.json()
        assert user["is_account"] is False
        assert user["role"] is None
        assert user["email"] is None

        response = client_with_db.post(
            f"/v1/users/{user['id']}/account",
            json={"email": "Maria@Example.com", "role": "user"},
            headers=ADMIN_HEADERS,
        )
        assert response.status_code == 200
        upgraded = response.json()
        assert upgraded["is_account"] is True
        assert upgraded["email"] == "maria@example.com"
        assert upgraded["role"] == "user"

    def test_only_admin_creates_accounts(self, client_with_db):
        user = client_with_db.post("/v1/users/", json={"name": "Pedro"}).json()
        response = client_with_db.post(
            f"/v1/users/{user['id']}/account",
            json={"email": "pedro@example.com"},
            headers=USER_HEADERS,
        )
        assert response.status_code == 403

    def test_upgrade_missing_user(self, client_with_db):
        response = client_with_db.post(
            "/v1/users/99/account", json={"email": "x@example.com"}, headers=ADMIN_HEADERS
        )
        assert response.status_code == 404

    def test_duplicate_email(self, client_with_db):
        first = client_with_db.post("/v1/users/", json={"name": "Ana"}).json()
        second = client_with_db.post("/v1/users/", json={"name": "Eva"}).json()
        body = {"email": "same@example.com"}
        assert client_with_db.post(f"/v1/users/{first['id']}/account", json=body, headers=ADMIN_HEADERS).status_code == 200
        assert client_with_db.post(f"/v1/users/{second['id']}/account", json=body, headers=ADMIN_HEADERS).status_code == 409

    def test_invalid_role(self, client_with_db):
        user = client_with_db.post("/v1/users/", json={"name": "Luis"}).json()
        response = client_with_db.post(
            f"/v1/users/{user['id']}/account",
            json={"email": "luis@example.com", "role": "superuser"},
            headers=ADMIN_HEADERS,
        )
        assert response.status_code == 422


class TestActivityLog:
    """Tests for the activity log endpoint."""

    def test_most_recent_first(self, client_with_db):
        client_with_db.post("/v1/categories/", json={"name": "Tools"}, headers=ADMIN_HEADERS)
        client_with_db.post("/v1/locations/", json={"name": "Lab"}, headers=USER_HEADERS)
        entries = client_with_db.get("/v1/logs/").json()
        assert [e["action"] for e in entries] == ["Added location Lab", "Added category Tools"]
        assert entries[0]["user_name"] == "Ulises User"

    def test_limit(self, client_with_db):
        for name in ("A", "B", "C"):
            client_with_db.post("/v1/categories/", json={"name": name})
        assert len(client_with_db.get("/v1/logs/", params={"limit": 2}).json()) == 2

    def test_anonymous_actor(self, client_with_db):
        client_with_db.post("/v1/categories/", json={"name": "Tools"})
        assert client_with_db.get("/v1/logs/").json()[0]["user_name"] == "anonymous"


class TestGetActor:
    """Tests for building the caller identity from gateway headers."""

    def test_headers_are_normalized(self):
        actor = get_actor(x_user_name="  Ana Admin ", x_user_role=" ADMIN ")
        assert actor.name == "Ana Admin"
        assert actor.is_admin

    def test_missing_headers(self):
        actor = get_actor(x_user_name=None, x_user_role=None)
        assert actor.name == "anonymous"
        assert not actor.is_admin
