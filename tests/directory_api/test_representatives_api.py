"""Integration tests for the Representatives API endpoints."""

from __future__ import annotations

from directory_api.models.company import Company

BASE = "/api/representatives"


def _create(client, first_name="John", last_name="Doe"):
    response = client.post(BASE, json={"firstName": first_name, "lastName": last_name})
    assert response.status_code == 201
    return response.json()


class TestCreateRepresentative:
    """Tests for POST /api/representatives."""

    def test_create_returns_201_with_id(self, client):
        """Created representative is echoed back with camelCase fields."""
        response = client.post(BASE, json={"firstName": "John", "lastName": "Doe"})
        assert response.status_code == 201
        assert response.json() == {"id": 1, "firstName": "John", "lastName": "Doe"}

    def test_create_ignores_client_id(self, client):
        """A client-supplied id is not used."""
        _create(client)
        response = client.post(BASE, json={"id": 1, "firstName": "Jane", "lastName": "Roe"})
        assert response.status_code == 201
        assert response.json()["id"] == 2

    def test_blank_first_name_returns_400(self, client):
        """Blank names fail validation with one detail per field."""
        response = client.post(BASE, json={"firstName": "   ", "lastName": "Doe"})
        assert response.status_code == 400
        assert response.json() == {
            "message": "Validation failed",
            "details": ["firstName: First name must not be blank"],
        }

    def test_oversized_last_name_returns_400(self, client):
        """Names over 255 characters are rejected."""
        response = client.post(BASE, json={"firstName": "John", "lastName": "x" * 256})
        assert response.status_code == 400
        assert response.json()["details"] == ["lastName: Last name must not exceed 255 characters"]

    def test_max_length_name_is_accepted(self, client):
        """Exactly 255 characters is allowed."""
        response = client.post(BASE, json={"firstName": "J" * 255, "lastName": "Doe"})
        assert response.status_code == 201

    def test_missing_fields_listed_individually(self, client):
        """Each missing field gets its own detail line."""
        response = client.post(BASE, json={})
        assert response.status_code == 400
        details = response.json()["details"]
        assert len(details) == 2
        assert details[0].startswith("firstName: ")
        assert details[1].startswith("lastName: ")


class TestGetRepresentative:
    """Tests for GET /api/representatives/{id}."""

    def test_get_round_trip(self, client):
        """Fetching by the returned ID yields the same names."""
        created = _create(client, "Jane", "Roe")
        response = client.get(f"{BASE}/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

    def test_get_not_found(self, client):
        """Unknown ID returns 404 with the uniform error payload."""
        response = client.get(f"{BASE}/999")
        assert response.status_code == 404
        assert response.json() == {
            "message": "Representative not found with id: 999",
            "details": ["uri=/api/representatives/999"],
        }

    def test_get_non_numeric_id_returns_400(self, client):
        """Path parameters are validated too."""
        response = client.get(f"{BASE}/abc")
        assert response.status_code == 400
        assert response.json()["message"] == "Validation failed"

    def test_response_has_request_id(self, client):
        """Every response carries an X-Request-ID header."""
        response = client.get(f"{BASE}/all")
        assert response.headers.get("X-Request-ID")


class TestSearchAndList:
    """Tests for GET /api/representatives/name and /all."""

    def test_find_by_full_name(self, client):
        """Only exact matches on both names are returned."""
        match = _create(client, "John", "Doe")
        _create(client, "John", "Smith")

        response = client.get(f"{BASE}/name", params={"firstName": "John", "lastName": "Doe"})
        assert response.status_code == 200
        assert response.json() == [match]

    def test_find_by_full_name_requires_both_params(self, client):
        """Missing query parameters are a validation failure."""
        response = client.get(f"{BASE}/name", params={"firstName": "John"})
        assert response.status_code == 400
        assert response.json()["details"][0].startswith("lastName: ")

    def test_list_all(self, client):
        """All representatives are listed."""
        first = _create(client, "A", "One")
        second = _create(client, "B", "Two")
        response = client.get(f"{BASE}/all")
        assert response.status_code == 200
        assert response.json() == [first, second]


class TestUpdateRepresentative:
    """Tests for PUT /api/representatives/{id}."""

    def test_update_success(self, client):
        """Names are overwritten and the ID is unchanged."""
        created = _create(client)
        response = client.put(
            f"{BASE}/{created['id']}", json={"id": 42, "firstName": "Johnny", "lastName": "Dough"}
        )
        assert response.status_code == 200
        assert response.json() == {"id": created["id"], "firstName": "Johnny", "lastName": "Dough"}

    def test_update_not_found(self, client):
        """Unknown ID returns 404."""
        response = client.put(f"{BASE}/77", json={"firstName": "A", "lastName": "B"})
        assert response.status_code == 404

    def test_update_validation(self, client):
        """Blank names are rejected on update as well."""
        created = _create(client)
        response = client.put(f"{BASE}/{created['id']}", json={"firstName": "", "lastName": "B"})
        assert response.status_code == 400


class TestDeleteRepresentative:
    """Tests for DELETE /api/representatives/{id}."""

    def test_delete_returns_204(self, client):
        """Deleted representative is gone afterwards."""
        created = _create(client)
        response = client.delete(f"{BASE}/{created['id']}")
        assert response.status_code == 204
        assert response.content == b""
        assert client.get(f"{BASE}/{created['id']}").status_code == 404

    def test_delete_unknown_returns_204(self, client):
        """Existence is not checked before deleting."""
        response = client.delete(f"{BASE}/555")
        assert response.status_code == 204

    def test_delete_member_strips_company_sets(self, client, db):
        """A deleted member disappears from the company that listed it."""
        rep = _create(client)
        company = client.post("/api/companies", json={"name": "Acme Corporation"}).json()
        client.post(f"/api/companies/{company['id']}/representatives/{rep['id']}/assign")

        response = client.delete(f"{BASE}/{rep['id']}")
        assert response.status_code == 204

        listed = client.get(f"/api/companies/{company['id']}/representatives")
        assert listed.json() == []
        assert db.get(Company, company["id"]) is not None
