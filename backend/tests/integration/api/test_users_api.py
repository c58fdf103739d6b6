"""Tests for users API endpoints."""

import pytest


class TestUsersAPI:
    """Tests for /api/users endpoints."""

    @pytest.mark.asyncio
    async def test_get_users(self, client, test_rider, test_trainer):
        response = await client.get("/api/users")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        assert [u["name"] for u in data["items"]] == ["Anna", "Piotr"]

    @pytest.mark.asyncio
    async def test_get_riders_includes_riding_trainers(self, client, test_rider, test_trainer):
        response = await client.get("/api/users/riders")

        assert response.status_code == 200
        assert {u["name"] for u in response.json()} == {"Anna", "Piotr"}

    @pytest.mark.asyncio
    async def test_get_trainers(self, client, test_rider, test_trainer):
        response = await client.get("/api/users/trainers")

        assert response.status_code == 200
        data = response.json()
        assert [u["name"] for u in data] == ["Anna"]
        assert set(data[0]["roles"]) == {"TRAINER", "RIDER"}

    @pytest.mark.asyncio
    async def test_get_by_role(self, client, test_rider):
        response = await client.get("/api/users/role/STABLE_HAND")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_get_by_unknown_role(self, client, db_session):
        response = await client.get("/api/users/role/JOCKEY")

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_get_user_not_found(self, client, db_session):
        response = await client.get("/api/users/99999")

        assert response.status_code == 404
        assert response.json()["detail"] == "User not found"

    @pytest.mark.asyncio
    async def test_create_user(self, client, db_session):
        """POST /api/users stores the email lower-cased."""
        response = await client.post(
            "/api/users",
            json={
                "email": "Zosia@Example.com",
                "name": "Zosia",
                "roles": ["RIDER"],
                "level": "BEGINNER",
                "payment_method": "SUBSCRIPTION",
                "subscription_hours": 4,
            },
        )

        assert response.status_code == 201
        data = response.json()
        assert data["email"] == "zosia@example.com"
        assert data["roles"] == ["RIDER"]
        assert data["subscription_hours"] == 4.0

    @pytest.mark.asyncio
    async def test_create_user_duplicate_email(self, client, test_rider):
        response = await client.post(
            "/api/users",
            json={"email": "PIOTR@example.com", "name": "Other", "roles": ["RIDER"]},
        )

        assert response.status_code == 409
        assert response.json()["detail"] == "Email already registered"

    @pytest.mark.asyncio
    async def test_create_user_requires_a_role(self, client, db_session):
        response = await client.post(
            "/api/users",
            json={"email": "x@example.com", "name": "X", "roles": []},
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_update_user_roles(self, client, test_rider):
        response = await client.put(
            f"/api/users/{test_rider.id}",
            json={"roles": ["RIDER", "STABLE_HAND"], "level": "INTERMEDIATE"},
        )

        assert response.status_code == 200
        data = response.json()
        assert set(data["roles"]) == {"RIDER", "STABLE_HAND"}
        assert data["level"] == "INTERMEDIATE"

    @pytest.mark.asyncio
    async def test_update_user_email_taken(self, client, test_rider, test_trainer):
        response = await client.put(
            f"/api/users/{test_rider.id}",
            json={"email": "anna@stable.example"},
        )

        assert response.status_code == 409

    @pytest.mark.asyncio
    async def test_delete_user(self, client, test_rider):
        response = await client.delete(f"/api/users/{test_rider.id}")
        assert response.status_code == 204

        response = await client.get(f"/api/users/{test_rider.id}")
        assert response.status_code == 404
