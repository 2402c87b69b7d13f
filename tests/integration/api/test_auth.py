import pytest

from src.domain.entities import UserRole

TEST_PASSWORD = "password123"


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_login_success(client, users):
    """
    Given an active editor
    When they log in with the right password
    Then a token and their user record are returned
    """
    # Act
    response = await client.post(
        "/auth/login", json={"email": "EDITOR@example.com", "password": TEST_PASSWORD}
    )

    # Assert
    assert response.status_code == 200
    data = response.json()
    assert data["accessToken"]
    assert data["user"]["email"] == "editor@example.com"
    assert data["user"]["role"] == "EDITOR"
    assert data["user"]["lastLogin"] is not None
    assert "passwordHash" not in data["user"]

    me = await client.get(
        "/auth/me", headers={"Authorization": f"Bearer {data['accessToken']}"}
    )
    assert me.status_code == 200
    assert me.json()["id"] == str(users[UserRole.EDITOR].id)


@pytest.mark.asyncio
async def test_login_wrong_password(client, users):
    response = await client.post(
        "/auth/login", json={"email": "editor@example.com", "password": "not-the-password"}
    )

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_login_unknown_email(client, users):
    response = await client.post(
        "/auth/login", json={"email": "ghost@example.com", "password": TEST_PASSWORD}
    )

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_login_invalid_payload(client):
    response = await client.post("/auth/login", json={"email": "not-an-email"})

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_me_requires_token(client):
    response = await client.get("/auth/me")

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "AUTHENTICATION_REQUIRED"


@pytest.mark.asyncio
async def test_me_rejects_garbage_token(client, users):
    response = await client.get("/auth/me", headers={"Authorization": "Bearer not.a.jwt"})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_public_route_ignores_bad_token(client, users):
    response = await client.get("/events", headers={"Authorization": "Bearer not.a.jwt"})

    assert response.status_code == 200
