import pytest

from src.domain.entities import UserRole


@pytest.mark.asyncio
async def test_list_users_newest_first(client, users, admin_headers):
    response = await client.get("/users", headers=admin_headers)

    assert response.status_code == 200
    listed = response.json()
    assert len(listed) == 3
    assert all("passwordHash" not in u for u in listed)
    created = [u["createdAt"] for u in listed]
    assert created == sorted(created, reverse=True)


@pytest.mark.asyncio
async def test_user_management_forbidden_for_viewer(client, viewer_headers):
    response = await client.get("/users", headers=viewer_headers)

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "FORBIDDEN"


@pytest.mark.asyncio
async def test_user_management_forbidden_for_editor(client, editor_headers):
    response = await client.post(
        "/users",
        json={"email": "x@example.com", "password": "archives1954", "name": "X"},
        headers=editor_headers,
    )

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_create_user(client, admin_headers):
    response = await client.post(
        "/users",
        json={"email": "Researcher@Example.com", "password": "archives1954", "name": "Researcher"},
        headers=admin_headers,
    )

    assert response.status_code == 201
    user = response.json()
    assert user["email"] == "researcher@example.com"
    assert user["role"] == "VIEWER"
    assert user["active"] is True

    login = await client.post(
        "/auth/login", json={"email": "researcher@example.com", "password": "archives1954"}
    )
    assert login.status_code == 200


@pytest.mark.asyncio
async def test_create_user_duplicate_email(client, admin_headers):
    response = await client.post(
        "/users",
        json={"email": "editor@example.com", "password": "archives1954", "name": "Dup"},
        headers=admin_headers,
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "EMAIL_ALREADY_EXISTS"


@pytest.mark.asyncio
async def test_create_user_short_password(client, admin_headers):
    response = await client.post(
        "/users",
        json={"email": "short@example.com", "password": "short", "name": "Short"},
        headers=admin_headers,
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_promotion_applies_to_existing_token(client, users, admin_headers, viewer_headers):
    """
    Given a viewer holding a token
    When an admin promotes them to editor
    Then the same token can now create tags
    """
    viewer = users[UserRole.VIEWER]
    assert (await client.post("/tags", json={"name": "Before"}, headers=viewer_headers)).status_code == 403

    response = await client.patch(
        f"/users/{viewer.id}/role", json={"role": "EDITOR"}, headers=admin_headers
    )

    assert response.status_code == 200
    assert response.json()["role"] == "EDITOR"
    assert (await client.post("/tags", json={"name": "After"}, headers=viewer_headers)).status_code == 201


@pytest.mark.asyncio
async def test_admin_cannot_demote_self(client, users, admin_headers):
    admin = users[UserRole.ADMIN]

    response = await client.patch(
        f"/users/{admin.id}/role", json={"role": "VIEWER"}, headers=admin_headers
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "CANNOT_DEMOTE_SELF"


@pytest.mark.asyncio
async def test_deactivated_user_is_locked_out(client, users, admin_headers, editor_headers):
    editor = users[UserRole.EDITOR]

    response = await client.patch(f"/users/{editor.id}/deactivate", headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["active"] is False

    login = await client.post(
        "/auth/login", json={"email": "editor@example.com", "password": "password123"}
    )
    assert login.status_code == 403
    assert login.json()["error"]["code"] == "USER_DISABLED"

    me = await client.get("/auth/me", headers=editor_headers)
    assert me.status_code == 401


@pytest.mark.asyncio
async def test_get_unknown_user(client, admin_headers):
    response = await client.get(
        "/users/00000000-0000-0000-0000-000000000000", headers=admin_headers
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "USER_NOT_FOUND"
