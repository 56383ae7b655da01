"""End-to-end user CRUD against an in-memory database"""
import pytest

USERS = "/api/v1/users"


async def create(client, firstname="John", lastname="Doe"):
    response = await client.post(USERS, json={"firstname": firstname, "lastname": lastname})
    assert response.status_code == 201
    return response.json()


@pytest.mark.asyncio
async def test_create_assigns_id(client):
    """Create John Doe on empty storage"""
    assert await create(client) == {"id": 1, "firstname": "John", "lastname": "Doe"}


@pytest.mark.asyncio
async def test_create_ignores_client_supplied_id(client):
    response = await client.post(USERS, json={"id": 42, "firstname": "John", "lastname": "Doe"})

    assert response.status_code == 201
    assert response.json()["id"] == 1


@pytest.mark.asyncio
async def test_duplicate_firstname_returns_409(client):
    await create(client, "John", "Doe")

    response = await client.post(USERS, json={"firstname": "John", "lastname": "Smith"})

    assert response.status_code == 409
    assert response.json()["error"] == "Conflict"
    # The failed insert leaves storage untouched
    assert len((await client.get(USERS)).json()) == 1


@pytest.mark.asyncio
async def test_firstname_too_long_returns_422(client):
    response = await client.post(USERS, json={"firstname": "x" * 51, "lastname": "Doe"})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_list_users(client):
    assert (await client.get(USERS)).json() == []

    await create(client, "John", "Doe")
    await create(client, "Jane", "Smith")

    response = await client.get(USERS)
    assert response.status_code == 200
    assert sorted(u["firstname"] for u in response.json()) == ["Jane", "John"]


@pytest.mark.asyncio
async def test_get_missing_user_returns_404(client):
    response = await client.get(f"{USERS}/999")

    assert response.status_code == 404
    assert response.json()["detail"] == "User with ID 999 not found"


@pytest.mark.asyncio
async def test_update_overwrites_only_supplied_fields(client):
    user = await create(client)

    response = await client.patch(f"{USERS}/{user['id']}", json={"firstname": "John Updated"})

    assert response.status_code == 200
    assert response.json() == {"id": 1, "firstname": "John Updated", "lastname": "Doe"}
    stored = (await client.get(f"{USERS}/1")).json()
    assert stored == {"id": 1, "firstname": "John Updated", "lastname": "Doe"}


@pytest.mark.asyncio
async def test_update_missing_user_returns_404(client):
    response = await client.patch(f"{USERS}/999", json={"firstname": "John Updated"})

    assert response.status_code == 404
    assert response.json()["detail"] == "User with ID 999 not found"


@pytest.mark.asyncio
async def test_update_to_taken_lastname_returns_409(client):
    await create(client, "John", "Doe")
    jane = await create(client, "Jane", "Smith")

    response = await client.patch(f"{USERS}/{jane['id']}", json={"lastname": "Doe"})

    assert response.status_code == 409


@pytest.mark.asyncio
async def test_remove_then_lookup(client):
    user = await create(client)

    response = await client.delete(f"{USERS}/{user['id']}")
    assert response.status_code == 204

    assert (await client.get(f"{USERS}/{user['id']}")).status_code == 404
    assert (await client.get(USERS)).json() == []


@pytest.mark.asyncio
async def test_remove_twice_returns_404(client):
    user = await create(client)
    await client.delete(f"{USERS}/{user['id']}")

    response = await client.delete(f"{USERS}/{user['id']}")

    assert response.status_code == 404
    assert response.json()["detail"] == f"User with ID {user['id']} not found"


@pytest.mark.asyncio
@pytest.mark.parametrize("method", ["get", "patch", "delete"])
async def test_id_beyond_integer_range_returns_404(client, method):
    """Ids no INTEGER column can hold are simply absent"""
    user_id = 99999999999999999999
    kwargs = {"json": {"firstname": "John Updated"}} if method == "patch" else {}

    response = await getattr(client, method)(f"{USERS}/{user_id}", **kwargs)

    assert response.status_code == 404
    assert response.json()["detail"] == f"User with ID {user_id} not found"
