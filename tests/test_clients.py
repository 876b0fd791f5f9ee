"""
Client endpoint tests.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_create_client(client: AsyncClient):
    """Test client creation."""
    response = await client.post(
        "/api/clients",
        json={"name": "Acme", "emails": ["a@x.com"]},
    )

    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Acme"
    assert data["emails"] == ["a@x.com"]
    assert data["contactNumbers"] == []
    assert data["addresses"] == []
    assert data["contactPersons"] == []
    assert "createdAt" in data


@pytest.mark.asyncio
async def test_create_client_single_email(client: AsyncClient):
    """A single email is stored as a one-element list."""
    response = await client.post(
        "/api/clients",
        json={"name": "Acme", "emails": "a@x.com"},
    )

    assert response.status_code == 201
    assert response.json()["emails"] == ["a@x.com"]


@pytest.mark.asyncio
async def test_create_client_duplicate_name(client: AsyncClient, acme):
    response = await client.post(
        "/api/clients",
        json={"name": "Acme", "emails": ["other@x.com"]},
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Client already exists"


@pytest.mark.asyncio
async def test_create_client_validation(client: AsyncClient):
    response = await client.post(
        "/api/clients",
        json={"name": "", "emails": ["not-an-email"], "contactNumbers": ["abc"]},
    )

    assert response.status_code == 400
    fields = [error["field"] for error in response.json()["errors"]]
    assert any("name" in field for field in fields)
    assert any("emails" in field for field in fields)
    assert any("contactNumbers" in field for field in fields)


@pytest.mark.asyncio
async def test_list_and_get_client(client: AsyncClient, acme):
    response = await client.get("/api/clients")
    assert response.status_code == 200
    assert [c["name"] for c in response.json()] == ["Acme"]

    response = await client.get(f"/api/clients/{acme['id']}")
    assert response.status_code == 200
    assert response.json()["id"] == acme["id"]


@pytest.mark.asyncio
async def test_get_missing_client(client: AsyncClient):
    response = await client.get("/api/clients/999")

    assert response.status_code == 400
    assert response.json()["detail"] == "Client does not exist"


@pytest.mark.asyncio
async def test_update_client_merges_fields(client: AsyncClient, acme):
    response = await client.put(
        f"/api/clients/{acme['id']}",
        json={"division": "North", "emails": "b@x.com", "contactNumbers": 9876543210},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Acme"
    assert data["division"] == "North"
    assert data["emails"] == ["a@x.com", "b@x.com"]
    # Already stored, not duplicated
    assert data["contactNumbers"] == [9876543210]


@pytest.mark.asyncio
async def test_update_client_empty_body_is_noop(client: AsyncClient, acme):
    response = await client.put(f"/api/clients/{acme['id']}", json={})

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == acme["name"]
    assert data["emails"] == acme["emails"]
    assert data["contactNumbers"] == acme["contactNumbers"]


@pytest.mark.asyncio
async def test_update_client_rename_conflict(client: AsyncClient, acme):
    await client.post("/api/clients", json={"name": "Globex", "emails": ["g@x.com"]})

    response = await client.put(f"/api/clients/{acme['id']}", json={"name": "Globex"})

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_delete_client(client: AsyncClient, acme):
    response = await client.delete(f"/api/clients/{acme['id']}")
    assert response.status_code == 200
    assert response.json()["message"] == "Client deleted"

    response = await client.get(f"/api/clients/{acme['id']}")
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_delete_missing_client(client: AsyncClient):
    response = await client.delete("/api/clients/999")
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_update_client_email_kept_verbatim(client: AsyncClient, acme):
    response = await client.put(f"/api/clients/{acme['id']}", json={"emails": "a@X.COM"})

    assert response.status_code == 200
    assert response.json()["emails"] == ["a@x.com", "a@X.COM"]


@pytest.mark.asyncio
async def test_update_client_blank_values_are_absent(client: AsyncClient, acme):
    response = await client.put(
        f"/api/clients/{acme['id']}",
        json={"emails": "", "division": "", "contactNumbers": ""},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["emails"] == acme["emails"]
    assert data["division"] == acme["division"]
    assert data["contactNumbers"] == acme["contactNumbers"]
