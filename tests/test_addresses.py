"""
Client address endpoint tests.
"""

import pytest
from httpx import AsyncClient


ADDRESS = {"line1": "1 Rd", "city": "X", "state": "Y", "pin": 100001}


async def add_address(client: AsyncClient, client_id: int, **fields):
    return await client.put(
        f"/api/clients/address/{client_id}",
        json={**ADDRESS, **fields},
    )


@pytest.mark.asyncio
async def test_add_address(client: AsyncClient, acme):
    response = await add_address(client, acme["id"])

    assert response.status_code == 200
    addresses = response.json()["addresses"]
    assert len(addresses) == 1
    assert addresses[0]["line1"] == "1 Rd"
    assert addresses[0]["country"] == "India"
    assert addresses[0]["id"]


@pytest.mark.asyncio
async def test_add_address_without_gstin_twice(client: AsyncClient, acme):
    """Two addresses both lacking a GSTIN never collide."""
    await add_address(client, acme["id"])
    response = await add_address(client, acme["id"])

    assert response.status_code == 200
    assert len(response.json()["addresses"]) == 2


@pytest.mark.asyncio
async def test_add_address_newest_first(client: AsyncClient, acme):
    await add_address(client, acme["id"], city="Old")
    response = await add_address(client, acme["id"], city="New")

    assert [a["city"] for a in response.json()["addresses"]] == ["New", "Old"]


@pytest.mark.asyncio
async def test_add_address_duplicate_gstin(client: AsyncClient, acme):
    await add_address(client, acme["id"], gstin="29ABCDE1234F1Z5")
    response = await add_address(client, acme["id"], city="Z", gstin="29ABCDE1234F1Z5")

    assert response.status_code == 400
    assert "GSTIN" in response.json()["detail"]

    response = await client.get(f"/api/clients/address/{acme['id']}")
    assert len(response.json()) == 1


@pytest.mark.asyncio
async def test_add_address_validation(client: AsyncClient, acme):
    response = await client.put(
        f"/api/clients/address/{acme['id']}",
        json={"line1": "", "city": "X", "pin": "abc"},
    )

    assert response.status_code == 400
    fields = " ".join(error["field"] for error in response.json()["errors"])
    assert "line1" in fields
    assert "state" in fields
    assert "pin" in fields


@pytest.mark.asyncio
async def test_add_address_missing_client(client: AsyncClient):
    response = await add_address(client, 999)
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_get_address(client: AsyncClient, acme):
    created = (await add_address(client, acme["id"])).json()["addresses"][0]

    response = await client.get(f"/api/clients/address/{acme['id']}/{created['id']}")

    assert response.status_code == 200
    assert response.json() == created


@pytest.mark.asyncio
async def test_get_missing_address(client: AsyncClient, acme):
    response = await client.get(f"/api/clients/address/{acme['id']}/unknown")

    assert response.status_code == 404
    assert response.json()["detail"] == "Address not found"


@pytest.mark.asyncio
async def test_update_address(client: AsyncClient, acme):
    await add_address(client, acme["id"], city="A")
    created = (await add_address(client, acme["id"], city="B")).json()["addresses"][0]

    response = await client.put(
        f"/api/clients/address/{acme['id']}/{created['id']}",
        json={"city": "B2", "line2": ""},
    )

    assert response.status_code == 200
    addresses = response.json()
    assert [a["city"] for a in addresses] == ["B2", "A"]
    assert addresses[0]["id"] == created["id"]
    assert addresses[0]["line1"] == "1 Rd"
    assert addresses[0]["pin"] == 100001


@pytest.mark.asyncio
async def test_update_missing_address(client: AsyncClient, acme):
    response = await client.put(
        f"/api/clients/address/{acme['id']}/unknown",
        json={"city": "Z"},
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_address(client: AsyncClient, acme):
    await add_address(client, acme["id"], city="A")
    await add_address(client, acme["id"], city="B")
    addresses = (await add_address(client, acme["id"], city="C")).json()["addresses"]

    response = await client.delete(f"/api/clients/address/{acme['id']}/{addresses[1]['id']}")

    assert response.status_code == 200
    assert [a["city"] for a in response.json()["addresses"]] == ["C", "A"]


@pytest.mark.asyncio
async def test_delete_missing_address(client: AsyncClient, acme):
    response = await client.delete(f"/api/clients/address/{acme['id']}/unknown")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_update_address_blank_pin_is_absent(client: AsyncClient, acme):
    created = (await add_address(client, acme["id"])).json()["addresses"][0]

    response = await client.put(
        f"/api/clients/address/{acme['id']}/{created['id']}",
        json={"pin": "", "city": "Z"},
    )

    assert response.status_code == 200
    address = response.json()[0]
    assert address["city"] == "Z"
    assert address["pin"] == 100001
