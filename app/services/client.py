"""
Client service.
Handles client CRUD and the embedded addresses and contact persons.
"""

import logging
from typing import Any

from fastapi import status
from sqlalchemy import select

from app.core.exceptions import ConflictError
from app.models.client import Client
from app.schemas.client import (
    AddressCreate,
    AddressUpdate,
    ClientCreate,
    ClientUpdate,
    ContactPersonCreate,
    ContactPersonUpdate,
)
from app.services.base import BaseService
from app.services.collection import NestedCollection, email_taken, gstin_taken
from app.services.merge import merge_address, merge_client, merge_contact_person


logger = logging.getLogger(__name__)


addresses = NestedCollection(
    "Address",
    merge=merge_address,
    conflicts=gstin_taken,
    conflict_detail="Address with the same GSTIN already exists",
)

contact_persons = NestedCollection(
    "Contact person",
    merge=merge_contact_person,
    conflicts=email_taken,
    conflict_detail="Email already exists",
)


class ClientService(BaseService[Client]):
    """Service for client operations."""

    model = Client
    not_found_detail = "Client does not exist"
    not_found_status = status.HTTP_400_BAD_REQUEST
    conflict_detail = "Client already exists"

    async def get_by_name(self, name: str) -> Client | None:
        """Get client by its unique name."""
        result = await self.db.execute(
            select(Client).where(Client.name == name)
        )
        return result.scalar_one_or_none()

    async def create(self, data: ClientCreate) -> Client:
        """
        Create a new client with empty address and contact lists.

        Raises:
            ConflictError: If a client with this name exists
        """
        if await self.get_by_name(data.name):
            raise ConflictError(self.conflict_detail)

        client = Client(
            **data.model_dump(),
            addresses=[],
            contact_persons=[],
        )
        self.db.add(client)
        client = await self.save(client)

        logger.info("Client %s created (id=%s)", client.name, client.id)
        return client

    async def update(self, client: Client, data: ClientUpdate) -> Client:
        """
        Merge a partial update into the client.

        Raises:
            ConflictError: If renamed onto another client's name
        """
        values = merge_client(client, data)

        if values["name"] != client.name:
            other = await self.get_by_name(values["name"])
            if other is not None and other.id != client.id:
                raise ConflictError(self.conflict_detail)

        for field, value in values.items():
            setattr(client, field, value)

        return await self.save(client)

    async def delete(self, client: Client) -> None:
        """Delete client and everything embedded in it."""
        await self.remove(client)
        logger.info("Client %s deleted", client.id)

    # Addresses

    def get_address(self, client: Client, address_id: str) -> dict[str, Any]:
        return addresses.get(client.addresses, address_id)

    async def add_address(self, client: Client, data: AddressCreate) -> Client:
        """Prepend an address, rejecting a GSTIN already used by this client."""
        client.addresses = addresses.insert(client.addresses, data.model_dump())
        return await self.save(client)

    async def update_address(
        self,
        client: Client,
        address_id: str,
        data: AddressUpdate,
    ) -> Client:
        client.addresses = addresses.update(client.addresses, address_id, data)
        return await self.save(client)

    async def delete_address(self, client: Client, address_id: str) -> Client:
        client.addresses = addresses.delete(client.addresses, address_id)
        return await self.save(client)

    # Contact persons

    def get_contact_person(self, client: Client, contact_person_id: str) -> dict[str, Any]:
        return contact_persons.get(client.contact_persons, contact_person_id)

    async def add_contact_person(self, client: Client, data: ContactPersonCreate) -> Client:
        """Prepend a contact person, rejecting emails already used by another one."""
        client.contact_persons = contact_persons.insert(
            client.contact_persons,
            data.model_dump(),
        )
        return await self.save(client)

    async def update_contact_person(
        self,
        client: Client,
        contact_person_id: str,
        data: ContactPersonUpdate,
    ) -> Client:
        client.contact_persons = contact_persons.update(
            client.contact_persons,
            contact_person_id,
            data,
        )
        return await self.save(client)

    async def delete_contact_person(self, client: Client, contact_person_id: str) -> Client:
        client.contact_persons = contact_persons.delete(
            client.contact_persons,
            contact_person_id,
        )
        return await self.save(client)
