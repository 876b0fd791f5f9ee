"""
Client address endpoints.
Addresses are embedded in their client; the newest comes first.
"""

from fastapi import APIRouter

from app.api.deps import DbSession
from app.schemas.client import (
    AddressCreate,
    AddressUpdate,
    AddressResponse,
    ClientResponse,
)
from app.services.client import ClientService


router = APIRouter()


@router.put(
    "/{client_id}",
    response_model=ClientResponse,
    summary="Add client address",
    description="Fails if another address of the client has the same GSTIN.",
)
async def add_address(
    client_id: int,
    data: AddressCreate,
    db: DbSession,
) -> ClientResponse:
    service = ClientService(db)
    client = await service.get_or_404(client_id)
    client = await service.add_address(client, data)
    return ClientResponse.model_validate(client)


@router.get(
    "/{client_id}",
    response_model=list[AddressResponse],
    summary="Get all addresses of a client",
)
async def list_addresses(
    client_id: int,
    db: DbSession,
) -> list[AddressResponse]:
    service = ClientService(db)
    client = await service.get_or_404(client_id)
    return [AddressResponse.model_validate(a) for a in client.addresses]


@router.get(
    "/{client_id}/{address_id}",
    response_model=AddressResponse,
    summary="Get address of a client by ID",
)
async def get_address(
    client_id: int,
    address_id: str,
    db: DbSession,
) -> AddressResponse:
    service = ClientService(db)
    client = await service.get_or_404(client_id)
    return AddressResponse.model_validate(service.get_address(client, address_id))


@router.put(
    "/{client_id}/{address_id}",
    response_model=list[AddressResponse],
    summary="Update address of a client by ID",
)
async def update_address(
    client_id: int,
    address_id: str,
    data: AddressUpdate,
    db: DbSession,
) -> list[AddressResponse]:
    """Merge the given fields into the address, returns all addresses."""
    service = ClientService(db)
    client = await service.get_or_404(client_id)
    client = await service.update_address(client, address_id, data)
    return [AddressResponse.model_validate(a) for a in client.addresses]


@router.delete(
    "/{client_id}/{address_id}",
    response_model=ClientResponse,
    summary="Delete client address by ID",
)
async def delete_address(
    client_id: int,
    address_id: str,
    db: DbSession,
) -> ClientResponse:
    service = ClientService(db)
    client = await service.get_or_404(client_id)
    client = await service.delete_address(client, address_id)
    return ClientResponse.model_validate(client)
