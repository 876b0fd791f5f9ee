"""
Client contact person endpoints.
"""

from fastapi import APIRouter

from app.api.deps import DbSession
from app.schemas.client import (
    ClientResponse,
    ContactPersonCreate,
    ContactPersonUpdate,
    ContactPersonResponse,
)
from app.services.client import ClientService


router = APIRouter()


@router.get(
    "/{client_id}",
    response_model=list[ContactPersonResponse],
    summary="Get all client contact persons",
)
async def list_contact_persons(
    client_id: int,
    db: DbSession,
) -> list[ContactPersonResponse]:
    service = ClientService(db)
    client = await service.get_or_404(client_id)
    return [ContactPersonResponse.model_validate(c) for c in client.contact_persons]


@router.get(
    "/{client_id}/{contact_person_id}",
    response_model=ContactPersonResponse,
    summary="Get client contact person by ID",
)
async def get_contact_person(
    client_id: int,
    contact_person_id: str,
    db: DbSession,
) -> ContactPersonResponse:
    service = ClientService(db)
    client = await service.get_or_404(client_id)
    contact = service.get_contact_person(client, contact_person_id)
    return ContactPersonResponse.model_validate(contact)


@router.put(
    "/{client_id}",
    response_model=list[ContactPersonResponse],
    summary="Add client contact person",
    description="Fails if one of the emails already belongs to another contact person.",
)
async def add_contact_person(
    client_id: int,
    data: ContactPersonCreate,
    db: DbSession,
) -> list[ContactPersonResponse]:
    service = ClientService(db)
    client = await service.get_or_404(client_id)
    client = await service.add_contact_person(client, data)
    return [ContactPersonResponse.model_validate(c) for c in client.contact_persons]


@router.put(
    "/{client_id}/{contact_person_id}",
    response_model=list[ContactPersonResponse],
    summary="Update client contact person",
)
async def update_contact_person(
    client_id: int,
    contact_person_id: str,
    data: ContactPersonUpdate,
    db: DbSession,
) -> list[ContactPersonResponse]:
    service = ClientService(db)
    client = await service.get_or_404(client_id)
    client = await service.update_contact_person(client, contact_person_id, data)
    return [ContactPersonResponse.model_validate(c) for c in client.contact_persons]


@router.delete(
    "/{client_id}/{contact_person_id}",
    response_model=ClientResponse,
    summary="Delete client contact person by ID",
)
async def delete_contact_person(
    client_id: int,
    contact_person_id: str,
    db: DbSession,
) -> ClientResponse:
    service = ClientService(db)
    client = await service.get_or_404(client_id)
    client = await service.delete_contact_person(client, contact_person_id)
    return ClientResponse.model_validate(client)
