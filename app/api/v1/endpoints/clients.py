"""
Client management endpoints.
CRUD operations for clients.
"""

from fastapi import APIRouter, status

from app.api.deps import DbSession
from app.schemas.client import (
    ClientCreate,
    ClientUpdate,
    ClientResponse,
)
from app.schemas.base import MessageResponse
from app.services.client import ClientService


router = APIRouter()


@router.post(
    "",
    response_model=ClientResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add client",
    description="Create a client. Fails if the name is already taken.",
)
async def create_client(
    data: ClientCreate,
    db: DbSession,
) -> ClientResponse:
    """Create a new client."""
    service = ClientService(db)
    client = await service.create(data)
    return ClientResponse.model_validate(client)


@router.get(
    "",
    response_model=list[ClientResponse],
    summary="List clients",
)
async def list_clients(
    db: DbSession,
) -> list[ClientResponse]:
    """List all clients."""
    service = ClientService(db)
    clients = await service.get_all()
    return [ClientResponse.model_validate(c) for c in clients]


@router.get(
    "/{client_id}",
    response_model=ClientResponse,
    summary="Get client by ID",
)
async def get_client(
    client_id: int,
    db: DbSession,
) -> ClientResponse:
    """Get client by ID."""
    service = ClientService(db)
    client = await service.get_or_404(client_id)
    return ClientResponse.model_validate(client)


@router.put(
    "/{client_id}",
    response_model=ClientResponse,
    summary="Update client by ID",
    description="Replace given fields, append new contact numbers and emails.",
)
async def update_client(
    client_id: int,
    data: ClientUpdate,
    db: DbSession,
) -> ClientResponse:
    """Update a client."""
    service = ClientService(db)
    client = await service.get_or_404(client_id)
    client = await service.update(client, data)
    return ClientResponse.model_validate(client)


@router.delete(
    "/{client_id}",
    response_model=MessageResponse,
    summary="Delete client by ID",
)
async def delete_client(
    client_id: int,
    db: DbSession,
) -> MessageResponse:
    """Delete a client."""
    service = ClientService(db)
    client = await service.get_or_404(client_id)
    await service.delete(client)
    return MessageResponse(message="Client deleted")
