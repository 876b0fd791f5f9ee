"""
API router - aggregates all endpoint routers.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import (
    auth,
    users,
    clients,
    addresses,
    contact_persons,
)

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(
    auth.router,
    prefix="/auth",
    tags=["Auth"],
)

api_router.include_router(
    users.router,
    prefix="/users",
    tags=["Users"],
)

# Nested collections before the client catch-all routes
api_router.include_router(
    addresses.router,
    prefix="/clients/address",
    tags=["Client addresses"],
)

api_router.include_router(
    contact_persons.router,
    prefix="/clients/contactperson",
    tags=["Client contact persons"],
)

api_router.include_router(
    clients.router,
    prefix="/clients",
    tags=["Clients"],
)
