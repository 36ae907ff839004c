"""
Developer endpoints for API v1.

These routes expose a CRUD API for developer records.  Listing returns
only ``name`` and ``fav_lang`` for each developer, while the detail
route returns the whole stored row including ``id`` and timestamps.
Write operations answer with a fixed confirmation message rather than
the record itself, always with HTTP 200.
"""

from typing import List

from fastapi import APIRouter, Depends

from developer_api.app.api.dependencies import get_repository, read_developer_fields, resolve_developer
from developer_api.app.schemas.developer import (
    DeveloperInput,
    DeveloperRead,
    DeveloperResource,
    MessageResponse,
)
from developer_api.app.services.developer_service import DeveloperRepository

router = APIRouter()


@router.get("", response_model=List[DeveloperResource])
async def list_developers(
    repository: DeveloperRepository = Depends(get_repository),
) -> List[DeveloperResource]:
    """Return all developers in insertion order."""
    developers = await repository.list_all()
    return [DeveloperResource(name=d.name, fav_lang=d.fav_lang) for d in developers]


@router.post("", response_model=MessageResponse)
async def create_developer(
    data: DeveloperInput = Depends(read_developer_fields),
    repository: DeveloperRepository = Depends(get_repository),
) -> MessageResponse:
    """Store a new developer.  Missing fields are stored as null."""
    await repository.insert(data)
    return MessageResponse(message="Resource created")


@router.get("/{developer_id}", response_model=DeveloperRead)
async def show_developer(
    developer: DeveloperRead = Depends(resolve_developer),
) -> DeveloperRead:
    """Return the full developer record, or 404 if it does not exist."""
    return developer


@router.api_route("/{developer_id}", methods=["PUT", "PATCH"], response_model=MessageResponse)
async def update_developer(
    developer: DeveloperRead = Depends(resolve_developer),
    data: DeveloperInput = Depends(read_developer_fields),
    repository: DeveloperRepository = Depends(get_repository),
) -> MessageResponse:
    """Overwrite both fields of an existing developer."""
    await repository.update(developer.id, data)
    return MessageResponse(message="Resource updated")


@router.delete("/{developer_id}", response_model=MessageResponse)
async def delete_developer(
    developer: DeveloperRead = Depends(resolve_developer),
    repository: DeveloperRepository = Depends(get_repository),
) -> MessageResponse:
    """Remove a developer."""
    await repository.delete(developer.id)
    return MessageResponse(message="Resource deleted")
