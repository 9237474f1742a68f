"""Daily entry endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request, status

from nutrition_dashboard.api.deps import get_container, require_api_token
from nutrition_dashboard.api.models import EntryPayload, EntryResponse
from nutrition_dashboard.api.serializers import serialize_entry

if TYPE_CHECKING:
    from nutrition_dashboard.containers import AppContainer

router = APIRouter(
    prefix="/users", tags=["entries"], dependencies=[Depends(require_api_token)]
)


@router.get("/{user_id}/entries")
async def list_entries(user_id: UUID, request: Request) -> list[EntryResponse]:
    """Return the user's entries, newest first."""
    container: AppContainer = get_container(request)
    settings = container.user_settings_service.get_settings(user_id)
    return [
        serialize_entry(entry, settings.targets.calories)
        for entry in container.entry_service.list_entries(user_id)
    ]


@router.post("/{user_id}/entries", status_code=status.HTTP_201_CREATED)
async def create_entry(
    user_id: UUID, payload: EntryPayload, request: Request
) -> EntryResponse:
    """Log a new day."""
    container: AppContainer = get_container(request)
    settings = container.user_settings_service.get_settings(user_id)
    entry = container.entry_service.add_entry(user_id, payload.to_input())
    return serialize_entry(entry, settings.targets.calories)


@router.put("/{user_id}/entries/{entry_id}")
async def update_entry(
    user_id: UUID, entry_id: UUID, payload: EntryPayload, request: Request
) -> EntryResponse:
    """Replace the values of a logged day."""
    container: AppContainer = get_container(request)
    settings = container.user_settings_service.get_settings(user_id)
    entry = container.entry_service.update_entry(
        user_id, entry_id, payload.to_input()
    )
    return serialize_entry(entry, settings.targets.calories)


@router.delete(
    "/{user_id}/entries/{entry_id}", status_code=status.HTTP_204_NO_CONTENT
)
async def delete_entry(user_id: UUID, entry_id: UUID, request: Request) -> None:
    """Delete a logged day."""
    container: AppContainer = get_container(request)
    container.entry_service.delete_entry(user_id, entry_id)
