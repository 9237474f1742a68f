"""Logging cycle and settings endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Request, status

from nutrition_dashboard.api.deps import get_container, require_api_token
from nutrition_dashboard.api.models import (
    CycleCreate,
    CycleDeleted,
    CycleResponse,
    SettingsResponse,
    SettingsUpdate,
)
from nutrition_dashboard.api.serializers import serialize_cycle, serialize_settings

if TYPE_CHECKING:
    from nutrition_dashboard.containers import AppContainer

router = APIRouter(
    prefix="/users", tags=["cycles"], dependencies=[Depends(require_api_token)]
)


@router.get("/{user_id}/cycles")
async def list_cycles(user_id: UUID, request: Request) -> list[CycleResponse]:
    """Return the user's logging cycles, newest first."""
    container: AppContainer = get_container(request)
    return [
        serialize_cycle(cycle)
        for cycle in container.cycle_service.list_cycles(user_id)
    ]


@router.post("/{user_id}/cycles", status_code=status.HTTP_201_CREATED)
async def start_cycle(
    user_id: UUID, payload: CycleCreate, request: Request
) -> CycleResponse:
    """Start a new cycle and make it active."""
    container: AppContainer = get_container(request)
    try:
        cycle = container.cycle_service.start_cycle(user_id, payload.name)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return serialize_cycle(cycle)


@router.post("/{user_id}/cycles/{cycle_id}/activate")
async def activate_cycle(
    user_id: UUID, cycle_id: UUID, request: Request
) -> CycleResponse:
    """Make an existing cycle the active one."""
    container: AppContainer = get_container(request)
    return serialize_cycle(container.cycle_service.activate_cycle(user_id, cycle_id))


@router.delete("/{user_id}/cycles/{cycle_id}")
async def delete_cycle(
    user_id: UUID, cycle_id: UUID, request: Request
) -> CycleDeleted:
    """Delete a cycle; its entries move back to legacy history."""
    container: AppContainer = get_container(request)
    moved = container.cycle_service.delete_cycle(user_id, cycle_id)
    return CycleDeleted(moved_entries=moved)


@router.get("/{user_id}/settings")
async def get_settings(user_id: UUID, request: Request) -> SettingsResponse:
    """Return the user's settings, creating defaults on first access."""
    container: AppContainer = get_container(request)
    return serialize_settings(container.user_settings_service.get_settings(user_id))


@router.put("/{user_id}/settings")
async def update_settings(
    user_id: UUID, payload: SettingsUpdate, request: Request
) -> SettingsResponse:
    """Update targets, theme or drink visibility."""
    service = get_container(request).user_settings_service
    try:
        settings = service.update_settings(
            user_id,
            theme=payload.theme,
            show_drinks=payload.show_drinks,
            target_changes=payload.targets.changes() if payload.targets else None,
        )
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return serialize_settings(settings)
