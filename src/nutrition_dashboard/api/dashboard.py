"""Dashboard statistics and CSV export endpoints."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response

from nutrition_dashboard.api.deps import get_container, require_api_token
from nutrition_dashboard.api.models import DashboardResponse
from nutrition_dashboard.api.serializers import serialize_dashboard
from nutrition_dashboard.domain.stats import RangeFilter

if TYPE_CHECKING:
    from nutrition_dashboard.containers import AppContainer

router = APIRouter(
    prefix="/users", tags=["dashboard"], dependencies=[Depends(require_api_token)]
)


@router.get("/{user_id}/dashboard")
async def dashboard(
    user_id: UUID,
    request: Request,
    range_filter: RangeFilter = Query(default=RangeFilter.ALL, alias="range"),
    scope: str = "all",
) -> DashboardResponse:
    """Return averages, medians, trends and drink stats for a view."""
    container: AppContainer = get_container(request)
    try:
        view = container.dashboard_service.build_dashboard(
            user_id, range_filter=range_filter, scope=scope
        )
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return serialize_dashboard(view)


@router.get("/{user_id}/export.csv")
async def export_csv(
    user_id: UUID,
    request: Request,
    range_filter: RangeFilter = Query(default=RangeFilter.ALL, alias="range"),
    scope: str = "all",
) -> Response:
    """Return the selected entries and their summary as a CSV download."""
    container: AppContainer = get_container(request)
    try:
        csv_text = container.dashboard_service.export_csv(
            user_id, range_filter=range_filter, scope=scope
        )
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    filename = f"nutrition-data-{date.today().isoformat()}.csv"
    return Response(
        content=csv_text,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
