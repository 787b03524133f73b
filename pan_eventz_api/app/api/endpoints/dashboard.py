"""Admin dashboard summary (``GET /api/admin/dashboard``)."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from pan_eventz_api.app.api.deps import get_dashboard_service, with_fallback
from pan_eventz_api.app.core.fallbacks import DASHBOARD_FALLBACK
from pan_eventz_api.app.services.dashboard_service import DashboardService


admin_router = APIRouter()


@admin_router.get("")
async def get_dashboard(service: DashboardService = Depends(get_dashboard_service)) -> Dict[str, Any]:
    return await with_fallback(service.summary, DASHBOARD_FALLBACK, "dashboard data", on_empty=False)
