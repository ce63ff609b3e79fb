"""Dashboard endpoint.

- GET /api/v1/dashboard/ → headline stats + most recent interactions
"""

import logging

from fastapi import APIRouter, Depends

from app.core.config import settings
from app.core.deps import get_current_user_id, get_repositories
from app.repositories.records import Repositories
from app.schemas.dashboard import DashboardOut, DashboardStats
from app.services.dashboard import DashboardStore, dashboard_stats, recent_interactions
from app.services.interactions import interaction_row

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/", response_model=DashboardOut)
async def dashboard(
    user_id: str = Depends(get_current_user_id),
    repos: Repositories = Depends(get_repositories),
):
    snapshot = await DashboardStore(repos).load_or_empty(user_id)
    recent = recent_interactions(snapshot.interactions, settings.RECENT_INTERACTIONS_LIMIT)
    return DashboardOut(
        stats=DashboardStats(**dashboard_stats(snapshot)),
        recent_interactions=[interaction_row(i, snapshot.leads, snapshot.campaigns) for i in recent],
        degraded=snapshot.degraded,
    )
