"""Integration settings endpoints.

- GET /api/v1/settings/integrations → current switches (defaults on first read)
- PUT /api/v1/settings/integrations → change switches
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.deps import get_current_user_id
from app.schemas.dashboard import IntegrationSettingsOut, IntegrationSettingsUpdate
from app.services.integration_settings import (
    get_integration_settings,
    update_integration_settings,
)

router = APIRouter()


@router.get("/integrations", response_model=IntegrationSettingsOut)
async def read_integrations(
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await get_integration_settings(db, user_id)


@router.put("/integrations", response_model=IntegrationSettingsOut)
async def save_integrations(
    changes: IntegrationSettingsUpdate,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await update_integration_settings(db, user_id, changes)
