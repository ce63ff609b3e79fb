"""Per-user integration switches (voice, WhatsApp, email, follow-up)."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import RecordStoreError
from app.models.integration_settings import IntegrationSettings
from app.schemas.dashboard import IntegrationSettingsUpdate

logger = logging.getLogger(__name__)


async def _get_or_create(db: AsyncSession, user_id: str) -> IntegrationSettings:
    result = await db.execute(
        select(IntegrationSettings).where(IntegrationSettings.user_id == user_id)
    )
    row = result.scalar_one_or_none()
    if row is None:
        row = IntegrationSettings(user_id=user_id)
        db.add(row)
        await db.commit()
        await db.refresh(row)
        logger.info("Created default integration settings for user %s", user_id)
    return row


async def get_integration_settings(db: AsyncSession, user_id: str) -> IntegrationSettings:
    try:
        return await _get_or_create(db, user_id)
    except SQLAlchemyError as e:
        logger.error("Failed to load integration settings for %s: %s", user_id, e)
        raise RecordStoreError("Could not load integration settings") from e


async def update_integration_settings(
    db: AsyncSession,
    user_id: str,
    changes: IntegrationSettingsUpdate,
) -> IntegrationSettings:
    try:
        row = await _get_or_create(db, user_id)
        for key, value in changes.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(row, key, value)
        await db.commit()
        await db.refresh(row)
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error("Failed to save integration settings for %s: %s", user_id, e)
        raise RecordStoreError("Could not save integration settings") from e

    logger.info("Updated integration settings for user %s", user_id)
    return row
