"""Business directory (the settings screen's business list)."""

import logging

from app.schemas.business import BusinessCreate, BusinessUpdate
from app.services.views import ScreenStore

logger = logging.getLogger(__name__)


class BusinessStore(ScreenStore):
    name = "businesses"
    loads = {"businesses": {"created_at": "desc"}}

    async def create(self, user_id: str, data: BusinessCreate):
        return await self._then_reload(
            user_id, self.repos.businesses.create(user_id, data.model_dump())
        )

    async def update(self, user_id: str, business_id: str, data: BusinessUpdate):
        fields = data.model_dump(exclude_unset=True)
        return await self._then_reload(
            user_id, self.repos.businesses.update(user_id, business_id, fields)
        )

    async def delete(self, user_id: str, business_id: str):
        # Leads, campaigns and appointments keep their business_id
        logger.info("Deleting business %s; dependent records are left in place", business_id)
        return await self._then_reload(user_id, self.repos.businesses.delete(user_id, business_id))
