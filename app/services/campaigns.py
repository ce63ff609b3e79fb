"""Campaign screen: lifecycle actions and success-rate figures.

    draft  --start-->    active
    active --pause-->    paused
    paused --resume-->   active
    draft|active|paused --complete--> completed

An action applied from any other state raises InvalidTransitionError and
leaves the campaign untouched. A plain field update may still set any
valid status.
"""

import logging
from typing import Iterable

from app.core.errors import InvalidTransitionError
from app.models.campaign import CampaignStatus
from app.models.lead import LeadStatus
from app.schemas.campaign import CampaignCreate, CampaignUpdate
from app.services.views import ScreenStore

logger = logging.getLogger(__name__)

TRANSITIONS: dict[str, tuple[frozenset, CampaignStatus]] = {
    "start": (frozenset({CampaignStatus.DRAFT}), CampaignStatus.ACTIVE),
    "pause": (frozenset({CampaignStatus.ACTIVE}), CampaignStatus.PAUSED),
    "resume": (frozenset({CampaignStatus.PAUSED}), CampaignStatus.ACTIVE),
    "complete": (
        frozenset({CampaignStatus.DRAFT, CampaignStatus.ACTIVE, CampaignStatus.PAUSED}),
        CampaignStatus.COMPLETED,
    ),
}

STATUS_BADGE_COLORS = {
    CampaignStatus.DRAFT: "bg-gray-100 text-gray-800",
    CampaignStatus.ACTIVE: "bg-green-100 text-green-800",
    CampaignStatus.PAUSED: "bg-yellow-100 text-yellow-800",
    CampaignStatus.COMPLETED: "bg-blue-100 text-blue-800",
}


def next_status(current: CampaignStatus, action: str) -> CampaignStatus:
    """Status reached by applying ``action``; raises if not allowed."""
    if action not in TRANSITIONS:
        raise ValueError(f"Unknown campaign action '{action}'")
    allowed_from, target = TRANSITIONS[action]
    current = CampaignStatus(current)
    if current not in allowed_from:
        raise InvalidTransitionError(action, current.value)
    return target


def available_actions(status: CampaignStatus) -> list[str]:
    status = CampaignStatus(status)
    return [action for action, (allowed_from, _) in TRANSITIONS.items() if status in allowed_from]


def status_badge_color(status: CampaignStatus) -> str:
    return STATUS_BADGE_COLORS[CampaignStatus(status)]


def success_rate(leads: Iterable) -> int:
    """Converted leads as a whole percentage, rounded; 0 when there are none."""
    leads = list(leads)
    if not leads:
        return 0
    converted = sum(1 for lead in leads if lead.status == LeadStatus.CONVERTED)
    # integer round-half-up of 100 * converted / total
    return (200 * converted + len(leads)) // (2 * len(leads))


def campaign_leads(campaign, leads: Iterable) -> list:
    """Leads filed under the campaign's business."""
    return [lead for lead in leads if lead.business_id == campaign.business_id]


def count_by_status(campaigns: Iterable, status: CampaignStatus) -> int:
    return sum(1 for c in campaigns if c.status == status)


class CampaignStore(ScreenStore):
    name = "campaigns"
    loads = {"campaigns": {"created_at": "desc"}, "businesses": None, "leads": None}

    async def create(self, user_id: str, data: CampaignCreate):
        fields = data.model_dump()
        fields["status"] = CampaignStatus.DRAFT
        await self._check_references(user_id, businesses=data.business_id)
        return await self._then_reload(user_id, self.repos.campaigns.create(user_id, fields))

    async def update(self, user_id: str, campaign_id: str, data: CampaignUpdate):
        fields = data.model_dump(exclude_unset=True)
        await self._check_references(user_id, businesses=fields.get("business_id"))
        return await self._then_reload(
            user_id, self.repos.campaigns.update(user_id, campaign_id, fields)
        )

    async def apply(self, user_id: str, campaign_id: str, action: str):
        """Run a lifecycle action (start, pause, resume, complete)."""
        campaign = await self.repos.campaigns.get(user_id, campaign_id)
        try:
            target = next_status(campaign.status, action)
        except InvalidTransitionError:
            logger.warning(
                "Rejected %s on campaign %s (status=%s)", action, campaign_id, campaign.status.value
            )
            raise
        logger.info("Campaign %s: %s -> %s", campaign_id, campaign.status.value, target.value)
        return await self._then_reload(
            user_id, self.repos.campaigns.update(user_id, campaign_id, {"status": target})
        )

    async def delete(self, user_id: str, campaign_id: str):
        return await self._then_reload(user_id, self.repos.campaigns.delete(user_id, campaign_id))
