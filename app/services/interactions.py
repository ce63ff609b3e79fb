"""Interaction log: search/filter, duration display and tallies."""

import logging
from typing import Iterable, Optional

from app.models.interaction import InteractionStatus, InteractionType
from app.schemas.interaction import InteractionCreate, InteractionRow
from app.services.lookups import campaign_name, lead_name
from app.services.views import ScreenStore

logger = logging.getLogger(__name__)

ALL = "all"
NO_DURATION = "N/A"


def format_duration(seconds: Optional[int]) -> str:
    """Render seconds as ``m:ss``."""
    if not seconds:
        return NO_DURATION
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes}:{secs:02d}"


def interaction_row(interaction, leads: Iterable, campaigns: Iterable) -> InteractionRow:
    """Interaction with its lead and campaign names resolved for display."""
    return InteractionRow(
        **interaction.model_dump(),
        lead_name=lead_name(leads, interaction.lead_id),
        campaign_name=campaign_name(campaigns, interaction.campaign_id),
        duration_display=format_duration(interaction.duration),
    )


def filter_interactions(
    interactions: Iterable,
    leads: Iterable,
    campaigns: Iterable,
    search: Optional[str] = None,
    type: Optional[str] = None,
    status: Optional[str] = None,
) -> list:
    """Interactions matching the search term and the type/status filters.

    The term is matched against the lead name, the campaign name ("Manual"
    for manual contacts) and the content, ignoring case.
    """
    leads = list(leads)
    campaigns = list(campaigns)
    term = (search or "").strip().lower()

    matched = []
    for interaction in interactions:
        if type and type != ALL and interaction.type != type:
            continue
        if status and status != ALL and interaction.status != status:
            continue
        if term:
            haystacks = (
                lead_name(leads, interaction.lead_id),
                campaign_name(campaigns, interaction.campaign_id),
                interaction.content or "",
            )
            if not any(term in text.lower() for text in haystacks):
                continue
        matched.append(interaction)
    return matched


def interaction_totals(interactions: Iterable) -> dict[str, int]:
    interactions = list(interactions)
    totals = {"total": len(interactions)}
    for status in InteractionStatus:
        totals[status.value] = sum(1 for i in interactions if i.status == status)
    totals["calls"] = sum(1 for i in interactions if i.type == InteractionType.CALL)
    totals["whatsapp"] = sum(1 for i in interactions if i.type == InteractionType.WHATSAPP)
    totals["email"] = sum(1 for i in interactions if i.type == InteractionType.EMAIL)
    totals["completed_calls"] = sum(
        1 for i in interactions
        if i.type == InteractionType.CALL and i.status == InteractionStatus.COMPLETED
    )
    return totals


class InteractionStore(ScreenStore):
    name = "interactions"
    loads = {"interactions": {"created_at": "desc"}, "leads": None, "campaigns": None}

    async def create(self, user_id: str, data: InteractionCreate):
        await self._check_references(user_id, leads=data.lead_id, campaigns=data.campaign_id)
        return await self._then_reload(
            user_id, self.repos.interactions.create(user_id, data.model_dump())
        )

    async def delete(self, user_id: str, interaction_id: str):
        return await self._then_reload(
            user_id, self.repos.interactions.delete(user_id, interaction_id)
        )
