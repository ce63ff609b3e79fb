"""Campaign endpoints (AI voice agent scripts).

- GET    /api/v1/campaigns/                 → Campaigns with per-campaign success rate
- POST   /api/v1/campaigns/                 → Create campaign (starts as draft)
- PATCH  /api/v1/campaigns/{id}             → Edit campaign, any valid status
- POST   /api/v1/campaigns/{id}/{action}    → start | pause | resume | complete
- DELETE /api/v1/campaigns/{id}             → Delete campaign
"""

import logging
from typing import Literal

from fastapi import APIRouter, Depends

from app.core.deps import get_current_user_id, get_repositories
from app.models.campaign import CampaignStatus
from app.repositories.records import Repositories
from app.schemas.campaign import (
    CampaignCreate,
    CampaignListOut,
    CampaignMutationOut,
    CampaignRow,
    CampaignSummary,
    CampaignUpdate,
)
from app.services import campaigns as campaign_views
from app.services.lookups import business_name
from app.services.views import MutationResult, Snapshot

router = APIRouter()
logger = logging.getLogger(__name__)


def build_campaign_list(snapshot: Snapshot) -> CampaignListOut:
    rows = []
    for campaign in snapshot.campaigns:
        leads = campaign_views.campaign_leads(campaign, snapshot.leads)
        rows.append(CampaignRow(
            **campaign.model_dump(),
            business_name=business_name(snapshot.businesses, campaign.business_id),
            lead_count=len(leads),
            success_rate=campaign_views.success_rate(leads),
            badge_color=campaign_views.status_badge_color(campaign.status),
            actions=campaign_views.available_actions(campaign.status),
        ))

    summary = CampaignSummary(
        total=len(snapshot.campaigns),
        active=campaign_views.count_by_status(snapshot.campaigns, CampaignStatus.ACTIVE),
        draft=campaign_views.count_by_status(snapshot.campaigns, CampaignStatus.DRAFT),
        total_leads=len(snapshot.leads),
        success_rate=campaign_views.success_rate(snapshot.leads),
    )
    return CampaignListOut(campaigns=rows, summary=summary, degraded=snapshot.degraded)


def _mutation_out(result: MutationResult) -> CampaignMutationOut:
    return CampaignMutationOut(record=result.record, view=build_campaign_list(result.view))


@router.get("/", response_model=CampaignListOut)
async def list_campaigns(
    user_id: str = Depends(get_current_user_id),
    repos: Repositories = Depends(get_repositories),
):
    snapshot = await campaign_views.CampaignStore(repos).load_or_empty(user_id)
    return build_campaign_list(snapshot)


@router.post("/", response_model=CampaignMutationOut, status_code=201)
async def create_campaign(
    campaign: CampaignCreate,
    user_id: str = Depends(get_current_user_id),
    repos: Repositories = Depends(get_repositories),
):
    result = await campaign_views.CampaignStore(repos).create(user_id, campaign)
    return _mutation_out(result)


@router.patch("/{campaign_id}", response_model=CampaignMutationOut)
async def update_campaign(
    campaign_id: str,
    changes: CampaignUpdate,
    user_id: str = Depends(get_current_user_id),
    repos: Repositories = Depends(get_repositories),
):
    result = await campaign_views.CampaignStore(repos).update(user_id, campaign_id, changes)
    return _mutation_out(result)


@router.post("/{campaign_id}/{action}", response_model=CampaignMutationOut)
async def run_campaign_action(
    campaign_id: str,
    action: Literal["start", "pause", "resume", "complete"],
    user_id: str = Depends(get_current_user_id),
    repos: Repositories = Depends(get_repositories),
):
    """Move a campaign through its lifecycle. 409 if the action does not
    apply to the campaign's current status."""
    result = await campaign_views.CampaignStore(repos).apply(user_id, campaign_id, action)
    return _mutation_out(result)


@router.delete("/{campaign_id}", response_model=CampaignMutationOut)
async def delete_campaign(
    campaign_id: str,
    user_id: str = Depends(get_current_user_id),
    repos: Repositories = Depends(get_repositories),
):
    result = await campaign_views.CampaignStore(repos).delete(user_id, campaign_id)
    return _mutation_out(result)
