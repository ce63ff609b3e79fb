"""Lead endpoints.

- GET    /api/v1/leads/             → Lead list (search + status filter) with counts
- POST   /api/v1/leads/             → Create lead
- PATCH  /api/v1/leads/{id}         → Edit lead
- PUT    /api/v1/leads/{id}/status  → Update lead status
- DELETE /api/v1/leads/{id}         → Delete lead

Mutations answer with the changed record and the reloaded list.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.core.deps import get_current_user_id, get_repositories
from app.repositories.records import Repositories
from app.schemas.lead import (
    LeadCreate,
    LeadListOut,
    LeadMutationOut,
    LeadRow,
    LeadStatusUpdate,
    LeadUpdate,
)
from app.services import leads as lead_views
from app.services.lookups import business_name
from app.services.views import MutationResult, Snapshot

router = APIRouter()
logger = logging.getLogger(__name__)


def build_lead_list(snapshot: Snapshot, search: Optional[str] = None, status: Optional[str] = None) -> LeadListOut:
    visible = lead_views.filter_leads(snapshot.leads, search, status)
    rows = [
        LeadRow(
            **lead.model_dump(),
            business_name=business_name(snapshot.businesses, lead.business_id),
            badge_color=lead_views.status_badge_color(lead.status),
        )
        for lead in visible
    ]
    return LeadListOut(
        leads=rows,
        status_counts=lead_views.status_counts(snapshot.leads),
        total=len(snapshot.leads),
        degraded=snapshot.degraded,
    )


def _mutation_out(result: MutationResult) -> LeadMutationOut:
    return LeadMutationOut(record=result.record, view=build_lead_list(result.view))


@router.get("/", response_model=LeadListOut)
async def list_leads(
    search: Optional[str] = Query(None, description="Match name, phone or email"),
    status: Optional[str] = Query(None, description="Lead status or 'all'"),
    user_id: str = Depends(get_current_user_id),
    repos: Repositories = Depends(get_repositories),
):
    """List the user's leads, newest first."""
    snapshot = await lead_views.LeadStore(repos).load_or_empty(user_id)
    return build_lead_list(snapshot, search, status)


@router.post("/", response_model=LeadMutationOut, status_code=201)
async def create_lead(
    lead: LeadCreate,
    user_id: str = Depends(get_current_user_id),
    repos: Repositories = Depends(get_repositories),
):
    result = await lead_views.LeadStore(repos).create(user_id, lead)
    return _mutation_out(result)


@router.patch("/{lead_id}", response_model=LeadMutationOut)
async def update_lead(
    lead_id: str,
    changes: LeadUpdate,
    user_id: str = Depends(get_current_user_id),
    repos: Repositories = Depends(get_repositories),
):
    result = await lead_views.LeadStore(repos).update(user_id, lead_id, changes)
    return _mutation_out(result)


@router.put("/{lead_id}/status", response_model=LeadMutationOut)
async def update_lead_status(
    lead_id: str,
    status_update: LeadStatusUpdate,
    user_id: str = Depends(get_current_user_id),
    repos: Repositories = Depends(get_repositories),
):
    """Update lead status."""
    result = await lead_views.LeadStore(repos).set_status(user_id, lead_id, status_update.status)
    return _mutation_out(result)


@router.delete("/{lead_id}", response_model=LeadMutationOut)
async def delete_lead(
    lead_id: str,
    user_id: str = Depends(get_current_user_id),
    repos: Repositories = Depends(get_repositories),
):
    result = await lead_views.LeadStore(repos).delete(user_id, lead_id)
    return _mutation_out(result)
