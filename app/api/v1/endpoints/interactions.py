"""Interaction history endpoints (calls, WhatsApp messages, emails)."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.core.deps import get_current_user_id, get_repositories
from app.repositories.records import Repositories
from app.schemas.interaction import (
    InteractionCreate,
    InteractionListOut,
    InteractionMutationOut,
    InteractionTotals,
)
from app.services import interactions as history
from app.services.views import MutationResult, Snapshot

router = APIRouter()
logger = logging.getLogger(__name__)


def build_history(
    snapshot: Snapshot,
    search: Optional[str] = None,
    type: Optional[str] = None,
    status: Optional[str] = None,
) -> InteractionListOut:
    visible = history.filter_interactions(
        snapshot.interactions, snapshot.leads, snapshot.campaigns, search, type, status
    )
    return InteractionListOut(
        interactions=[
            history.interaction_row(i, snapshot.leads, snapshot.campaigns) for i in visible
        ],
        totals=InteractionTotals(**history.interaction_totals(snapshot.interactions)),
        degraded=snapshot.degraded,
    )


def _mutation_out(result: MutationResult) -> InteractionMutationOut:
    return InteractionMutationOut(record=result.record, view=build_history(result.view))


@router.get("/", response_model=InteractionListOut)
async def list_interactions(
    search: Optional[str] = Query(None, description="Match lead, campaign or content"),
    type: Optional[str] = Query(None, description="call, whatsapp, email or 'all'"),
    status: Optional[str] = Query(None, description="pending, completed, failed or 'all'"),
    user_id: str = Depends(get_current_user_id),
    repos: Repositories = Depends(get_repositories),
):
    snapshot = await history.InteractionStore(repos).load_or_empty(user_id)
    return build_history(snapshot, search, type, status)


@router.post("/", response_model=InteractionMutationOut, status_code=201)
async def log_interaction(
    interaction: InteractionCreate,
    user_id: str = Depends(get_current_user_id),
    repos: Repositories = Depends(get_repositories),
):
    """Record a contact attempt against a lead."""
    result = await history.InteractionStore(repos).create(user_id, interaction)
    return _mutation_out(result)


@router.delete("/{interaction_id}", response_model=InteractionMutationOut)
async def delete_interaction(
    interaction_id: str,
    user_id: str = Depends(get_current_user_id),
    repos: Repositories = Depends(get_repositories),
):
    result = await history.InteractionStore(repos).delete(user_id, interaction_id)
    return _mutation_out(result)
