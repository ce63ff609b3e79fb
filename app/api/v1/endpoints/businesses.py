"""Business CRUD endpoints: the directory leads and campaigns are filed under."""

import logging

from fastapi import APIRouter, Depends

from app.core.deps import get_current_user_id, get_repositories
from app.models.business import SERVICE_TYPES
from app.repositories.records import Repositories
from app.schemas.business import (
    BusinessCreate,
    BusinessListOut,
    BusinessMutationOut,
    BusinessOut,
    BusinessUpdate,
)
from app.services.businesses import BusinessStore
from app.services.views import MutationResult, Snapshot

router = APIRouter()
logger = logging.getLogger(__name__)


def build_directory(snapshot: Snapshot) -> BusinessListOut:
    return BusinessListOut(
        businesses=snapshot.businesses,
        service_types=SERVICE_TYPES,
        degraded=snapshot.degraded,
    )


def _mutation_out(result: MutationResult) -> BusinessMutationOut:
    return BusinessMutationOut(record=result.record, view=build_directory(result.view))


@router.get("/", response_model=BusinessListOut)
async def list_businesses(
    user_id: str = Depends(get_current_user_id),
    repos: Repositories = Depends(get_repositories),
):
    snapshot = await BusinessStore(repos).load_or_empty(user_id)
    return build_directory(snapshot)


@router.get("/service-types", response_model=list[str])
async def list_service_types():
    """Service categories offered when adding a business."""
    return SERVICE_TYPES


@router.post("/", response_model=BusinessMutationOut, status_code=201)
async def create_business(
    business: BusinessCreate,
    user_id: str = Depends(get_current_user_id),
    repos: Repositories = Depends(get_repositories),
):
    result = await BusinessStore(repos).create(user_id, business)
    return _mutation_out(result)


@router.get("/{business_id}", response_model=BusinessOut)
async def get_business(
    business_id: str,
    user_id: str = Depends(get_current_user_id),
    repos: Repositories = Depends(get_repositories),
):
    return await repos.businesses.get(user_id, business_id)


@router.patch("/{business_id}", response_model=BusinessMutationOut)
async def update_business(
    business_id: str,
    changes: BusinessUpdate,
    user_id: str = Depends(get_current_user_id),
    repos: Repositories = Depends(get_repositories),
):
    result = await BusinessStore(repos).update(user_id, business_id, changes)
    return _mutation_out(result)


@router.delete("/{business_id}", response_model=BusinessMutationOut)
async def delete_business(
    business_id: str,
    user_id: str = Depends(get_current_user_id),
    repos: Repositories = Depends(get_repositories),
):
    """Delete a business. Its leads, campaigns and appointments are kept."""
    result = await BusinessStore(repos).delete(user_id, business_id)
    return _mutation_out(result)
