from fastapi import APIRouter
from app.api.v1.endpoints import (
    appointments,
    businesses,
    campaigns,
    dashboard,
    interactions,
    leads,
    settings,
)

api_router = APIRouter()
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
api_router.include_router(businesses.router, prefix="/businesses", tags=["businesses"])
api_router.include_router(leads.router, prefix="/leads", tags=["leads"])
api_router.include_router(campaigns.router, prefix="/campaigns", tags=["campaigns"])
api_router.include_router(appointments.router, prefix="/appointments", tags=["appointments"])
api_router.include_router(interactions.router, prefix="/interactions", tags=["interactions"])
api_router.include_router(settings.router, prefix="/settings", tags=["settings"])
