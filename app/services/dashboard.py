"""Dashboard figures computed from the loaded collections."""

from typing import Iterable

from app.models.campaign import CampaignStatus
from app.models.interaction import InteractionType
from app.models.lead import LeadStatus
from app.services.campaigns import count_by_status, success_rate
from app.services.views import ScreenStore, Snapshot


def conversion_rate(leads: Iterable) -> int:
    return success_rate(leads)


def recent_interactions(interactions: Iterable, limit: int = 5) -> list:
    """Newest first; interactions with equal timestamps keep their order."""
    # sorted() stays stable with reverse=True
    return sorted(interactions, key=lambda i: i.created_at, reverse=True)[:limit]


def dashboard_stats(snapshot: Snapshot) -> dict:
    leads, campaigns, interactions = snapshot.leads, snapshot.campaigns, snapshot.interactions
    return {
        "total_leads": len(leads),
        "active_campaigns": count_by_status(campaigns, CampaignStatus.ACTIVE),
        "total_interactions": len(interactions),
        "conversion_rate": conversion_rate(leads),
        "new_leads": sum(1 for lead in leads if lead.status == LeadStatus.NEW),
        "draft_campaigns": count_by_status(campaigns, CampaignStatus.DRAFT),
        "calls_made": sum(1 for i in interactions if i.type == InteractionType.CALL),
        "conversions": sum(1 for lead in leads if lead.status == LeadStatus.CONVERTED),
        "has_business": bool(snapshot.businesses),
    }


class DashboardStore(ScreenStore):
    name = "dashboard"
    loads = {"businesses": None, "leads": None, "campaigns": None, "interactions": None}
