"""Lead list screen: search, status filter, badges and CRUD."""

import logging
from typing import Iterable, Optional

from app.models.lead import LeadStatus
from app.schemas.lead import LeadCreate, LeadUpdate
from app.services.views import ScreenStore

logger = logging.getLogger(__name__)

ALL = "all"

STATUS_BADGE_COLORS = {
    LeadStatus.NEW: "bg-blue-100 text-blue-800",
    LeadStatus.CONTACTED: "bg-yellow-100 text-yellow-800",
    LeadStatus.INTERESTED: "bg-green-100 text-green-800",
    LeadStatus.CONVERTED: "bg-emerald-100 text-emerald-800",
    LeadStatus.NOT_INTERESTED: "bg-red-100 text-red-800",
}


def _contains(value: Optional[str], term: str) -> bool:
    return bool(value) and term in value.lower()


def search(leads: Iterable, term: Optional[str]) -> list:
    """Leads whose name, phone or email contains ``term``, ignoring case."""
    term = (term or "").strip().lower()
    if not term:
        return list(leads)
    return [
        lead for lead in leads
        if _contains(lead.name, term) or _contains(lead.phone, term) or _contains(lead.email, term)
    ]


def filter_by_status(leads: Iterable, status: Optional[str]) -> list:
    if not status or status == ALL:
        return list(leads)
    return [lead for lead in leads if lead.status == status]


def filter_leads(leads: Iterable, term: Optional[str] = None, status: Optional[str] = None) -> list:
    return filter_by_status(search(leads, term), status)


def status_badge_color(status: LeadStatus) -> str:
    return STATUS_BADGE_COLORS[LeadStatus(status)]


def status_counts(leads: Iterable) -> dict[str, int]:
    counts = {status.value: 0 for status in LeadStatus}
    for lead in leads:
        counts[LeadStatus(lead.status).value] += 1
    return counts


class LeadStore(ScreenStore):
    name = "leads"
    loads = {"leads": {"created_at": "desc"}, "businesses": None}

    async def create(self, user_id: str, data: LeadCreate):
        fields = data.model_dump()
        fields["status"] = LeadStatus.NEW
        await self._check_references(user_id, businesses=data.business_id)
        return await self._then_reload(user_id, self.repos.leads.create(user_id, fields))

    async def update(self, user_id: str, lead_id: str, data: LeadUpdate):
        fields = data.model_dump(exclude_unset=True)
        await self._check_references(user_id, businesses=fields.get("business_id"))
        return await self._then_reload(user_id, self.repos.leads.update(user_id, lead_id, fields))

    async def set_status(self, user_id: str, lead_id: str, status: LeadStatus):
        logger.info("Lead %s status -> %s", lead_id, status.value)
        return await self._then_reload(
            user_id, self.repos.leads.update(user_id, lead_id, {"status": status})
        )

    async def delete(self, user_id: str, lead_id: str):
        return await self._then_reload(user_id, self.repos.leads.delete(user_id, lead_id))
