"""Resolve ids to display names against collections already in memory.

A record can outlive what it points at (businesses and leads are deleted
without cascading), so every lookup falls back to a label instead of
raising.
"""

from typing import Iterable, Optional

UNKNOWN_LEAD = "Unknown Lead"
UNKNOWN_BUSINESS = "Unknown Business"
UNKNOWN_CAMPAIGN = "Unknown Campaign"
MANUAL_CAMPAIGN = "Manual"


def find_by_id(records: Iterable, record_id: Optional[str]):
    if not record_id:
        return None
    for record in records:
        if record.id == record_id:
            return record
    return None


def lead_name(leads: Iterable, lead_id: Optional[str]) -> str:
    lead = find_by_id(leads, lead_id)
    return lead.name if lead and lead.name else UNKNOWN_LEAD


def business_name(businesses: Iterable, business_id: Optional[str]) -> str:
    business = find_by_id(businesses, business_id)
    return business.name if business and business.name else UNKNOWN_BUSINESS


def campaign_name(campaigns: Iterable, campaign_id: Optional[str]) -> str:
    """Campaign name; "Manual" when the interaction had no campaign."""
    if not campaign_id:
        return MANUAL_CAMPAIGN
    campaign = find_by_id(campaigns, campaign_id)
    return campaign.name if campaign and campaign.name else UNKNOWN_CAMPAIGN
