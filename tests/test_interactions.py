"""Tests for the interaction log."""

from datetime import datetime
from types import SimpleNamespace

import pytest

from app.schemas.interaction import InteractionOut
from app.services.interactions import (
    filter_interactions,
    format_duration,
    interaction_row,
    interaction_totals,
)

LEADS = [SimpleNamespace(id="lead_1", name="Jane Doe"), SimpleNamespace(id="lead_2", name="Bob Stone")]
CAMPAIGNS = [SimpleNamespace(id="campaign_1", name="Spring Promo")]


def interaction(iid, lead_id, campaign_id=None, type="call", status="completed", content=None):
    return SimpleNamespace(
        id=iid, lead_id=lead_id, campaign_id=campaign_id, type=type, status=status,
        content=content, duration=None, created_at=datetime(2026, 1, 1),
    )


INTERACTIONS = [
    interaction("i1", "lead_1", "campaign_1", "call", "completed"),
    interaction("i2", "lead_2", None, "whatsapp", "pending", content="Sent price list"),
    interaction("i3", "lead_9", None, "email", "failed"),
    interaction("i4", "lead_1", "campaign_gone", "call", "failed"),
]


def ids(rows):
    return [r.id for r in rows]


def test_no_filters_returns_everything():
    assert ids(filter_interactions(INTERACTIONS, LEADS, CAMPAIGNS)) == ["i1", "i2", "i3", "i4"]
    assert ids(filter_interactions(INTERACTIONS, LEADS, CAMPAIGNS, "", "all", "all")) == ["i1", "i2", "i3", "i4"]


def test_search_matches_lead_campaign_and_content():
    assert ids(filter_interactions(INTERACTIONS, LEADS, CAMPAIGNS, search="jane")) == ["i1", "i4"]
    assert ids(filter_interactions(INTERACTIONS, LEADS, CAMPAIGNS, search="spring")) == ["i1"]
    assert ids(filter_interactions(INTERACTIONS, LEADS, CAMPAIGNS, search="PRICE")) == ["i2"]


def test_search_matches_fallback_labels():
    assert ids(filter_interactions(INTERACTIONS, LEADS, CAMPAIGNS, search="manual")) == ["i2", "i3"]
    assert ids(filter_interactions(INTERACTIONS, LEADS, CAMPAIGNS, search="unknown lead")) == ["i3"]


def test_type_and_status_filters_combine():
    assert ids(filter_interactions(INTERACTIONS, LEADS, CAMPAIGNS, type="call")) == ["i1", "i4"]
    assert ids(filter_interactions(INTERACTIONS, LEADS, CAMPAIGNS, type="call", status="failed")) == ["i4"]
    assert ids(filter_interactions(INTERACTIONS, LEADS, CAMPAIGNS, search="bob", type="call")) == []


@pytest.mark.parametrize("seconds, expected", [
    (None, "N/A"),
    (0, "N/A"),
    (5, "0:05"),
    (65, "1:05"),
    (600, "10:00"),
])
def test_format_duration(seconds, expected):
    assert format_duration(seconds) == expected


def test_interaction_totals():
    totals = interaction_totals(INTERACTIONS)
    assert totals == {
        "total": 4,
        "pending": 1,
        "completed": 1,
        "failed": 2,
        "calls": 2,
        "whatsapp": 1,
        "email": 1,
        "completed_calls": 1,
    }


@pytest.mark.asyncio
async def test_log_and_list_interactions(client, headers, lead):
    resp = await client.post("/api/v1/interactions/", headers=headers, json={
        "lead_id": lead["id"],
        "type": "call",
        "status": "completed",
        "duration": 125,
        "content": "Discussed pricing",
    })
    assert resp.status_code == 201
    record = resp.json()["record"]
    assert record["id"].startswith("interaction_")

    resp = await client.get("/api/v1/interactions/", headers=headers, params={"search": "pricing"})
    data = resp.json()
    assert len(data["interactions"]) == 1
    row = data["interactions"][0]
    assert row["lead_name"] == "Jane Doe"
    assert row["campaign_name"] == "Manual"
    assert row["duration_display"] == "2:05"
    assert data["totals"]["completed_calls"] == 1


@pytest.mark.asyncio
async def test_interaction_type_is_closed(client, headers, lead):
    resp = await client.post("/api/v1/interactions/", headers=headers, json={
        "lead_id": lead["id"],
        "type": "sms",
    })
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_delete_interaction(client, headers, lead):
    resp = await client.post("/api/v1/interactions/", headers=headers, json={
        "lead_id": lead["id"], "type": "email",
    })
    interaction_id = resp.json()["record"]["id"]
    assert resp.json()["record"]["status"] == "pending"

    resp = await client.delete(f"/api/v1/interactions/{interaction_id}", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["view"]["totals"]["total"] == 0


@pytest.mark.asyncio
async def test_cannot_log_against_another_users_records(client, headers, other_headers, business, lead):
    resp = await client.post("/api/v1/interactions/", headers=other_headers, json={
        "lead_id": lead["id"], "type": "call",
    })
    assert resp.status_code == 404

    resp = await client.post("/api/v1/campaigns/", headers=headers, json={
        "business_id": business["id"], "name": "Spring promo",
    })
    campaign_id = resp.json()["record"]["id"]

    resp = await client.post("/api/v1/businesses/", headers=other_headers, json={
        "name": "Bolt", "service_type": "Retail",
    })
    resp = await client.post("/api/v1/leads/", headers=other_headers, json={
        "business_id": resp.json()["record"]["id"], "name": "Sam", "phone": "+1777",
    })
    other_lead_id = resp.json()["record"]["id"]

    resp = await client.post("/api/v1/interactions/", headers=other_headers, json={
        "lead_id": other_lead_id, "campaign_id": campaign_id, "type": "call",
    })
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Campaign not found"


@pytest.mark.asyncio
async def test_blank_campaign_is_manual_contact(client, headers, lead):
    resp = await client.post("/api/v1/interactions/", headers=headers, json={
        "lead_id": lead["id"], "campaign_id": "", "type": "whatsapp",
    })
    assert resp.status_code == 201
    assert resp.json()["record"]["campaign_id"] is None
    assert resp.json()["view"]["interactions"][0]["campaign_name"] == "Manual"


def test_interaction_row_resolves_names():
    record = InteractionOut(
        id="interaction_1", user_id="u1", lead_id="lead_2", campaign_id="campaign_gone",
        type="call", status="completed", duration=125, created_at=datetime(2026, 1, 1),
    )
    row = interaction_row(record, LEADS, CAMPAIGNS)
    assert row.lead_name == "Bob Stone"
    assert row.campaign_name == "Unknown Campaign"
    assert row.duration_display == "2:05"
    assert row.id == "interaction_1"
