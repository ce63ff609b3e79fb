"""Tests for campaign lifecycle actions and success rate."""

from types import SimpleNamespace

import pytest

from app.core.errors import InvalidTransitionError
from app.models.campaign import CampaignStatus, DEFAULT_CAMPAIGN_SCRIPT
from app.services.campaigns import (
    available_actions,
    campaign_leads,
    next_status,
    success_rate,
)


def leads_with(*statuses, business_id="business_1"):
    return [SimpleNamespace(status=s, business_id=business_id) for s in statuses]


@pytest.mark.parametrize("current, action, expected", [
    (CampaignStatus.DRAFT, "start", CampaignStatus.ACTIVE),
    (CampaignStatus.ACTIVE, "pause", CampaignStatus.PAUSED),
    (CampaignStatus.PAUSED, "resume", CampaignStatus.ACTIVE),
    (CampaignStatus.DRAFT, "complete", CampaignStatus.COMPLETED),
    (CampaignStatus.PAUSED, "complete", CampaignStatus.COMPLETED),
])
def test_allowed_transitions(current, action, expected):
    assert next_status(current, action) == expected


@pytest.mark.parametrize("current, action", [
    (CampaignStatus.ACTIVE, "start"),
    (CampaignStatus.PAUSED, "start"),
    (CampaignStatus.DRAFT, "pause"),
    (CampaignStatus.ACTIVE, "resume"),
    (CampaignStatus.COMPLETED, "resume"),
    (CampaignStatus.COMPLETED, "complete"),
])
def test_rejected_transitions(current, action):
    with pytest.raises(InvalidTransitionError):
        next_status(current, action)


def test_unknown_action():
    with pytest.raises(ValueError):
        next_status(CampaignStatus.DRAFT, "launch")


def test_available_actions():
    assert available_actions(CampaignStatus.DRAFT) == ["start", "complete"]
    assert available_actions(CampaignStatus.ACTIVE) == ["pause", "complete"]
    assert available_actions(CampaignStatus.COMPLETED) == []


def test_success_rate():
    assert success_rate([]) == 0
    assert success_rate(leads_with("converted")) == 100
    assert success_rate(leads_with("converted", "new", "new")) == 33
    assert success_rate(leads_with("converted", "converted", "new")) == 67
    # 1/8 = 12.5% rounds up
    assert success_rate(leads_with("converted", *["new"] * 7)) == 13


def test_success_rate_is_integer_percentage():
    for converted in range(0, 8):
        leads = leads_with(*(["converted"] * converted + ["contacted"] * (7 - converted)))
        rate = success_rate(leads)
        assert isinstance(rate, int)
        assert 0 <= rate <= 100


def test_campaign_leads_follow_business():
    campaign = SimpleNamespace(business_id="business_1")
    leads = leads_with("new") + leads_with("new", business_id="business_2")
    assert len(campaign_leads(campaign, leads)) == 1


@pytest.mark.asyncio
async def test_create_campaign_defaults(client, headers, business):
    resp = await client.post("/api/v1/campaigns/", headers=headers, json={
        "business_id": business["id"],
        "name": "Spring promo",
    })
    assert resp.status_code == 201
    record = resp.json()["record"]
    assert record["status"] == "draft"
    assert record["script"] == DEFAULT_CAMPAIGN_SCRIPT
    assert record["id"].startswith("campaign_")


@pytest.mark.asyncio
async def test_campaign_lifecycle_over_api(client, headers, business):
    resp = await client.post("/api/v1/campaigns/", headers=headers, json={
        "business_id": business["id"],
        "name": "Spring promo",
        "script": "Hi there",
    })
    campaign_id = resp.json()["record"]["id"]

    resp = await client.post(f"/api/v1/campaigns/{campaign_id}/start", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["record"]["status"] == "active"
    assert resp.json()["view"]["summary"]["active"] == 1

    # starting an active campaign is rejected and changes nothing
    resp = await client.post(f"/api/v1/campaigns/{campaign_id}/start", headers=headers)
    assert resp.status_code == 409

    resp = await client.post(f"/api/v1/campaigns/{campaign_id}/pause", headers=headers)
    assert resp.json()["record"]["status"] == "paused"

    resp = await client.post(f"/api/v1/campaigns/{campaign_id}/resume", headers=headers)
    assert resp.json()["record"]["status"] == "active"

    resp = await client.get("/api/v1/campaigns/", headers=headers)
    assert resp.json()["campaigns"][0]["status"] == "active"


@pytest.mark.asyncio
async def test_patch_accepts_any_valid_status(client, headers, business):
    resp = await client.post("/api/v1/campaigns/", headers=headers, json={
        "business_id": business["id"], "name": "Old list",
    })
    campaign_id = resp.json()["record"]["id"]

    resp = await client.patch(
        f"/api/v1/campaigns/{campaign_id}", headers=headers, json={"status": "completed"}
    )
    assert resp.status_code == 200
    assert resp.json()["record"]["status"] == "completed"

    resp = await client.patch(
        f"/api/v1/campaigns/{campaign_id}", headers=headers, json={"status": "archived"}
    )
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_campaign_rows_carry_business_and_success_rate(client, headers, business, lead):
    await client.post("/api/v1/campaigns/", headers=headers, json={
        "business_id": business["id"], "name": "Spring promo",
    })
    await client.put(f"/api/v1/leads/{lead['id']}/status", headers=headers, json={"status": "converted"})

    resp = await client.get("/api/v1/campaigns/", headers=headers)
    row = resp.json()["campaigns"][0]
    assert row["business_name"] == "Acme"
    assert row["lead_count"] == 1
    assert row["success_rate"] == 100
    assert row["badge_color"] == "bg-gray-100 text-gray-800"
    assert row["actions"] == ["start", "complete"]


@pytest.mark.asyncio
async def test_unknown_action_is_422(client, headers, business):
    resp = await client.post("/api/v1/campaigns/", headers=headers, json={
        "business_id": business["id"], "name": "Spring promo",
    })
    campaign_id = resp.json()["record"]["id"]
    resp = await client.post(f"/api/v1/campaigns/{campaign_id}/launch", headers=headers)
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_patch_rejects_blank_or_null_required_fields(client, headers, business):
    resp = await client.post("/api/v1/campaigns/", headers=headers, json={
        "business_id": business["id"], "name": "Spring promo",
    })
    url = f"/api/v1/campaigns/{resp.json()['record']['id']}"

    for changes in ({"status": None}, {"name": " "}, {"script": None}, {"business_id": None}):
        resp = await client.patch(url, headers=headers, json=changes)
        assert resp.status_code == 422, changes

    resp = await client.patch(url, headers=headers, json={"scheduled_at": None})
    assert resp.status_code == 200
    assert resp.json()["record"]["status"] == "draft"


@pytest.mark.asyncio
async def test_cannot_create_campaign_for_another_users_business(client, other_headers, business):
    resp = await client.post("/api/v1/campaigns/", headers=other_headers, json={
        "business_id": business["id"], "name": "Spring promo",
    })
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Business not found"
