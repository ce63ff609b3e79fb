"""Tests for integration settings."""

import pytest
from sqlalchemy import select

from app.models.integration_settings import IntegrationSettings


@pytest.mark.asyncio
async def test_defaults_created_on_first_read(client, headers, db):
    resp = await client.get("/api/v1/settings/integrations", headers=headers)
    assert resp.status_code == 200
    data = resp.json()
    assert data["voice_enabled"] is True
    assert data["whatsapp_enabled"] is False
    assert data["email_enabled"] is False
    assert data["auto_followup"] is True
    assert data["followup_delay_hours"] == 24

    result = await db.execute(select(IntegrationSettings))
    assert len(result.scalars().all()) == 1


@pytest.mark.asyncio
async def test_update_only_touches_given_fields(client, headers):
    resp = await client.put("/api/v1/settings/integrations", headers=headers, json={
        "whatsapp_enabled": True,
        "followup_delay_hours": 48,
    })
    assert resp.status_code == 200
    data = resp.json()
    assert data["whatsapp_enabled"] is True
    assert data["followup_delay_hours"] == 48
    assert data["voice_enabled"] is True


@pytest.mark.asyncio
async def test_followup_delay_bounds(client, headers):
    resp = await client.put("/api/v1/settings/integrations", headers=headers, json={
        "followup_delay_hours": 0,
    })
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_settings_are_per_user(client, headers, other_headers):
    await client.put("/api/v1/settings/integrations", headers=headers, json={"email_enabled": True})
    resp = await client.get("/api/v1/settings/integrations", headers=other_headers)
    assert resp.json()["email_enabled"] is False
