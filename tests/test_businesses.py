"""Tests for business CRUD endpoints."""

import pytest


@pytest.mark.asyncio
async def test_create_and_list_business(client, headers):
    """Create a business and verify it appears in the list."""
    resp = await client.post("/api/v1/businesses/", headers=headers, json={
        "name": "Acme Plumbing",
        "service_type": "Plumbing",
        "phone": "+15551112222",
        "email": "",
    })
    assert resp.status_code == 201
    biz = resp.json()["record"]
    assert biz["name"] == "Acme Plumbing"
    assert biz["service_type"] == "Plumbing"
    assert biz["email"] is None
    assert biz["id"].startswith("business_")

    # Should appear in list
    resp2 = await client.get("/api/v1/businesses/", headers=headers)
    assert resp2.status_code == 200
    assert len(resp2.json()["businesses"]) == 1
    assert "Plumbing" in resp2.json()["service_types"]


@pytest.mark.asyncio
async def test_name_and_service_type_required(client, headers):
    resp = await client.post("/api/v1/businesses/", headers=headers, json={
        "name": "Acme",
        "service_type": "   ",
    })
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_get_business_not_found(client, headers):
    resp = await client.get("/api/v1/businesses/business_0", headers=headers)
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_update_business(client, headers, business):
    resp = await client.patch(
        f"/api/v1/businesses/{business['id']}", headers=headers, json={"description": "24/7 repairs"}
    )
    assert resp.status_code == 200
    assert resp.json()["record"]["description"] == "24/7 repairs"
    assert resp.json()["record"]["name"] == "Acme"


@pytest.mark.asyncio
async def test_business_of_another_user_is_hidden(client, headers, other_headers, business):
    resp = await client.get(f"/api/v1/businesses/{business['id']}", headers=other_headers)
    assert resp.status_code == 404

    resp = await client.get("/api/v1/businesses/", headers=other_headers)
    assert resp.json()["businesses"] == []


@pytest.mark.asyncio
async def test_deleting_business_keeps_leads(client, headers, business, lead):
    """Leads of a deleted business stay and show a fallback business name."""
    resp = await client.delete(f"/api/v1/businesses/{business['id']}", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["view"]["businesses"] == []

    resp = await client.get("/api/v1/leads/", headers=headers)
    rows = resp.json()["leads"]
    assert len(rows) == 1
    assert rows[0]["business_name"] == "Unknown Business"


@pytest.mark.asyncio
async def test_service_types(client):
    resp = await client.get("/api/v1/businesses/service-types")
    assert resp.status_code == 200
    assert resp.json()[0] == "Salon & Beauty"
    assert resp.json()[-1] == "Other"


@pytest.mark.asyncio
async def test_update_rejects_blank_or_null_required_fields(client, headers, business):
    url = f"/api/v1/businesses/{business['id']}"
    resp = await client.patch(url, headers=headers, json={"name": "   "})
    assert resp.status_code == 422

    resp = await client.patch(url, headers=headers, json={"service_type": None})
    assert resp.status_code == 422

    resp = await client.get(url, headers=headers)
    assert resp.json()["name"] == "Acme"
    assert resp.json()["service_type"] == "Plumbing"


@pytest.mark.asyncio
async def test_update_clears_optional_fields(client, headers, business):
    resp = await client.patch(
        f"/api/v1/businesses/{business['id']}", headers=headers, json={"phone": None, "email": ""}
    )
    assert resp.status_code == 200
    assert resp.json()["record"]["phone"] is None
    assert resp.json()["record"]["email"] is None
