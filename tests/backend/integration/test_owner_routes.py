import pytest

from storerating.services.ratings import upsert_rating


pytestmark = pytest.mark.asyncio


async def test_dashboard_without_store(client, create_owner, auth_header_factory):
    owner, password = await create_owner()
    headers = await auth_header_factory(owner.email, password)

    resp = await client.get("/api/owner/dashboard", headers=headers)
    assert resp.status_code == 200
    assert resp.json() == {"store": None, "averageRating": 0, "totalRatings": 0, "ratings": []}


async def test_dashboard_lists_raters_newest_first(client, create_store, create_user, auth_header_factory):
    store, owner = await create_store()
    alice, _ = await create_user(name="Alice Abernathy Longname")
    bob, _ = await create_user(name="Bob Bartholomew Longname")
    await upsert_rating(alice.id, store.id, 3)
    await upsert_rating(bob.id, store.id, 5)

    headers = await auth_header_factory(owner.email)
    resp = await client.get("/api/owner/dashboard", headers=headers)
    assert resp.status_code == 200
    body = resp.json()

    assert body["store"]["id"] == store.id
    assert body["averageRating"] == pytest.approx(4.0)
    assert body["totalRatings"] == 2
    assert [r["user"]["email"] for r in body["ratings"]] == [bob.email, alice.email]
    assert body["ratings"][0]["user"]["name"] == bob.name
    assert body["ratings"][0]["rating"] == 5
    assert "password" not in body["ratings"][0]["user"]
