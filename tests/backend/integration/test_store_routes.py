import pytest

from storerating.models.rating import Rating


pytestmark = pytest.mark.asyncio


async def test_browse_stores_with_own_rating(client, create_user, create_store, auth_header_factory):
    viewer, password = await create_user()
    other, _ = await create_user()
    rated, _ = await create_store(name="Alpha Hardware and Supplies", address="1 North Avenue")
    unrated, _ = await create_store(name="Beta Books and Stationery", address="2 South Avenue")
    headers = await auth_header_factory(viewer.email, password)

    await client.post("/api/ratings", json={"storeId": rated.id, "rating": 5}, headers=headers)
    other_headers = await auth_header_factory(other.email)
    await client.post("/api/ratings", json={"storeId": rated.id, "rating": 2}, headers=other_headers)

    resp = await client.get("/api/stores", headers=headers)
    assert resp.status_code == 200
    stores = {s["id"]: s for s in resp.json()}
    assert set(stores) == {rated.id, unrated.id}

    assert stores[rated.id]["averageRating"] == pytest.approx(3.5)
    assert stores[rated.id]["totalRatings"] == 2
    assert stores[rated.id]["userRating"] == 5

    assert stores[unrated.id]["averageRating"] == 0
    assert stores[unrated.id]["totalRatings"] == 0
    assert stores[unrated.id]["userRating"] is None

    north = await client.get("/api/stores", params={"address": "NORTH"}, headers=headers)
    assert [s["id"] for s in north.json()] == [rated.id]

    books = await client.get("/api/stores", params={"name": "books"}, headers=headers)
    assert [s["id"] for s in books.json()] == [unrated.id]


async def test_submit_then_change_rating(client, create_user, create_store, auth_header_factory):
    user, password = await create_user()
    store, _ = await create_store()
    headers = await auth_header_factory(user.email, password)

    first = await client.post("/api/ratings", json={"storeId": store.id, "rating": 3}, headers=headers)
    assert first.status_code == 200
    created = first.json()
    assert created["userId"] == user.id
    assert created["storeId"] == store.id
    assert created["rating"] == 3
    assert created["createdAt"] == created["updatedAt"]

    second = await client.post("/api/ratings", json={"storeId": store.id, "rating": 1}, headers=headers)
    assert second.status_code == 200
    updated = second.json()
    assert updated["id"] == created["id"]
    assert updated["rating"] == 1
    assert updated["createdAt"] == created["createdAt"]

    assert await Rating.filter(user_id=user.id, store_id=store.id).count() == 1


@pytest.mark.parametrize("value", [0, 6, 4.5, 4.0, "five", "5", None, True])
async def test_invalid_rating_value_is_rejected(client, create_user, create_store, auth_header_factory, value):
    user, password = await create_user()
    store, _ = await create_store()
    headers = await auth_header_factory(user.email, password)

    resp = await client.post("/api/ratings", json={"storeId": store.id, "rating": value}, headers=headers)
    assert resp.status_code == 400
    assert resp.json()["detail"]["code"] == "VALIDATION_ERROR"
    assert await Rating.all().count() == 0


async def test_rating_for_missing_store(client, create_user, auth_header_factory):
    user, password = await create_user()
    headers = await auth_header_factory(user.email, password)

    resp = await client.post("/api/ratings", json={"storeId": 4040, "rating": 4}, headers=headers)
    assert resp.status_code == 404
    assert resp.json()["detail"]["code"] == "STORE_NOT_FOUND"


async def test_store_id_must_be_a_json_integer(client, create_user, create_store, auth_header_factory):
    user, password = await create_user()
    store, _ = await create_store()
    headers = await auth_header_factory(user.email, password)

    for store_id in (True, str(store.id), float(store.id)):
        resp = await client.post("/api/ratings", json={"storeId": store_id, "rating": 4}, headers=headers)
        assert resp.status_code == 400
        assert resp.json()["detail"]["code"] == "VALIDATION_ERROR"
    assert await Rating.all().count() == 0
