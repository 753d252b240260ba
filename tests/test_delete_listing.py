import pytest
from sqlalchemy import text

from homestay.models.listing import Listing
from tests.fixtures_seed import GUEST_TOKEN, HOST_TOKEN, gql

DELETE_LISTING = """
mutation DeleteListing($id: ID!) {
  deleteListing(id: $id) { id title }
}
"""


@pytest.mark.asyncio
async def test_host_deletes_own_listing(client, db_session, seed_listings):
    listing = seed_listings["listings"][2]
    host = seed_listings["host"]

    body = await gql(client, DELETE_LISTING, {"id": listing.id}, headers={"X-CSRF-TOKEN": HOST_TOKEN})

    assert "errors" not in body
    assert body["data"]["deleteListing"]["id"] == listing.id
    assert await db_session.get(Listing, listing.id) is None
    assert listing.id not in host.listings
    assert len(host.listings) == 2


@pytest.mark.asyncio
@pytest.mark.parametrize("headers", [{}, {"X-CSRF-TOKEN": GUEST_TOKEN}])
async def test_only_host_may_delete(client, db_session, seed_listings, headers):
    listing = seed_listings["listings"][0]

    body = await gql(client, DELETE_LISTING, {"id": listing.id}, headers=headers)

    assert body["data"] is None
    assert body["errors"][0]["extensions"]["code"] == "NOT_AUTHORIZED"
    assert await db_session.get(Listing, listing.id) is not None


@pytest.mark.asyncio
async def test_delete_missing_listing(client, seed_listings):
    body = await gql(client, DELETE_LISTING, {"id": "lst_missing"}, headers={"X-CSRF-TOKEN": HOST_TOKEN})
    assert body["errors"][0]["extensions"]["code"] == "NOT_FOUND"


@pytest.mark.asyncio
async def test_delete_store_error_is_query_failed(client, db_session, seed_listings):
    listing = seed_listings["listings"][0]
    await db_session.execute(text("DROP TABLE users"))

    body = await gql(client, DELETE_LISTING, {"id": listing.id}, headers={"X-CSRF-TOKEN": HOST_TOKEN})

    assert body["data"] is None
    error = body["errors"][0]
    assert error["extensions"]["code"] == "QUERY_FAILED"
    assert error["message"].startswith("Failed to delete listing:")
