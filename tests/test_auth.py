import pytest

from homestay.services.auth import authorize
from tests.fixtures_seed import GUEST_TOKEN, HOST_TOKEN, make_request


@pytest.mark.asyncio
async def test_token_from_header(db_session, seed_host):
    viewer = await authorize(db_session, make_request(headers={"X-CSRF-TOKEN": HOST_TOKEN}))
    assert viewer is not None
    assert viewer.id == seed_host.id


@pytest.mark.asyncio
async def test_token_from_cookie(db_session, seed_guest):
    viewer = await authorize(db_session, make_request(cookies={"viewer_token": GUEST_TOKEN}))
    assert viewer is not None
    assert viewer.id == seed_guest.id


@pytest.mark.asyncio
async def test_header_wins_over_cookie(db_session, seed_host, seed_guest):
    request = make_request(headers={"X-CSRF-TOKEN": HOST_TOKEN}, cookies={"viewer_token": GUEST_TOKEN})
    viewer = await authorize(db_session, request)
    assert viewer.id == seed_host.id


@pytest.mark.asyncio
@pytest.mark.parametrize("headers", [{}, {"X-CSRF-TOKEN": ""}, {"X-CSRF-TOKEN": "   "}, {"X-CSRF-TOKEN": "nope"}])
async def test_no_viewer_is_not_an_error(db_session, seed_host, headers):
    assert await authorize(db_session, make_request(headers=headers)) is None


@pytest.mark.asyncio
async def test_viewer_cookie_must_match_token(db_session, seed_host, seed_guest):
    matching = make_request(headers={"X-CSRF-TOKEN": HOST_TOKEN}, cookies={"viewer": seed_host.id})
    mismatched = make_request(headers={"X-CSRF-TOKEN": HOST_TOKEN}, cookies={"viewer": seed_guest.id})

    assert (await authorize(db_session, matching)).id == seed_host.id
    assert await authorize(db_session, mismatched) is None


@pytest.mark.asyncio
async def test_blank_header_falls_back_to_cookie(db_session, seed_guest):
    request = make_request(headers={"X-CSRF-TOKEN": "   "}, cookies={"viewer_token": GUEST_TOKEN})
    viewer = await authorize(db_session, request)
    assert viewer is not None
    assert viewer.id == seed_guest.id
