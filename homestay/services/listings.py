from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.requests import Request

from homestay.core.errors import HostNotFound, NotAuthorized, NotFound, QueryFailed
from homestay.models.listing import Listing
from homestay.models.user import User
from homestay.schemas.listing import ListingsFilter
from homestay.services.auth import authorize
from homestay.services.pagination import Page, page_offset, require_positive_limit

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthorizedListing:
    """A fetched listing plus whether the requesting viewer is its host."""

    listing: Listing
    authorized: bool = False


async def get_listing(db: AsyncSession, request: Request, listing_id: str) -> AuthorizedListing:
    """
    Fetch one listing and decide whether the viewer may see its bookings.
    The flag travels next to the row; the row itself is left untouched.
    """
    try:
        listing = await db.get(Listing, listing_id)
        if listing is None:
            raise NotFound("listing can't be found")

        viewer = await authorize(db, request)
    except SQLAlchemyError as e:
        log.exception("listing query failed id=%s", listing_id)
        raise QueryFailed(f"Failed to query listing: {e}") from e

    authorized = viewer is not None and viewer.id == listing.host
    return AuthorizedListing(listing=listing, authorized=authorized)


def _sorted(stmt, listings_filter: ListingsFilter | None):
    # id as tie-breaker so both price orders are exact mirrors of each other
    if listings_filter == ListingsFilter.PRICE_LOW_TO_HIGH:
        return stmt.order_by(Listing.price.asc(), Listing.id.asc())
    if listings_filter == ListingsFilter.PRICE_HIGH_TO_LOW:
        return stmt.order_by(Listing.price.desc(), Listing.id.desc())
    # no price filter: keep pages stable across OFFSET/LIMIT reads
    return stmt.order_by(Listing.id.asc())


async def list_listings(
    db: AsyncSession,
    *,
    listings_filter: ListingsFilter | None,
    limit: int,
    page: int,
) -> Page[Listing]:
    require_positive_limit(limit)

    stmt = _sorted(select(Listing), listings_filter)
    stmt = stmt.offset(page_offset(page=page, limit=limit)).limit(limit)

    try:
        # total covers the whole collection, not just the requested page
        total = (await db.execute(select(func.count()).select_from(Listing))).scalar_one()
        rows = (await db.execute(stmt)).scalars().all()
    except SQLAlchemyError as e:
        log.exception("listings query failed filter=%s limit=%s page=%s", listings_filter, limit, page)
        raise QueryFailed(f"Failed to query listings: {e}") from e

    log.debug("listings: %d of %d (filter=%s page=%s)", len(rows), total, listings_filter, page)
    return Page(total=total, result=list(rows))


async def get_listing_host(db: AsyncSession, host_id: str) -> User:
    try:
        host = await db.get(User, host_id)
    except SQLAlchemyError as e:
        log.exception("host query failed id=%s", host_id)
        raise QueryFailed(f"Failed to query listing host: {e}") from e

    if host is None:
        log.warning("listing references missing host id=%s", host_id)
        raise HostNotFound("host can't be found")
    return host


async def delete_listing(db: AsyncSession, request: Request, listing_id: str) -> Listing:
    """
    Remove a listing owned by the viewer and drop it from the host's listing ids.
    Only the host may delete; anyone else gets NotAuthorized.
    """
    try:
        listing = await db.get(Listing, listing_id)
        if listing is None:
            raise NotFound("listing can't be found")

        viewer = await authorize(db, request)
        if viewer is None or viewer.id != listing.host:
            raise NotAuthorized("viewer is not the host of this listing")

        # reassign so the JSON column is flagged dirty
        viewer.listings = [lid for lid in viewer.listings if lid != listing.id]
        await db.delete(listing)
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        log.exception("listing delete failed id=%s", listing_id)
        raise QueryFailed(f"Failed to delete listing: {e}") from e

    log.info("listing deleted id=%s host=%s", listing.id, listing.host)
    return listing
