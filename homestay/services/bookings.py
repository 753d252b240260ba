from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from homestay.core.errors import QueryFailed
from homestay.models.booking import Booking
from homestay.services.pagination import Page, page_offset, require_positive_limit

log = logging.getLogger(__name__)


async def list_bookings_by_ids(
    db: AsyncSession,
    *,
    booking_ids: list[str],
    limit: int,
    page: int,
) -> Page[Booking]:
    require_positive_limit(limit)
    if not booking_ids:
        return Page(total=0)

    matching = Booking.id.in_(booking_ids)
    stmt = (
        select(Booking)
        .where(matching)
        .offset(page_offset(page=page, limit=limit))
        .limit(limit)
    )

    try:
        total = (await db.execute(select(func.count()).select_from(Booking).where(matching))).scalar_one()
        rows = (await db.execute(stmt)).scalars().all()
    except SQLAlchemyError as e:
        log.exception("listing bookings query failed")
        raise QueryFailed(f"Failed to query listing bookings: {e}") from e

    return Page(total=total, result=list(rows))
