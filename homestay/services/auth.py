import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.requests import Request

from homestay.core.config import settings
from homestay.core.errors import QueryFailed
from homestay.models.user import User

log = logging.getLogger(__name__)


def session_token(request: Request) -> str | None:
    # a blank header falls through to the cookie
    header = (request.headers.get(settings.session_header) or "").strip()
    cookie = (request.cookies.get(settings.session_cookie) or "").strip()
    return header or cookie or None


async def authorize(db: AsyncSession, request: Request) -> User | None:
    """
    Resolve the viewer behind the request's session token.
    Returns None when there is no token or it matches no user; that is the
    normal anonymous case, not an error. Store errors propagate to the caller.
    """
    token = session_token(request)
    if token is None:
        return None

    stmt = select(User).where(User.token == token)

    # when the client also sends its viewer cookie it has to agree with the token
    viewer_id = request.cookies.get(settings.viewer_cookie)
    if viewer_id:
        stmt = stmt.where(User.id == viewer_id)

    viewer = (await db.execute(stmt)).scalars().first()
    if viewer is None:
        log.debug("session token did not match any user")
    return viewer


async def get_viewer(db: AsyncSession, request: Request) -> User | None:
    try:
        return await authorize(db, request)
    except SQLAlchemyError as e:
        log.exception("viewer query failed")
        raise QueryFailed(f"Failed to query viewer: {e}") from e
