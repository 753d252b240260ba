import asyncio

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from strawberry.fastapi import BaseContext

from homestay.core.db import get_db


class Context(BaseContext):
    def __init__(self, db: AsyncSession, request: Request):
        super().__init__()
        self.db = db
        self.request = request
        # sibling resolvers run concurrently but share one AsyncSession
        self.db_lock = asyncio.Lock()


async def get_context(request: Request, db: AsyncSession = Depends(get_db)) -> Context:
    return Context(db=db, request=request)
