import logging
from typing import Optional

import strawberry
from graphql import GraphQLError
from strawberry.types import ExecutionContext, Info

from homestay.core.errors import HomestayError
from homestay.graphql.context import Context
from homestay.graphql.types import Listing, Listings, ListingsFilter, Viewer
from homestay.services.auth import get_viewer
from homestay.services.listings import delete_listing, get_listing, list_listings

log = logging.getLogger(__name__)


@strawberry.type
class Query:
    @strawberry.field
    async def listing(self, info: Info[Context, None], id: strawberry.ID) -> Listing:
        async with info.context.db_lock:
            item = await get_listing(info.context.db, info.context.request, str(id))
        return Listing.from_authorized(item)

    @strawberry.field
    async def listings(
        self,
        info: Info[Context, None],
        limit: int,
        page: int,
        filter: Optional[ListingsFilter] = None,
    ) -> Listings:
        async with info.context.db_lock:
            data = await list_listings(info.context.db, listings_filter=filter, limit=limit, page=page)
        return Listings(total=data.total, result=[Listing.from_row(r) for r in data.result])

    @strawberry.field
    async def viewer(self, info: Info[Context, None]) -> Viewer:
        async with info.context.db_lock:
            row = await get_viewer(info.context.db, info.context.request)
        return Viewer.from_row(row)


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def delete_listing(self, info: Info[Context, None], id: strawberry.ID) -> Listing:
        async with info.context.db_lock:
            row = await delete_listing(info.context.db, info.context.request, str(id))
        return Listing.from_row(row, authorized=True)


class HomestaySchema(strawberry.Schema):
    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: Optional[ExecutionContext] = None,
    ) -> None:
        unexpected = []
        for error in errors:
            if isinstance(error.original_error, HomestayError):
                # expected request failures, no traceback
                log.info("graphql %s: %s", error.original_error.code, error.message)
            else:
                unexpected.append(error)

        if unexpected:
            super().process_errors(unexpected, execution_context)


schema = HomestaySchema(query=Query, mutation=Mutation)
