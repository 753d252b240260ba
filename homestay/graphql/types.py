import json
from typing import Optional

import strawberry
from strawberry.types import Info

from homestay.graphql.context import Context
from homestay.models.booking import Booking as BookingRow
from homestay.models.listing import Listing as ListingRow
from homestay.models.user import User as UserRow
from homestay.schemas.listing import ListingsFilter as ListingsFilterValue
from homestay.services.bookings import list_bookings_by_ids
from homestay.services.listings import AuthorizedListing, get_listing_host


ListingsFilter = strawberry.enum(ListingsFilterValue, name="ListingsFilter")


@strawberry.type
class User:
    id: strawberry.ID
    name: str
    avatar: str
    contact: str
    has_wallet: bool

    @classmethod
    def from_row(cls, row: UserRow) -> "User":
        return cls(
            id=strawberry.ID(row.id),
            name=row.name,
            avatar=row.avatar,
            contact=row.contact,
            has_wallet=bool(row.wallet_id),
        )


@strawberry.type
class Viewer:
    id: Optional[strawberry.ID] = None
    avatar: Optional[str] = None
    has_wallet: Optional[bool] = None
    did_request: bool = True

    @classmethod
    def from_row(cls, row: UserRow | None) -> "Viewer":
        if row is None:
            return cls()
        return cls(id=strawberry.ID(row.id), avatar=row.avatar, has_wallet=bool(row.wallet_id))


@strawberry.type
class Booking:
    id: strawberry.ID
    listing: strawberry.ID
    tenant: strawberry.ID
    check_in: str
    check_out: str

    @classmethod
    def from_row(cls, row: BookingRow) -> "Booking":
        return cls(
            id=strawberry.ID(row.id),
            listing=strawberry.ID(row.listing),
            tenant=strawberry.ID(row.tenant),
            check_in=row.check_in,
            check_out=row.check_out,
        )


@strawberry.type
class Bookings:
    total: int
    result: list[Booking]


@strawberry.type
class Listing:
    title: str
    description: str
    image: str
    address: str
    country: str
    city: str
    price: int
    num_of_guests: int
    num_of_beds: int
    num_of_baths: int
    rating: float

    row: strawberry.Private[ListingRow]
    # request-scoped: true only when the viewer hosts this listing
    authorized: strawberry.Private[bool] = False

    @classmethod
    def from_row(cls, row: ListingRow, *, authorized: bool = False) -> "Listing":
        return cls(
            title=row.title,
            description=row.description,
            image=row.image,
            address=row.address,
            country=row.country,
            city=row.city,
            price=row.price,
            num_of_guests=row.num_of_guests,
            num_of_beds=row.num_of_beds,
            num_of_baths=row.num_of_baths,
            rating=row.rating,
            row=row,
            authorized=authorized,
        )

    @classmethod
    def from_authorized(cls, item: AuthorizedListing) -> "Listing":
        return cls.from_row(item.listing, authorized=item.authorized)

    @strawberry.field
    def id(self) -> strawberry.ID:
        return strawberry.ID(str(self.row.id))

    @strawberry.field
    async def host(self, info: Info[Context, None]) -> User:
        async with info.context.db_lock:
            row = await get_listing_host(info.context.db, self.row.host)
        return User.from_row(row)

    @strawberry.field
    def bookings_index(self) -> str:
        return json.dumps(self.row.bookings_index or {})

    @strawberry.field
    async def bookings(self, info: Info[Context, None], limit: int, page: int) -> Optional[Bookings]:
        # only the host sees who booked; everyone else gets null, not an error
        if not self.authorized:
            return None

        async with info.context.db_lock:
            data = await list_bookings_by_ids(
                info.context.db,
                booking_ids=list(self.row.bookings or []),
                limit=limit,
                page=page,
            )
        return Bookings(total=data.total, result=[Booking.from_row(b) for b in data.result])


@strawberry.type
class Listings:
    total: int
    result: list[Listing]
