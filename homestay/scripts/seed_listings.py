import asyncio
import secrets

from sqlalchemy import select
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker

from homestay.core.config import settings
from homestay.models.base import Base
from homestay.models.listing import Listing
from homestay.models.user import User

DEMO_HOST_ID = "usr_demo_host"

DEMO_LISTINGS = [
    {
        "title": "Clean and fully furnished apartment. 5 min away from CN Tower",
        "image": "https://res.cloudinary.com/tiny-house/image/upload/v1560641352/mock/Toronto/toronto-listing-1_exv0tf.jpg",
        "address": "3210 Scotchmere Dr W, Toronto, ON, CA",
        "country": "Canada",
        "city": "Toronto",
        "price": 10000,
        "num_of_guests": 2,
        "num_of_beds": 1,
        "num_of_baths": 2,
        "rating": 5,
    },
    {
        "title": "Luxurious home with private pool",
        "image": "https://res.cloudinary.com/tiny-house/image/upload/v1560645376/mock/Los%20Angeles/los-angeles-listing-1_aikhx7.jpg",
        "address": "100 Hollywood Hills Dr, Los Angeles, California",
        "country": "United States",
        "city": "Los Angeles",
        "price": 15000,
        "num_of_guests": 2,
        "num_of_beds": 1,
        "num_of_baths": 1,
        "rating": 4,
    },
    {
        "title": "Single bedroom located in the heart of downtown San Fransisco",
        "image": "https://res.cloudinary.com/tiny-house/image/upload/v1560646219/mock/San%20Fransisco/san-fransisco-listing-1_qzntl4.jpg",
        "address": "200 Sunnyside Rd, San Fransisco, California",
        "country": "United States",
        "city": "San Fransisco",
        "price": 25000,
        "num_of_guests": 3,
        "num_of_beds": 2,
        "num_of_baths": 2,
        "rating": 3,
    },
]


async def main():
    engine = create_async_engine(settings.database_url, pool_pre_ping=True)
    Session = async_sessionmaker(engine, expire_on_commit=False)

    if settings.env == "dev":
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async with Session() as db:
        host = await db.get(User, DEMO_HOST_ID)
        if host:
            print("Demo data already present")
        else:
            token = secrets.token_hex(16)
            host = User(
                id=DEMO_HOST_ID,
                token=token,
                name="James J.",
                avatar="https://res.cloudinary.com/tiny-house/image/upload/w_1000,ar_1:1,c_fill,g_auto/v1560648533/mock/users/user-profile-1_mawp12.jpg",
                contact="james@tinyhouse.com",
            )
            listings = [Listing(host=DEMO_HOST_ID, **data) for data in DEMO_LISTINGS]
            db.add(host)
            db.add_all(listings)
            await db.flush()
            host.listings = [listing.id for listing in listings]
            await db.commit()

            count = len((await db.execute(select(Listing.id))).scalars().all())
            print(f"Seeded demo host (session token {token}); {count} listings in store")

    await engine.dispose()

if __name__ == "__main__":
    asyncio.run(main())
