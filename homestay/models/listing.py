from sqlalchemy import Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from homestay.core.ids import gen_id

from homestay.models.base import Base, AuditMixin, JSONType


class Listing(AuditMixin, Base):
    __tablename__ = "listings"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=lambda: gen_id("lst"))

    title: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    image: Mapped[str] = mapped_column(Text, nullable=False)
    address: Mapped[str] = mapped_column(String(300), nullable=False)
    country: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    city: Mapped[str] = mapped_column(String(100), nullable=False, default="")

    # minor units (cents)
    price: Mapped[int] = mapped_column(Integer, nullable=False, index=True)

    num_of_guests: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    num_of_beds: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    num_of_baths: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    rating: Mapped[float] = mapped_column(Float, nullable=False, default=0)

    # users.id of the owner; integrity is checked when the host field is read
    host: Mapped[str] = mapped_column(String, nullable=False, index=True)

    # ordered booking ids
    bookings: Mapped[list] = mapped_column(JSONType, nullable=False, default=list)

    # {"2024": {"0": {"14": true}}} year -> month -> day -> booked
    bookings_index: Mapped[dict] = mapped_column(JSONType, nullable=False, default=dict)
