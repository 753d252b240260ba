from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from homestay.core.ids import gen_id

from homestay.models.base import Base, AuditMixin


class Booking(AuditMixin, Base):
    __tablename__ = "bookings"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=lambda: gen_id("bkg"))

    listing: Mapped[str] = mapped_column(String, nullable=False, index=True)
    tenant: Mapped[str] = mapped_column(String, nullable=False, index=True)

    # ISO dates, e.g. "2024-01-14"
    check_in: Mapped[str] = mapped_column(String(10), nullable=False)
    check_out: Mapped[str] = mapped_column(String(10), nullable=False)
