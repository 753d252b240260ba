from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from homestay.core.ids import gen_id

from homestay.models.base import Base, AuditMixin, JSONType


class User(AuditMixin, Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=lambda: gen_id("usr"))

    # current session token, cleared on log out
    token: Mapped[str | None] = mapped_column(String(200), nullable=True, index=True)

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    avatar: Mapped[str] = mapped_column(Text, nullable=False, default="")
    contact: Mapped[str] = mapped_column(String(320), nullable=False)

    wallet_id: Mapped[str | None] = mapped_column(String(200), nullable=True)
    income: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    listings: Mapped[list] = mapped_column(JSONType, nullable=False, default=list)
    bookings: Mapped[list] = mapped_column(JSONType, nullable=False, default=list)
