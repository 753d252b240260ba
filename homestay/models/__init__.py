from homestay.models.base import Base  # noqa: F401

from homestay.models.user import User  # noqa: F401
from homestay.models.listing import Listing  # noqa: F401
from homestay.models.booking import Booking  # noqa: F401
