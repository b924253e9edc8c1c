"""
SQLAlchemy Implementation of Booking Repository.
"""

from datetime import date
from typing import List

from wedding_api.domain.models.booking import Booking
from wedding_api.domain.models.wedding import Wedding
from wedding_api.domain.repositories.booking_repository import BookingRepository
from wedding_api.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyBookingRepository(SQLAlchemyRepository[Booking], BookingRepository):
    """Booking repository implementation using SQLAlchemy."""

    def list_for_owner(self, owner_id: int) -> List[Booking]:
        return (
            self.db.query(Booking)
            .join(Wedding, Booking.wedding_id == Wedding.id)
            .filter(Wedding.owner_id == owner_id)
            .order_by(Booking.id.desc())
            .all()
        )

    def list_upcoming_for_owner(self, owner_id: int, today: date) -> List[Booking]:
        return (
            self.db.query(Booking)
            .join(Wedding, Booking.wedding_id == Wedding.id)
            .filter(
                Wedding.owner_id == owner_id,
                Wedding.date.isnot(None),
                Wedding.date >= today,
                Booking.status != "cancelled",
            )
            .order_by(Wedding.date.asc(), Booking.id.asc())
            .all()
        )
