"""
Booking Repository Interface.
"""

from datetime import date
from typing import List

from wedding_api.domain.models.booking import Booking
from wedding_api.domain.repositories.base import BaseRepository


class BookingRepository(BaseRepository[Booking]):
    """Interface for Booking-specific operations."""

    def list_for_owner(self, owner_id: int) -> List[Booking]:
        """List bookings on the owner's weddings, newest first."""
        ...

    def list_upcoming_for_owner(self, owner_id: int, today: date) -> List[Booking]:
        """List non-cancelled bookings whose wedding date is today or later."""
        ...
