"""Booking service — links a caller's wedding to an approved vendor."""

from datetime import date, datetime
from typing import List

import pytz
import structlog

from wedding_api.application.services.authorization import (
    require_approved_vendor,
    require_owned_wedding,
)
from wedding_api.domain.models.booking import Booking
from wedding_api.domain.repositories.booking_repository import BookingRepository
from wedding_api.domain.repositories.vendor_repository import VendorRepository
from wedding_api.domain.repositories.wedding_repository import WeddingRepository
from wedding_api.domain.schemas.auth import Identity
from wedding_api.domain.schemas.booking import BookingCreate

logger = structlog.get_logger(__name__)


def current_date(timezone_name: str) -> date:
    """Get current date in the configured timezone."""
    return datetime.now(pytz.timezone(timezone_name)).date()


def create_booking(
    bookings: BookingRepository,
    weddings: WeddingRepository,
    vendors: VendorRepository,
    identity: Identity,
    data: BookingCreate,
) -> Booking:
    """Wedding must belong to the caller and the vendor must be approved."""
    wedding = require_owned_wedding(weddings, identity, data.wedding_id)
    vendor = require_approved_vendor(vendors, data.vendor_id)

    booking = bookings.create(
        {"wedding_id": wedding.id, "vendor_id": vendor.id, "price": data.price, "status": "pending"}
    )
    logger.info("Booking created", booking_id=booking.id, wedding_id=wedding.id, vendor_id=vendor.id)
    return booking


def list_my_bookings(repo: BookingRepository, identity: Identity) -> List[Booking]:
    return repo.list_for_owner(identity.user_id)


def list_upcoming_bookings(repo: BookingRepository, identity: Identity, today: date) -> List[Booking]:
    return repo.list_upcoming_for_owner(identity.user_id, today)
