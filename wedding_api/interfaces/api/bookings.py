"""Booking API routes — create, my bookings, upcoming."""

from typing import List

from fastapi import APIRouter, Depends, status

from wedding_api.application.services.booking_service import (
    create_booking,
    current_date,
    list_my_bookings,
    list_upcoming_bookings,
)
from wedding_api.config import Settings
from wedding_api.domain.repositories.booking_repository import BookingRepository
from wedding_api.domain.repositories.vendor_repository import VendorRepository
from wedding_api.domain.repositories.wedding_repository import WeddingRepository
from wedding_api.domain.schemas.auth import Identity
from wedding_api.domain.schemas.booking import BookingCreate, BookingRead
from wedding_api.interfaces.api.deps import get_app_settings, get_current_identity
from wedding_api.interfaces.deps import (
    get_booking_repository,
    get_vendor_repository,
    get_wedding_repository,
)

router = APIRouter(prefix="/bookings", tags=["Bookings"])


@router.post("", response_model=BookingRead, status_code=status.HTTP_201_CREATED)
def new_booking(
    body: BookingCreate,
    bookings: BookingRepository = Depends(get_booking_repository),
    weddings: WeddingRepository = Depends(get_wedding_repository),
    vendors: VendorRepository = Depends(get_vendor_repository),
    identity: Identity = Depends(get_current_identity),
):
    return create_booking(bookings, weddings, vendors, identity, body)


@router.get("/my", response_model=List[BookingRead])
def my_bookings(
    repo: BookingRepository = Depends(get_booking_repository),
    identity: Identity = Depends(get_current_identity),
):
    return list_my_bookings(repo, identity)


@router.get("/upcoming", response_model=List[BookingRead])
def upcoming_bookings(
    repo: BookingRepository = Depends(get_booking_repository),
    identity: Identity = Depends(get_current_identity),
    settings: Settings = Depends(get_app_settings),
):
    return list_upcoming_bookings(repo, identity, current_date(settings.TIMEZONE))
