"""
API Dependencies — repositories bound to the request's database session.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from wedding_api.domain.models.booking import Booking
from wedding_api.domain.models.user import User
from wedding_api.domain.models.vendor import Vendor
from wedding_api.domain.models.wedding import Wedding
from wedding_api.domain.repositories.booking_repository import BookingRepository
from wedding_api.domain.repositories.user_repository import UserRepository
from wedding_api.domain.repositories.vendor_repository import VendorRepository
from wedding_api.domain.repositories.wedding_repository import WeddingRepository
from wedding_api.infrastructure.database import get_db
from wedding_api.infrastructure.repositories.booking_repository import SQLAlchemyBookingRepository
from wedding_api.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from wedding_api.infrastructure.repositories.vendor_repository import SQLAlchemyVendorRepository
from wedding_api.infrastructure.repositories.wedding_repository import SQLAlchemyWeddingRepository


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    return SQLAlchemyUserRepository(db, User)


def get_vendor_repository(db: Session = Depends(get_db)) -> VendorRepository:
    return SQLAlchemyVendorRepository(db, Vendor)


def get_wedding_repository(db: Session = Depends(get_db)) -> WeddingRepository:
    return SQLAlchemyWeddingRepository(db, Wedding)


def get_booking_repository(db: Session = Depends(get_db)) -> BookingRepository:
    return SQLAlchemyBookingRepository(db, Booking)
