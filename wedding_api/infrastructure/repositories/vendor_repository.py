"""
SQLAlchemy Implementation of Vendor Repository.
"""

from typing import List, Optional

from sqlalchemy import func

from wedding_api.domain.models.booking import Booking
from wedding_api.domain.models.vendor import Vendor
from wedding_api.domain.repositories.vendor_repository import VendorRepository
from wedding_api.domain.schemas.vendor import VendorFilter
from wedding_api.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyVendorRepository(SQLAlchemyRepository[Vendor], VendorRepository):
    """Vendor repository implementation using SQLAlchemy."""

    def get_approved(self, vendor_id: int) -> Optional[Vendor]:
        return (
            self.db.query(Vendor)
            .filter(Vendor.id == vendor_id, Vendor.is_approved.is_(True))
            .first()
        )

    def list_approved(self, filters: VendorFilter) -> List[Vendor]:
        query = self.db.query(Vendor).filter(Vendor.is_approved.is_(True))

        if filters.category:
            query = query.filter(func.lower(Vendor.category) == filters.category.strip().lower())
        if filters.q:
            query = query.filter(Vendor.business_name.ilike(f"%{filters.q.strip()}%"))

        return query.order_by(Vendor.id.desc()).all()

    def list_top(self, limit: int = 5) -> List[Vendor]:
        booking_count = func.count(Booking.id)
        return (
            self.db.query(Vendor)
            .outerjoin(Booking, Booking.vendor_id == Vendor.id)
            .filter(Vendor.is_approved.is_(True))
            .group_by(Vendor.id)
            .order_by(booking_count.desc(), Vendor.id.asc())
            .limit(limit)
            .all()
        )
