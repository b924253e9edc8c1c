"""Booking domain model — maps to the 'bookings' table."""

from sqlalchemy import CheckConstraint, Column, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from wedding_api.domain.models.vendor import Vendor
from wedding_api.domain.models.wedding import Wedding
from wedding_api.infrastructure.database import Base

BOOKING_STATUSES = ("pending", "confirmed", "cancelled")


class Booking(Base):
    __tablename__ = "bookings"
    __table_args__ = (
        CheckConstraint(
            "status IN (" + ", ".join(f"'{status}'" for status in BOOKING_STATUSES) + ")",
            name="ck_bookings_status",
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    wedding_id = Column(Integer, ForeignKey("weddings.id"), nullable=False, index=True)
    vendor_id = Column(Integer, ForeignKey("vendors.id"), nullable=False, index=True)
    status = Column(String(50), nullable=False, default="pending")
    price = Column(Float, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    wedding = relationship(Wedding, lazy="joined")
    vendor = relationship(Vendor, lazy="joined")

    def __repr__(self):
        return f"<Booking {self.id} wedding={self.wedding_id} vendor={self.vendor_id}>"
