"""Pydantic schemas for Booking domain."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from wedding_api.domain.schemas.vendor import VendorSummary
from wedding_api.domain.schemas.wedding import WeddingSummary
from wedding_api.infrastructure.database import MAX_ID


class BookingCreate(BaseModel):
    wedding_id: int = Field(ge=1, le=MAX_ID)
    vendor_id: int = Field(ge=1, le=MAX_ID)
    price: Optional[float] = Field(default=None, ge=0)


class BookingRead(BaseModel):
    id: int
    wedding_id: Optional[int] = None
    vendor_id: Optional[int] = None
    status: str
    price: Optional[float] = None
    created_at: Optional[datetime] = None
    wedding: Optional[WeddingSummary] = None
    vendor: Optional[VendorSummary] = None

    model_config = ConfigDict(from_attributes=True)
