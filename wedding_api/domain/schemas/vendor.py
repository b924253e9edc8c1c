"""Pydantic schemas for Vendor domain."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class VendorCreate(BaseModel):
    business_name: str = Field(min_length=1, max_length=300)
    category: Optional[str] = None
    description: Optional[str] = None


class VendorRead(BaseModel):
    id: int
    owner_id: Optional[int] = None
    business_name: str
    category: Optional[str] = None
    description: Optional[str] = None
    is_approved: bool
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class VendorSummary(BaseModel):
    id: int
    business_name: str
    category: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class VendorFilter(BaseModel):
    category: Optional[str] = None
    q: Optional[str] = None
