"""Pydantic schemas for Wedding domain."""

import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict


class WeddingCreate(BaseModel):
    title: Optional[str] = None
    date: Optional[dt.date] = None
    venue: Optional[str] = None


class WeddingRead(BaseModel):
    id: int
    title: Optional[str] = None
    date: Optional[dt.date] = None
    venue: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[dt.datetime] = None

    model_config = ConfigDict(from_attributes=True)


class WeddingSummary(BaseModel):
    id: int
    title: Optional[str] = None
    date: Optional[dt.date] = None
    venue: Optional[str] = None
    status: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
