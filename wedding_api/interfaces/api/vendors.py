"""Vendor API routes — approved catalogue, top vendors, profile creation, approval."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, status

from wedding_api.application.services.vendor_service import (
    approve_vendor,
    create_vendor,
    get_top_vendors,
    get_vendor,
    list_vendors,
)
from wedding_api.domain.repositories.vendor_repository import VendorRepository
from wedding_api.domain.schemas.auth import Identity
from wedding_api.domain.schemas.vendor import VendorCreate, VendorFilter, VendorRead
from wedding_api.infrastructure.database import MAX_ID
from wedding_api.interfaces.api.deps import get_current_identity
from wedding_api.interfaces.deps import get_vendor_repository

router = APIRouter(prefix="/vendors", tags=["Vendors"])


@router.get("", response_model=List[VendorRead])
def list_approved_vendors(
    category: Optional[str] = None,
    q: Optional[str] = None,
    repo: VendorRepository = Depends(get_vendor_repository),
):
    return list_vendors(repo, VendorFilter(category=category, q=q))


@router.get("/top", response_model=List[VendorRead])
def top_vendors(
    limit: int = Query(5, ge=1, le=50),
    repo: VendorRepository = Depends(get_vendor_repository),
):
    return get_top_vendors(repo, limit)


@router.get("/{vendor_id}", response_model=VendorRead)
def vendor_detail(
    vendor_id: int = Path(ge=1, le=MAX_ID),
    repo: VendorRepository = Depends(get_vendor_repository),
):
    return get_vendor(repo, vendor_id)


@router.post("", response_model=VendorRead, status_code=status.HTTP_201_CREATED)
def create_vendor_profile(
    body: VendorCreate,
    repo: VendorRepository = Depends(get_vendor_repository),
    identity: Identity = Depends(get_current_identity),
):
    return create_vendor(repo, identity, body)


@router.post("/{vendor_id}/approve", response_model=VendorRead)
def approve(
    vendor_id: int = Path(ge=1, le=MAX_ID),
    repo: VendorRepository = Depends(get_vendor_repository),
    identity: Identity = Depends(get_current_identity),
):
    return approve_vendor(repo, identity, vendor_id)
