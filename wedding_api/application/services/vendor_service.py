"""Vendor service — public catalogue reads, profile creation, approval."""

from typing import List

import structlog

from wedding_api.application.services.authorization import require_role
from wedding_api.core.exceptions import EntityNotFoundException
from wedding_api.domain.models.vendor import Vendor
from wedding_api.domain.repositories.vendor_repository import VendorRepository
from wedding_api.domain.schemas.auth import Identity
from wedding_api.domain.schemas.vendor import VendorCreate, VendorFilter

logger = structlog.get_logger(__name__)


def list_vendors(repo: VendorRepository, filters: VendorFilter) -> List[Vendor]:
    return repo.list_approved(filters)


def get_top_vendors(repo: VendorRepository, limit: int = 5) -> List[Vendor]:
    return repo.list_top(limit)


def get_vendor(repo: VendorRepository, vendor_id: int) -> Vendor:
    vendor = repo.get_approved(vendor_id)
    if vendor is None:
        raise EntityNotFoundException("Vendor not found")
    return vendor


def create_vendor(repo: VendorRepository, identity: Identity, data: VendorCreate) -> Vendor:
    """New vendor profiles start unapproved."""
    vendor = repo.create({**data.model_dump(), "owner_id": identity.user_id, "is_approved": False})
    logger.info("Vendor created", vendor_id=vendor.id, owner_id=identity.user_id)
    return vendor


def approve_vendor(repo: VendorRepository, identity: Identity, vendor_id: int) -> Vendor:
    require_role(identity, "admin")
    vendor = repo.get_by_id(vendor_id)
    if vendor is None:
        raise EntityNotFoundException("Vendor not found")
    vendor = repo.update(vendor, {"is_approved": True})
    logger.info("Vendor approved", vendor_id=vendor.id, approved_by=identity.user_id)
    return vendor
