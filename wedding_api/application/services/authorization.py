"""Ownership and role checks shared by the resource services."""

from wedding_api.core.exceptions import (
    BusinessRuleViolationException,
    EntityNotFoundException,
    ForbiddenException,
)
from wedding_api.domain.models.vendor import Vendor
from wedding_api.domain.models.wedding import Wedding
from wedding_api.domain.repositories.vendor_repository import VendorRepository
from wedding_api.domain.repositories.wedding_repository import WeddingRepository
from wedding_api.domain.schemas.auth import Identity


def require_role(identity: Identity, *roles: str) -> None:
    if identity.role not in roles:
        raise ForbiddenException()


def require_owned_wedding(repo: WeddingRepository, identity: Identity, wedding_id: int) -> Wedding:
    wedding = repo.get_by_id(wedding_id)
    if wedding is None:
        raise EntityNotFoundException("Wedding not found")
    if wedding.owner_id != identity.user_id:
        raise ForbiddenException("Wedding belongs to another user")
    return wedding


def require_approved_vendor(repo: VendorRepository, vendor_id: int) -> Vendor:
    vendor = repo.get_by_id(vendor_id)
    if vendor is None:
        raise EntityNotFoundException("Vendor not found")
    if not vendor.is_approved:
        raise BusinessRuleViolationException("Vendor is not approved")
    return vendor
