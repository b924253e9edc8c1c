"""
Vendor Repository Interface.
"""

from typing import List, Optional

from wedding_api.domain.models.vendor import Vendor
from wedding_api.domain.repositories.base import BaseRepository
from wedding_api.domain.schemas.vendor import VendorFilter


class VendorRepository(BaseRepository[Vendor]):
    """Interface for Vendor-specific operations."""

    def get_approved(self, vendor_id: int) -> Optional[Vendor]:
        """Get a vendor only if it has been approved."""
        ...

    def list_approved(self, filters: VendorFilter) -> List[Vendor]:
        """List approved vendors, newest first."""
        ...

    def list_top(self, limit: int = 5) -> List[Vendor]:
        """List approved vendors ordered by booking count."""
        ...
