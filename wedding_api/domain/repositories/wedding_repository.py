"""
Wedding Repository Interface.
"""

from typing import List

from wedding_api.domain.models.wedding import Wedding
from wedding_api.domain.repositories.base import BaseRepository


class WeddingRepository(BaseRepository[Wedding]):
    """Interface for Wedding-specific operations."""

    def list_for_owner(self, owner_id: int) -> List[Wedding]:
        """List an owner's weddings ordered by date."""
        ...
