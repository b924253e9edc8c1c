"""
SQLAlchemy Implementation of Wedding Repository.
"""

from typing import List

from wedding_api.domain.models.wedding import Wedding
from wedding_api.domain.repositories.wedding_repository import WeddingRepository
from wedding_api.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyWeddingRepository(SQLAlchemyRepository[Wedding], WeddingRepository):
    """Wedding repository implementation using SQLAlchemy."""

    def list_for_owner(self, owner_id: int) -> List[Wedding]:
        return (
            self.db.query(Wedding)
            .filter(Wedding.owner_id == owner_id)
            .order_by(Wedding.date.asc().nullslast(), Wedding.id.asc())
            .all()
        )
