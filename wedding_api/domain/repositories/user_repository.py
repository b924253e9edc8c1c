"""
User Repository Interface.
The credential store's persistence contract.
"""

from typing import Optional

from wedding_api.domain.models.user import User
from wedding_api.domain.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Interface for User-specific operations."""

    def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by lower-cased email."""
        ...

    def create_password_user(
        self, name: str, email: str, password_hash: str, role: Optional[str]
    ) -> User:
        """Insert a password account. Raises DuplicateEmailError or InvalidRoleError."""
        ...

    def upsert_federated(
        self, auth_id: str, email: Optional[str], name: Optional[str], role: Optional[str]
    ) -> User:
        """Insert or update a federated account keyed by auth_id, keeping its role."""
        ...
