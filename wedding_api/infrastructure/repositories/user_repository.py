"""
SQLAlchemy Implementation of User Repository.
"""

from typing import Optional

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError

from wedding_api.core.exceptions import AppError, DuplicateEmailError, InvalidRoleError
from wedding_api.domain.models.user import User
from wedding_api.domain.repositories.user_repository import UserRepository
from wedding_api.infrastructure.repositories.base_repository import SQLAlchemyRepository

_UPSERT_DIALECTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def translate_integrity_error(exc: IntegrityError) -> Optional[AppError]:
    """Map a constraint violation on the users table to its error kind."""
    message = str(exc.orig)
    if "ck_users_role" in message:
        return InvalidRoleError()
    if getattr(exc.orig, "pgcode", None) == "23505" or "UNIQUE constraint failed" in message:
        return DuplicateEmailError()
    return None


class SQLAlchemyUserRepository(SQLAlchemyRepository[User], UserRepository):
    """User repository implementation using SQLAlchemy."""

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email.strip().lower()).first()

    def create_password_user(
        self, name: str, email: str, password_hash: str, role: Optional[str]
    ) -> User:
        user = User(
            name=name,
            email=email.strip().lower(),
            password_hash=password_hash,
            role=role,
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            error = translate_integrity_error(exc)
            if error is None:
                raise
            raise error from exc
        self.db.refresh(user)
        return user

    def upsert_federated(
        self, auth_id: str, email: Optional[str], name: Optional[str], role: Optional[str]
    ) -> User:
        dialect = self.db.get_bind().dialect.name
        insert = _UPSERT_DIALECTS.get(dialect)
        if insert is None:
            raise NotImplementedError(f"Upsert not supported for dialect {dialect!r}")

        stmt = insert(User).values(
            auth_id=auth_id,
            email=email.strip().lower() if email else None,
            name=name,
            role=role,
        )
        # Role is left out of the update so a returning user keeps it
        stmt = stmt.on_conflict_do_update(
            index_elements=[User.auth_id],
            set_={"email": stmt.excluded.email, "name": stmt.excluded.name},
        ).returning(User.id)

        try:
            user_id = self.db.execute(stmt).scalar_one()
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            error = translate_integrity_error(exc)
            if error is None:
                raise
            raise error from exc
        return self.db.get(User, user_id, populate_existing=True)
