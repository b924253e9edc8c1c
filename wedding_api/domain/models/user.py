"""User domain model — maps to the 'users' table."""

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String
from sqlalchemy.sql import func

from wedding_api.infrastructure.database import Base

ROLES = ("client", "vendor", "admin")


class User(Base):
    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint(
            "role IS NULL OR role IN (" + ", ".join(f"'{role}'" for role in ROLES) + ")",
            name="ck_users_role",
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    auth_id = Column(String(255), unique=True, nullable=True)  # provider:subject
    email = Column(String(255), unique=True, nullable=True, index=True)
    password_hash = Column(String(255), nullable=True)
    name = Column(String(200), nullable=True)
    role = Column(String(50), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<User {self.id} {self.auth_id or self.email}>"
