"""Wedding domain model — maps to the 'weddings' table."""

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, String
from sqlalchemy.sql import func

from wedding_api.infrastructure.database import Base


class Wedding(Base):
    __tablename__ = "weddings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(300), nullable=True)
    date = Column(Date, nullable=True, index=True)
    venue = Column(String(300), nullable=True)
    status = Column(String(50), nullable=False, default="planning")
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<Wedding {self.id} - {self.title}>"
