"""Database engine and session factory, owned by the application instance."""

from typing import Generator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

# Largest value a PostgreSQL INTEGER primary key can hold
MAX_ID = 2**31 - 1


class Base(DeclarativeBase):
    pass


class Database:
    """Engine plus session factory for one application lifetime."""

    def __init__(self, url: str):
        engine_kwargs = {"pool_pre_ping": True}
        if url.startswith("sqlite"):
            engine_kwargs = {"connect_args": {"check_same_thread": False}}
            if url in ("sqlite://", "sqlite:///:memory:"):
                # One shared connection so every session sees the same in-memory db
                engine_kwargs["poolclass"] = StaticPool
        self.engine = create_engine(url, **engine_kwargs)
        self.SessionLocal = sessionmaker(bind=self.engine, autocommit=False, autoflush=False)

    def create_all(self) -> None:
        # Import all models so SQLAlchemy knows about them
        from wedding_api.domain.models import booking, user, vendor, wedding  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request) -> Generator[Session, None, None]:
    """Yield a request-scoped session from the app's database."""
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
