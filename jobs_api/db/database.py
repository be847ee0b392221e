# jobs-api\jobs_api\db\database.py

import logging
from typing import Generator # Generator type hint for the dependency

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session

from jobs_api.core.config import settings
from jobs_api.db.models import Base

logger = logging.getLogger(__name__)


def build_engine(database_url: str) -> Engine:
    """Creates an engine for the given URL, with the SQLite tweaks FastAPI needs."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        # Sync endpoints run in a threadpool, so SQLite connections cross threads
        connect_args["check_same_thread"] = False
    return create_engine(database_url, connect_args=connect_args, pool_pre_ping=True)


# Engine and session factory for the configured database
engine = build_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind: Engine = engine) -> None:
    """Creates any missing tables."""
    Base.metadata.create_all(bind=bind)
    logger.info("Database tables are in place.")


# Dependency to get a database session, one per request
def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db # Provide the session to the endpoint
    finally:
        db.close() # Always close it afterwards
