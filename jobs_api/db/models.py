# jobs-api\jobs_api\db\models.py

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import declarative_base

# Base class for declarative models
Base = declarative_base()


def _new_id() -> str:
    return uuid.uuid4().hex

def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=_new_id)
    name = Column(String(50), nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False)

class Job(Base):
    """
    A job application tracked by a user.
    Every read or write of a job is filtered by created_by, so a job is only
    ever visible to the user who created it.
    """
    __tablename__ = "jobs"

    id = Column(String(32), primary_key=True, default=_new_id)
    company = Column(String(50), nullable=False)
    position = Column(String(100), nullable=False)
    status = Column(String(20), default="pending", nullable=False)

    # Owner id taken from the session token; set on creation and never changed.
    # A plain reference, since token claims are trusted without a user lookup.
    created_by = Column(String, index=True, nullable=False)

    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False)
