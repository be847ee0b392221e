# jobs-api\jobs_api\services\crud_jobs.py

import logging
from typing import Any, List

from sqlalchemy.orm import Session

from jobs_api.core.errors import BadRequestError, NotFoundError
from jobs_api.db.models import Job
from jobs_api.schemas.job import JobCreate, JobUpdate, JobStatus
from jobs_api.services.validation import neutralise_markup, validate_job_fields

logger = logging.getLogger(__name__)

# Fields a caller may set; created_by is always taken from the token
WRITABLE_FIELDS = ("company", "position", "status")


def _not_found(job_id: str) -> NotFoundError:
    return NotFoundError(f"No job with id {job_id}")

def _owned_jobs(db: Session, user_id: str):
    """Base query for every job operation: only the caller's own rows."""
    return db.query(Job).filter(Job.created_by == user_id)

def _clean(fields: dict[str, Any]) -> dict[str, Any]:
    return {key: neutralise_markup(value) for key, value in fields.items() if key in WRITABLE_FIELDS}


def get_all_jobs_for_user(db: Session, user_id: str) -> List[Job]:
    """Fetches the user's jobs, oldest first."""
    return _owned_jobs(db, user_id).order_by(Job.created_at.asc()).all()

def get_job_by_id(db: Session, job_id: str, user_id: str) -> Job:
    """Fetches one job; someone else's job is reported exactly like a missing one."""
    job = _owned_jobs(db, user_id).filter(Job.id == job_id).first()
    if not job:
        raise _not_found(job_id)
    return job

def create_job_for_user(db: Session, user_id: str, job_create: JobCreate) -> Job:
    """Creates a job owned by the user."""
    fields = _clean(job_create.model_dump(exclude_unset=True))
    if fields.get("status") is None:
        fields["status"] = JobStatus.PENDING.value
    validate_job_fields(fields)

    db_job = Job(created_by=user_id, **fields)
    db.add(db_job)
    db.commit()
    db.refresh(db_job)

    logger.info(f"User {user_id} created job {db_job.id}")
    return db_job

def update_job_for_user(db: Session, job_id: str, user_id: str, job_update: JobUpdate) -> Job:
    """
    Applies a partial update to one of the user's jobs.

    The write is a single UPDATE filtered by id and owner, so a concurrent
    delete or an id owned by someone else simply matches no row.
    """
    fields = _clean(job_update.model_dump(exclude_unset=True))
    if fields.get("company") == "" or fields.get("position") == "":
        raise BadRequestError("Company or Position fields cannot be empty")
    validate_job_fields(fields, partial=True)

    if fields:
        matched = _owned_jobs(db, user_id).filter(Job.id == job_id).update(
            fields, synchronize_session=False
        )
        db.commit()
        if not matched:
            raise _not_found(job_id)
        logger.info(f"User {user_id} updated job {job_id}")

    return get_job_by_id(db, job_id, user_id)

def delete_job_for_user(db: Session, job_id: str, user_id: str) -> None:
    """Deletes one of the user's jobs; a second delete of the same id is a 404."""
    deleted = _owned_jobs(db, user_id).filter(Job.id == job_id).delete(synchronize_session=False)
    db.commit()
    if not deleted:
        raise _not_found(job_id)
    logger.info(f"User {user_id} deleted job {job_id}")
