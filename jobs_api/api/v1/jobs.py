# jobs-api\jobs_api\api\v1\jobs.py

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from jobs_api.db.database import get_db
from jobs_api.schemas.job import JobCreate, JobUpdate, JobEnvelope, JobList
from jobs_api.schemas.user import TokenPayload
from jobs_api.security.dependencies import authenticate
from jobs_api.services import crud_jobs

# The auth gate runs before every handler on this router
router = APIRouter(prefix="/jobs", tags=["jobs"], dependencies=[Depends(authenticate)])


@router.get("", response_model=JobList)
def list_jobs_endpoint(current_user: TokenPayload = Depends(authenticate), db: Session = Depends(get_db)):
    """Lists the caller's jobs, oldest first."""
    jobs = crud_jobs.get_all_jobs_for_user(db, current_user.user_id)
    return {"jobs": jobs, "count": len(jobs)}

@router.get("/{job_id}", response_model=JobEnvelope)
def get_job_endpoint(job_id: str, current_user: TokenPayload = Depends(authenticate), db: Session = Depends(get_db)):
    """Retrieves one of the caller's jobs."""
    return {"job": crud_jobs.get_job_by_id(db, job_id, current_user.user_id)}

@router.post("", response_model=JobEnvelope, status_code=status.HTTP_201_CREATED)
def create_job_endpoint(
    job: JobCreate,
    current_user: TokenPayload = Depends(authenticate),
    db: Session = Depends(get_db),
):
    """Creates a job owned by the caller."""
    return {"job": crud_jobs.create_job_for_user(db, current_user.user_id, job)}

@router.patch("/{job_id}", response_model=JobEnvelope)
def update_job_endpoint(
    job_id: str,
    job: JobUpdate,
    current_user: TokenPayload = Depends(authenticate),
    db: Session = Depends(get_db),
):
    """Updates any subset of a job's fields."""
    return {"job": crud_jobs.update_job_for_user(db, job_id, current_user.user_id, job)}

@router.delete("/{job_id}", status_code=status.HTTP_200_OK, response_class=Response)
def delete_job_endpoint(job_id: str, current_user: TokenPayload = Depends(authenticate), db: Session = Depends(get_db)):
    """Deletes one of the caller's jobs. Responds with an empty body."""
    crud_jobs.delete_job_for_user(db, job_id, current_user.user_id)
    return Response(status_code=status.HTTP_200_OK)
