# jobs-api\jobs_api\schemas\job.py

from pydantic import BaseModel, ConfigDict
from datetime import datetime
from enum import Enum

class JobStatus(str, Enum):
    """Where a job application currently stands."""
    INTERVIEW = "interview"
    DECLINED = "declined"
    PENDING = "pending"

# Schema for creating a job (POST). Any 'createdBy' in the body is ignored.
class JobCreate(BaseModel):
    company: str | None = None
    position: str | None = None
    status: str | None = None

# Schema for updating a job (PATCH); only the fields actually sent are applied
class JobUpdate(BaseModel):
    company: str | None = None
    position: str | None = None
    status: str | None = None

# Schema for a job response
class JobResponse(BaseModel):
    id: str
    company: str
    position: str
    status: JobStatus
    created_by: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

class JobEnvelope(BaseModel):
    job: JobResponse

class JobList(BaseModel):
    jobs: list[JobResponse]
    count: int
