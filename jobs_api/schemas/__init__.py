# jobs-api\jobs_api\schemas\__init__.py

from .user import (
    RegisterRequest, LoginRequest, UserSummary, UserName,
    RegisterResponse, LoginResponse, TokenPayload,
)
from .job import JobStatus, JobCreate, JobUpdate, JobResponse, JobEnvelope, JobList
