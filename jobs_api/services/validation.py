# jobs-api\jobs_api\services\validation.py

import re
from typing import Any

from jobs_api.core.errors import FieldValidationError
from jobs_api.schemas.job import JobStatus

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 6
COMPANY_MAX_LENGTH = 50
POSITION_MAX_LENGTH = 100

EMAIL_PATTERN = re.compile(
    r'^(([^<>()[\]\\.,;:\s@"]+(\.[^<>()[\]\\.,;:\s@"]+)*)|(".+"))'
    r'@((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\])|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))$'
)

JOB_STATUSES = [s.value for s in JobStatus]


def neutralise_markup(value: Any) -> Any:
    """Escapes '<' in user-supplied text so stored values never open an HTML tag."""
    if isinstance(value, str):
        return value.replace("<", "&lt;")
    return value


def validate_registration(name: Any, email: Any, password: Any) -> None:
    """Raises FieldValidationError listing every broken credential rule."""
    errors: list[str] = []

    if not name:
        errors.append("Please provide name")
    elif len(name) < NAME_MIN_LENGTH:
        errors.append(f"Name must be at least {NAME_MIN_LENGTH} characters")
    elif len(name) > NAME_MAX_LENGTH:
        errors.append(f"Name cannot be more than {NAME_MAX_LENGTH} characters")

    if not email:
        errors.append("Please provide email")
    elif not EMAIL_PATTERN.match(email):
        errors.append("Please provide a valid email")

    if not password:
        errors.append("Please provide password")
    elif len(password) < PASSWORD_MIN_LENGTH:
        errors.append(f"Password must be at least {PASSWORD_MIN_LENGTH} characters")

    if errors:
        raise FieldValidationError(errors)


def validate_job_fields(fields: dict[str, Any], partial: bool = False) -> None:
    """
    Checks job fields before they are written.

    With partial=True only the keys present in `fields` are checked, which is
    what an update needs; otherwise company and position are required.
    """
    errors: list[str] = []

    if not partial or "company" in fields:
        company = fields.get("company")
        if not company:
            errors.append("Please provide company name")
        elif len(company) > COMPANY_MAX_LENGTH:
            errors.append(f"Company cannot be more than {COMPANY_MAX_LENGTH} characters")

    if not partial or "position" in fields:
        position = fields.get("position")
        if not position:
            errors.append("Please provide position")
        elif len(position) > POSITION_MAX_LENGTH:
            errors.append(f"Position cannot be more than {POSITION_MAX_LENGTH} characters")

    if "status" in fields and fields["status"] not in JOB_STATUSES:
        errors.append(f"`{fields['status']}` is not a valid status, expected one of {', '.join(JOB_STATUSES)}")

    if errors:
        raise FieldValidationError(errors)
