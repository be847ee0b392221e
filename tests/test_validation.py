from __future__ import annotations

import pytest

from jobs_api.core.errors import FieldValidationError
from jobs_api.services.validation import (
    neutralise_markup,
    validate_job_fields,
    validate_registration,
)


@pytest.mark.parametrize("email", ["ann@x.com", "first.last@sub.example.org", '"quoted name"@x.io', "a@[10.0.0.1]"])
def test_valid_emails_pass(email):
    validate_registration("Ann", email, "secret1")


@pytest.mark.parametrize("email", ["ann", "ann@", "ann@x", "ann@x.c", "a b@x.com", "ann@@x.com"])
def test_invalid_emails_fail(email):
    with pytest.raises(FieldValidationError) as exc:
        validate_registration("Ann", email, "secret1")
    assert exc.value.errors == ["Please provide a valid email"]


def test_registration_boundaries():
    validate_registration("Abc", "ann@x.com", "123456")
    validate_registration("x" * 50, "ann@x.com", "123456")
    with pytest.raises(FieldValidationError):
        validate_registration("Ab", "ann@x.com", "123456")
    with pytest.raises(FieldValidationError):
        validate_registration("Abc", "ann@x.com", "12345")


def test_job_fields_full_check_requires_company_and_position():
    with pytest.raises(FieldValidationError) as exc:
        validate_job_fields({})
    assert exc.value.errors == ["Please provide company name", "Please provide position"]
    assert exc.value.message == "Please provide company name,Please provide position"


def test_job_fields_partial_check_only_looks_at_present_keys():
    validate_job_fields({"status": "interview"}, partial=True)
    with pytest.raises(FieldValidationError):
        validate_job_fields({"company": None}, partial=True)


def test_job_field_boundaries():
    validate_job_fields({"company": "x" * 50, "position": "y" * 100, "status": "declined"})
    with pytest.raises(FieldValidationError):
        validate_job_fields({"company": "x" * 51, "position": "y"})
    with pytest.raises(FieldValidationError):
        validate_job_fields({"company": "x", "position": "y" * 101})


def test_neutralise_markup():
    assert neutralise_markup("<script>alert(1)</script>") == "&lt;script>alert(1)&lt;/script>"
    assert neutralise_markup("Acme & Co") == "Acme & Co"
    assert neutralise_markup(None) is None
