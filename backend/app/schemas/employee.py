"""Employee Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - employee_name: 3-50 chars, not blank
    - email: valid email syntax, stored exactly as sent (uniqueness is enforced by storage)
    - phone_number: exactly 10 digits when present; blank → None
    - salary: required on create, any finite number (Infinity/NaN rejected)
    - EmployeeUpdate carries only the mutable fields; employeeId/salary in the payload are ignored
    - Wire names are camelCase (employeeId, employeeName, ...), snake_case accepted on input

Design Decisions:
    - alias_generator=to_camel over per-field aliases: one switch keeps the legacy wire contract
    - field_validator messages mirror the legacy ones so existing clients keep parsing them
"""

import re

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, FiniteFloat, field_validator
from pydantic.alias_generators import to_camel

_PHONE_PATTERN = re.compile(r"^[0-9]{10}$")


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class EmployeeContact(_CamelModel):
    """Fields shared by create and update payloads."""
    employee_name: str
    email: str
    phone_number: str | None = None
    address: str | None = None

    @field_validator("employee_name")
    @classmethod
    def check_employee_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Employee name cannot be blank")
        if not 3 <= len(v) <= 50:
            raise ValueError("Employee name must be between 3 and 50 characters")
        return v

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str) -> str:
        # Syntax check only; the normalized address is discarded.
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError:
            raise ValueError("Invalid email format")
        return v

    @field_validator("phone_number")
    @classmethod
    def check_phone_number(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        if not _PHONE_PATTERN.match(v):
            raise ValueError("Phone number must be 10 digits")
        return v

    @field_validator("address")
    @classmethod
    def blank_address_to_none(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v


class EmployeeCreate(EmployeeContact):
    """Employee creation; id is always server-generated."""
    department: str | None = Field(None, max_length=100)
    salary: FiniteFloat

    @field_validator("department")
    @classmethod
    def blank_department_to_none(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v


class EmployeeUpdate(EmployeeContact):
    """Employee update: only name, email, phone and address are mutable."""


class EmployeeResponse(_CamelModel):
    """Full stored employee record."""
    employee_id: str
    employee_name: str
    email: str
    phone_number: str | None = None
    address: str | None = None
    department: str | None = None
    salary: float
