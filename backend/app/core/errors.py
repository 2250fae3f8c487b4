"""Error Hierarchy — typed, categorized exceptions for all employee service failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages, except StorageIntegrityError
      which wraps the storage engine's own constraint text

Design Decisions:
    - Single hierarchy with EmployeeServiceError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - Duplicate email surfaces as StorageIntegrityError (raised by the storage layer),
      never as a pre-validation error
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    STORAGE_INTEGRITY = "storage_integrity"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    employee_id: str | None = None
    department: str | None = None


class EmployeeServiceError(Exception):
    """Base exception for all employee service errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "employee_id": self.context.employee_id,
                    "department": self.context.department,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class EmployeeNotFoundError(EmployeeServiceError):
    """No employee stored under the requested id."""
    def __init__(self, employee_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.employee_id = employee_id
        super().__init__(
            f"Employee not found for the Id - {employee_id}",
            "EMPLOYEE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.employee_id = employee_id


class DepartmentNotFoundError(EmployeeServiceError):
    """Department lookup yielded no employees.

    An existing department with zero employees is indistinguishable
    from an invalid department name.
    """
    def __init__(self, department: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.department = department
        super().__init__(
            f"Entered Department is invalid - {department}",
            "DEPARTMENT_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.department = department


class StorageIntegrityError(EmployeeServiceError):
    """Storage engine rejected a write on its own constraints (e.g. unique email)."""
    def __init__(self, detail: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database error occurred: {detail}",
            "STORAGE_INTEGRITY_ERROR", ErrorCategory.STORAGE_INTEGRITY,
            ErrorSeverity.ERROR, context, 400,
        )
        self.detail = detail


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(EmployeeServiceError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
