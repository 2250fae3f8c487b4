"""Admin Routes — destructive employee operations kept off the public resource router.

Invariants:
    - DELETE returns 204 with no body; 404 when the employee does not exist
    - Deletion is immediate and hard (no soft-delete, no audit trail)
"""

from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_employee_service
from app.services.employee_service import EmployeeService

router = APIRouter(prefix="/api/v1/admin", tags=["admin"])


@router.delete(
    "/employees/{employee_id}", status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
):
    """Delete an employee by id."""
    await service.delete(employee_id)
