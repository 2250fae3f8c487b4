"""Employee Routes — create, read, update, listings and dynamic filtering.

Invariants:
    - Static paths (/names, /count, /filter, /departments/...) declared before /{employee_id}
    - Request bodies validated by Pydantic before reaching the handler (400 on failure)
    - Filter bounds are true optionals; legacy sentinels translated via FilterCriteria.from_legacy
    - Filter bounds must be finite numbers; nan/inf are rejected like any malformed bound
    - Responses use the camelCase wire names (response_model serialized by alias)

Design Decisions:
    - Domain errors propagate to the global handlers (error_handlers.py), no per-route mapping
    - minSalary/maxSalary/department query names kept from the legacy contract
"""

from fastapi import APIRouter, Depends, Query, status
from pydantic import FiniteFloat

from app.api.dependencies import get_employee_service
from app.core.employee_filter import FilterCriteria
from app.schemas.employee import EmployeeCreate, EmployeeResponse, EmployeeUpdate
from app.services.employee_service import EmployeeService

router = APIRouter(prefix="/api/v1/employees", tags=["employees"])


@router.post(
    "", response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_employee(
    body: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),
):
    """Create an employee with a server-generated employeeId."""
    return await service.create(body)


@router.get("", response_model=list[EmployeeResponse])
async def list_employee_details(
    service: EmployeeService = Depends(get_employee_service),
):
    """Full details of every employee."""
    return await service.list_all()


@router.get("/names", response_model=list[str])
async def list_employee_names(
    service: EmployeeService = Depends(get_employee_service),
):
    return await service.list_names()


@router.get("/count", response_model=int)
async def count_employees(
    service: EmployeeService = Depends(get_employee_service),
):
    return await service.count()


@router.get("/filter", response_model=list[EmployeeResponse])
async def filter_employees(
    department: str | None = Query(None),
    min_salary: FiniteFloat | None = Query(None, alias="minSalary"),
    max_salary: FiniteFloat | None = Query(None, alias="maxSalary"),
    service: EmployeeService = Depends(get_employee_service),
):
    """Employees matching every supplied criterion (AND)."""
    criteria = FilterCriteria.from_legacy(department, min_salary, max_salary)
    return await service.filter(criteria)


@router.get("/departments/{department}/names", response_model=list[str])
async def list_department_employee_names(
    department: str,
    service: EmployeeService = Depends(get_employee_service),
):
    """Names in one department. 404 when the department yields no employees."""
    return await service.list_names_by_department(department)


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
):
    return await service.get(employee_id)


@router.put("/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    employee_id: str,
    body: EmployeeUpdate,
    service: EmployeeService = Depends(get_employee_service),
):
    """Overwrite name, email, phone and address. Salary and id are left untouched."""
    return await service.update(employee_id, body)
