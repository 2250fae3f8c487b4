"""Employee Service — orchestration layer, one entry point per use case.

Invariants:
    - employee_id is always server-generated (UUID4), never taken from the caller
    - update touches only employee_name, email, phone_number, address;
      employee_id, salary and department are never changed by it
    - Storage absence becomes EmployeeNotFoundError / DepartmentNotFoundError
    - Duplicate email is NOT pre-checked: it surfaces as StorageIntegrityError from the repository
    - filter never raises on "no match": it returns an empty list

Design Decisions:
    - Repository injected through the constructor (EmployeeRepository protocol), no globals
    - Department listing keeps the legacy rule: empty result = department not found,
      so an existing department with no employees reads as invalid
"""

import logging

from app.core.domain_types import EmployeeId
from app.core.employee_filter import FilterCriteria, build_predicates
from app.core.errors import DepartmentNotFoundError, EmployeeNotFoundError
from app.core.repository_protocols import EmployeeRepository
from app.models.employee import Employee, generate_employee_id
from app.schemas.employee import EmployeeCreate, EmployeeUpdate

logger = logging.getLogger(__name__)


class EmployeeService:
    """Create/read/update/delete, listings and dynamic filtering of employees."""

    def __init__(self, repository: EmployeeRepository):
        self.repository = repository

    async def get(self, employee_id: str) -> Employee:
        """Fetch by primary key or raise EmployeeNotFoundError."""
        employee = await self.repository.get(EmployeeId(employee_id))
        if employee is None:
            logger.warning(
                f"Employee {employee_id} not found",
                extra={"employee_id": employee_id},
            )
            raise EmployeeNotFoundError(employee_id)
        return employee

    async def create(self, data: EmployeeCreate) -> Employee:
        employee = Employee(
            employee_id=generate_employee_id(),
            employee_name=data.employee_name,
            email=str(data.email),
            phone_number=data.phone_number,
            address=data.address,
            department=data.department,
            salary=data.salary,
        )
        employee = await self.repository.add(employee)
        logger.info(
            f"Employee {employee.employee_id} created",
            extra={"employee_id": employee.employee_id},
        )
        return employee

    async def update(self, employee_id: str, data: EmployeeUpdate) -> Employee:
        employee = await self.get(employee_id)
        employee.employee_name = data.employee_name
        employee.email = str(data.email)
        employee.phone_number = data.phone_number
        employee.address = data.address
        employee = await self.repository.save(employee)
        logger.info(
            f"Employee {employee_id} updated",
            extra={"employee_id": employee_id},
        )
        return employee

    async def delete(self, employee_id: str) -> None:
        employee = await self.get(employee_id)
        await self.repository.delete(employee)
        logger.info(
            f"Employee {employee_id} deleted",
            extra={"employee_id": employee_id},
        )

    async def list_names(self) -> list[str]:
        return await self.repository.list_names()

    async def list_all(self) -> list[Employee]:
        return await self.repository.list_all()

    async def count(self) -> int:
        return await self.repository.count()

    async def list_names_by_department(self, department: str) -> list[str]:
        """Names in one department; empty result raises DepartmentNotFoundError."""
        names = await self.repository.list_names_by_department(department)
        if not names:
            logger.warning(
                f"No employees for department {department!r}",
                extra={"department": department},
            )
            raise DepartmentNotFoundError(department)
        return names

    async def filter(self, criteria: FilterCriteria) -> list[Employee]:
        """All employees satisfying every present criterion (order unspecified)."""
        predicates = build_predicates(criteria)
        employees = await self.repository.find_matching(predicates)
        logger.info(
            f"Filter with {len(predicates)} predicate(s) matched {len(employees)} employee(s)",
            extra={"department": criteria.department},
        )
        return employees
