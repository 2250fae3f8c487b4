"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via constructor injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO against the relational store
"""

from typing import Protocol

from app.core.domain_types import EmployeeId
from app.core.employee_filter import Predicate


class EmployeeLike(Protocol):
    """Structural contract for Employee records handled by the orchestration layer."""
    employee_id: str
    employee_name: str
    email: str
    phone_number: str | None
    address: str | None
    department: str | None
    salary: float


class EmployeeRepository(Protocol):
    """Contract for employee persistence, implemented by shell."""
    async def get(self, employee_id: EmployeeId) -> EmployeeLike | None: ...
    async def add(self, employee: EmployeeLike) -> EmployeeLike: ...
    async def save(self, employee: EmployeeLike) -> EmployeeLike: ...
    async def delete(self, employee: EmployeeLike) -> None: ...
    async def list_all(self) -> list[EmployeeLike]: ...
    async def list_names(self) -> list[str]: ...
    async def list_names_by_department(self, department: str) -> list[str]: ...
    async def count(self) -> int: ...
    async def find_matching(self, predicates: list[Predicate]) -> list[EmployeeLike]: ...
