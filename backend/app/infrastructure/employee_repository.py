"""Employee Repository — SQLAlchemy implementation of the EmployeeRepository protocol.

Invariants:
    - Fixed queries (names, names by department, count) are static select() statements
    - Dynamic query: predicates are AND-ed into one WHERE clause; none = whole table
    - No ORDER BY on listing/filter queries: result order is whatever the engine returns
    - Every commit that trips a storage constraint raises StorageIntegrityError
      after rolling back

Design Decisions:
    - Operator table maps PredicateOp → column comparison; unknown operators raise KeyError
    - Single-statement reads/writes, no explicit transactions spanning records
"""

import logging
import operator
from typing import Any, Callable

from sqlalchemy import select, func, and_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import EmployeeId, FilterField, PredicateOp
from app.core.employee_filter import Predicate
from app.core.errors import StorageIntegrityError
from app.infrastructure.database import integrity_detail
from app.models.employee import Employee

logger = logging.getLogger(__name__)

_COLUMNS = {
    FilterField.DEPARTMENT: Employee.department,
    FilterField.SALARY: Employee.salary,
}

_OPERATORS: dict[PredicateOp, Callable[[Any, Any], Any]] = {
    PredicateOp.EQ: operator.eq,
    PredicateOp.GTE: operator.ge,
    PredicateOp.LTE: operator.le,
}


def to_clause(predicate: Predicate):
    """Translate one core predicate into a SQLAlchemy boolean clause."""
    column = _COLUMNS[predicate.field]
    return _OPERATORS[predicate.op](column, predicate.value)


class SqlAlchemyEmployeeRepository:
    """Employee persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, employee_id: EmployeeId) -> Employee | None:
        return await self.db.get(Employee, employee_id)

    async def add(self, employee: Employee) -> Employee:
        self.db.add(employee)
        await self._commit()
        await self.db.refresh(employee)
        return employee

    async def save(self, employee: Employee) -> Employee:
        await self._commit()
        await self.db.refresh(employee)
        return employee

    async def delete(self, employee: Employee) -> None:
        await self.db.delete(employee)
        await self._commit()

    async def list_all(self) -> list[Employee]:
        result = await self.db.execute(select(Employee))
        return list(result.scalars().all())

    async def list_names(self) -> list[str]:
        result = await self.db.execute(select(Employee.employee_name))
        return list(result.scalars().all())

    async def list_names_by_department(self, department: str) -> list[str]:
        result = await self.db.execute(
            select(Employee.employee_name).where(
                Employee.department == department,
            ),
        )
        return list(result.scalars().all())

    async def count(self) -> int:
        result = await self.db.execute(
            select(func.count()).select_from(Employee),
        )
        return result.scalar_one()

    async def find_matching(self, predicates: list[Predicate]) -> list[Employee]:
        """Run the dynamic filter: all predicates must hold."""
        query = select(Employee)
        if predicates:
            query = query.where(and_(*(to_clause(p) for p in predicates)))
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def _commit(self) -> None:
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            detail = integrity_detail(e)
            logger.warning(
                f"Storage constraint violated: {detail}",
                extra={"operation": "commit"},
            )
            raise StorageIntegrityError(detail) from e
