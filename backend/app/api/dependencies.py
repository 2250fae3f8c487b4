"""API Dependencies — explicit wiring of request-scoped collaborators.

Invariants:
    - One repository and one service per request, both bound to the request's DB session
    - Routes never construct repositories themselves

Design Decisions:
    - Plain constructor injection behind a FastAPI dependency: tests override get_db only
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.database import get_db
from app.infrastructure.employee_repository import SqlAlchemyEmployeeRepository
from app.services.employee_service import EmployeeService


async def get_employee_service(
    db: AsyncSession = Depends(get_db),
) -> EmployeeService:
    return EmployeeService(SqlAlchemyEmployeeRepository(db))
