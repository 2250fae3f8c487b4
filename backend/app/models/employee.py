"""Employee ORM — the sole persisted entity.

Invariants:
    - employee_id is a server-generated UUID4 string primary key, immutable once assigned
    - email is globally unique (enforced by the storage engine, not the application)
    - employee_name, email and salary are non-nullable
    - department is optional; used by the department listing and the dynamic filter

Design Decisions:
    - Column names mirror the original `employees` table so existing data maps 1:1
    - department indexed: both the fixed department query and the dynamic filter hit it
    - No timestamps, versioning or soft-delete: concurrent updates are last-writer-wins
"""

import uuid

from sqlalchemy import String, Text, Float
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


def generate_employee_id() -> str:
    return str(uuid.uuid4())


class Employee(Base):
    """Employee record."""
    __tablename__ = "employees"

    employee_id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=generate_employee_id,
    )
    employee_name: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True,
    )
    phone_number: Mapped[str | None] = mapped_column(
        String(10), nullable=True,
    )
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    department: Mapped[str | None] = mapped_column(
        String(100), nullable=True, index=True,
    )
    salary: Mapped[float] = mapped_column(Float, nullable=False)

    def __repr__(self) -> str:
        return f"Employee(employee_id={self.employee_id!r}, employee_name={self.employee_name!r})"
