"""Employee Filter — turns optional filter criteria into a conjunctive predicate list.

Invariants:
    - Each present criterion contributes exactly one Predicate; absent ones contribute none
    - Predicates are combined with AND by the storage layer (zero predicates = match all)
    - Inside the core "no bound" is None; legacy sentinels are translated at the boundary
    - Pure: no IO, no SQLAlchemy, deterministic output order (department, min, max)

Design Decisions:
    - Tagged Predicate dataclass, not backend query objects: the repository owns the
      translation to SQL
    - from_legacy() is the only place that knows about 0 / max-double sentinels
"""

from dataclasses import dataclass

from app.core.domain_types import (
    FilterField, PredicateOp,
    SALARY_NO_LOWER_BOUND, SALARY_NO_UPPER_BOUND,
)


@dataclass(frozen=True)
class Predicate:
    """A single comparison on one Employee field."""
    field: FilterField
    op: PredicateOp
    value: str | float


@dataclass(frozen=True)
class FilterCriteria:
    """Transient filter triple; every member independently optional."""
    department: str | None = None
    min_salary: float | None = None
    max_salary: float | None = None

    @classmethod
    def from_legacy(
        cls,
        department: str | None,
        min_salary: float | None,
        max_salary: float | None,
    ) -> "FilterCriteria":
        """Build criteria from wire values, mapping legacy sentinels to None.

        The legacy contract spelled "no constraint" as department="",
        min_salary=0 and max_salary=<max double>. A non-blank department
        is kept verbatim so it matches exactly what was stored.
        """
        if department is not None:
            department = department if department.strip() else None
        if min_salary == SALARY_NO_LOWER_BOUND:
            min_salary = None
        if max_salary == SALARY_NO_UPPER_BOUND:
            max_salary = None
        return cls(department, min_salary, max_salary)


def build_predicates(criteria: FilterCriteria) -> list[Predicate]:
    """Build the AND-ed predicate list for the present criteria."""
    predicates: list[Predicate] = []
    if criteria.department:
        predicates.append(
            Predicate(FilterField.DEPARTMENT, PredicateOp.EQ, criteria.department),
        )
    if criteria.min_salary is not None:
        predicates.append(
            Predicate(FilterField.SALARY, PredicateOp.GTE, criteria.min_salary),
        )
    if criteria.max_salary is not None:
        predicates.append(
            Predicate(FilterField.SALARY, PredicateOp.LTE, criteria.max_salary),
        )
    return predicates
