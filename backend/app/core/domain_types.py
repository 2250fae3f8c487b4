"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - EmployeeId wraps the server-generated UUID string, never caller-supplied
    - SALARY_NO_LOWER_BOUND / SALARY_NO_UPPER_BOUND are legacy wire sentinels only;
      inside the core "no bound" is always None
    - All valid predicate fields/operators encoded as Enums

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

import sys
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

EmployeeId = NewType("EmployeeId", str)


# ─── Legacy Sentinels ────────────────────────────────────────────

SALARY_NO_LOWER_BOUND: float = 0.0
SALARY_NO_UPPER_BOUND: float = sys.float_info.max


# ─── Enums ───────────────────────────────────────────────────────

class FilterField(str, Enum):
    """Employee attributes a filter predicate may constrain."""
    DEPARTMENT = "department"
    SALARY = "salary"


class PredicateOp(str, Enum):
    """Comparison applied by a single predicate."""
    EQ = "eq"
    GTE = "gte"
    LTE = "lte"
