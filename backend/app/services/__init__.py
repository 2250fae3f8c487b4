"""Services Layer — orchestration of employee use cases.

Invariants:
    - Services depend on repository Protocols, never on AsyncSession directly
    - Storage absence translated to domain not-found errors here

Design Decisions:
    - One service class per aggregate (Employee is the only one)
"""
