"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - SQLAlchemy errors never escape this layer untranslated
    - Repositories implement the Protocols in core/repository_protocols.py

Design Decisions:
    - Session manager and repository split: one owns connections, the other owns queries
"""
