"""Database Metadata — SQLAlchemy Base shared by models and infrastructure.

Invariants:
    - Base.metadata is complete once app.models is imported
"""
