"""Persistence: SQLAlchemy async engine, ORM models, repositories, Alembic migrations."""
