"""Database Declarations — SQLAlchemy Base shared by models and migrations.

Invariants:
    - One DeclarativeBase for every model (single metadata for create_all and Alembic)

Design Decisions:
    - Engine and sessions live in infrastructure/database.py; this package holds no IO
    - asyncpg for PostgreSQL, aiosqlite for local files (both native async)
"""
