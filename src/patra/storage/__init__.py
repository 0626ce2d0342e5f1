"""Storage layer for the letter intake pipeline.

Provides database access via SQLAlchemy with PostgreSQL (asyncpg).
"""

from .database import (
    Base,
    async_session_factory,
    close_db,
    engine,
    get_session,
    init_db,
    make_engine,
    make_session_factory,
)
from .orm_models import FileORM
from .repositories import FileRepository

__all__ = [
    # Database
    "Base",
    "engine",
    "async_session_factory",
    "make_engine",
    "make_session_factory",
    "get_session",
    "init_db",
    "close_db",
    # ORM Models
    "FileORM",
    # Repositories
    "FileRepository",
]
