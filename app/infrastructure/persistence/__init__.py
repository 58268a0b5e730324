"""Persistence layer: asyncpg-backed PostgreSQL access."""

from infrastructure.persistence.database import Database, StoreError

__all__ = ["Database", "StoreError"]
