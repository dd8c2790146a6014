# Jobly - Job Board Data Access Helpers
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Database connection management with asyncpg.

The helpers in ``jobly.helpers.sql`` only build statement fragments; this
wrapper is what finally executes them.
"""

import contextlib
from collections.abc import AsyncIterator
from typing import Any

import asyncpg
from attrs import field, frozen
from beartype import beartype

from .config import Settings, get_settings
from .logging_utils import get_logger

logger = get_logger(__name__)


@frozen
class PoolConfig:
    """Immutable pool bounds read from settings."""

    min_connections: int = field()
    max_connections: int = field()
    command_timeout: float = field(default=30.0)

    @classmethod
    def from_settings(cls, settings: Settings) -> "PoolConfig":
        """Build pool bounds from application settings."""
        return cls(
            min_connections=settings.database_pool_min,
            max_connections=settings.database_pool_max,
            command_timeout=settings.database_command_timeout,
        )


class Database:
    """Thin asyncpg pool wrapper exposing the query methods services use."""

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize database manager."""
        self._pool: asyncpg.Pool | None = None
        self._settings = settings if settings is not None else get_settings()
        self._pool_config = PoolConfig.from_settings(self._settings)

    @beartype
    async def connect(self) -> None:
        """Create the connection pool."""
        if self._pool is not None:
            return

        self._pool = await asyncpg.create_pool(
            self._settings.database_url,
            min_size=self._pool_config.min_connections,
            max_size=self._pool_config.max_connections,
            command_timeout=self._pool_config.command_timeout,
        )
        logger.info(
            "Database pool ready (min=%d, max=%d)",
            self._pool_config.min_connections,
            self._pool_config.max_connections,
        )

    @beartype
    async def disconnect(self) -> None:
        """Close the connection pool."""
        if self._pool is not None:
            await self._pool.close()
        self._pool = None

    @contextlib.asynccontextmanager
    async def acquire(self) -> AsyncIterator[asyncpg.Connection]:
        """Acquire a connection from the pool."""
        if self._pool is None:
            raise RuntimeError("Database not connected; call connect() first")
        async with self._pool.acquire() as conn:
            yield conn

    @beartype
    async def fetch(self, query: str, *args: Any) -> list[asyncpg.Record]:
        """Execute a query and fetch all results."""
        async with self.acquire() as conn:
            return await conn.fetch(query, *args)

    @beartype
    async def fetchrow(self, query: str, *args: Any) -> asyncpg.Record | None:
        """Execute a query and fetch a single row."""
        async with self.acquire() as conn:
            return await conn.fetchrow(query, *args)

    @property
    def is_connected(self) -> bool:
        """Check if database is connected."""
        return self._pool is not None

