from contextlib import asynccontextmanager

import asyncpg
import logging

from siglon.shared.errors import ConfigurationError

logger = logging.getLogger(__name__)


class Database:
    """
    Owns an asyncpg connection pool.
    Constructed explicitly at application startup and handed to the store that uses it.
    """

    def __init__(self, dsn, min_size=1, max_size=20, command_timeout=60):
        self.dsn = dsn
        self.min_size = min_size
        self.max_size = max_size
        self.command_timeout = command_timeout
        self.pool = None

    async def connect(self):
        """
        Initialize the connection pool.
        Call once at application startup.
        """
        if not self.dsn:
            logger.error("DATABASE_URL environment variable is not set.")
            raise ConfigurationError("DATABASE_URL environment variable is not set.")
        try:
            logger.info("Initializing database connection pool...")
            self.pool = await asyncpg.create_pool(
                dsn=self.dsn,
                min_size=self.min_size,
                max_size=self.max_size,
                command_timeout=self.command_timeout,
            )
            logger.info("Database connection pool initialized successfully.")
        except Exception as e:
            logger.exception(f"Error initializing database: {str(e)}")
            raise ConfigurationError(f"Could not connect to database: {e}") from e

    async def close(self):
        if self.pool:
            logger.info("Closing database connection pool...")
            await self.pool.close()
            self.pool = None
            logger.info("Database connection pool closed.")

    @asynccontextmanager
    async def connection(self):
        """
        Acquire a connection from the pool and release it afterwards.
        Use with 'async with db.connection() as conn:'
        """
        if self.pool is None:
            logger.error("Database connection pool is not initialized. Call connect() first.")
            raise ConfigurationError("Database connection pool is not initialized.")

        conn = None
        try:
            logger.debug("Acquiring database connection from pool...")
            conn = await self.pool.acquire()
            yield conn
        finally:
            if conn:
                logger.debug("Releasing database connection back to pool...")
                await self.pool.release(conn)

    async def execute_query(self, sql, params=None, fetch_one=False):
        """
        Execute an SQL query and return results.
        Use $1, $2, ... as placeholders in queries.
        """
        logger.info(f"Executing SQL query: {sql.strip().splitlines()[0][:100]}... | Params: {params}")
        async with self.connection() as conn:
            if fetch_one:
                result = await conn.fetchrow(sql, *(params or []))
            else:
                result = await conn.fetch(sql, *(params or []))
            logger.debug("SQL query executed successfully.")
            return result

    async def execute_script(self, sql):
        """Run a multi-statement script inside one transaction."""
        async with self.connection() as conn:
            async with conn.transaction():
                await conn.execute(sql)
