from dataclasses import dataclass, field
from typing import Any, List, Optional
import logging

from sqlalchemy import event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.sql import Executable

from .config import Settings
from .exceptions import StoreError

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


@dataclass
class StatementResult:
    """Outcome of one statement: returned rows and affected row count."""
    rows: List[Any] = field(default_factory=list)
    row_count: int = 0


# =============================================================================
# DATABASE ENGINE CONFIGURATION
# =============================================================================

def build_engine(settings: Settings) -> AsyncEngine:
    """
    Create the async engine with its connection pool.
    
    SQLite (local runs and tests) has no use for the pool sizing knobs.
    """
    engine_kwargs = {
        "echo": settings.DB_ECHO_SQL,  # Print all SQL queries to console
        "pool_pre_ping": True,  # Test connection before using (detect disconnects)
    }
    
    if not settings.is_sqlite:
        engine_kwargs.update({
            "pool_size": settings.DB_POOL_SIZE,  # Number of connections to keep open
            "max_overflow": settings.DB_MAX_OVERFLOW,  # Max connections beyond pool_size
            "pool_timeout": settings.DB_POOL_TIMEOUT,  # Seconds to wait for connection
            "pool_recycle": settings.DB_POOL_RECYCLE,  # Recycle connections after N seconds
            "connect_args": {"timeout": 10},  # asyncpg connect timeout in seconds
        })
    
    engine = create_async_engine(settings.POSTGRES_URL, **engine_kwargs)
    
    if settings.DEBUG:
        @event.listens_for(engine.sync_engine, "checkout")
        def receive_checkout(dbapi_conn, connection_record, connection_proxy):
            logger.debug("Connection checked out from pool")
    
    return engine


# =============================================================================
# CONNECTION PROVIDER
# =============================================================================

class Database:
    """
    Process-scoped handle on the connection pool.
    
    Every call to :meth:`execute` borrows one pooled connection, commits the
    single statement, and hands the connection back whether the statement
    succeeded or not. Concurrent requests each borrow their own connection;
    nothing here serializes them.
    """
    
    def __init__(self, settings: Settings, engine: Optional[AsyncEngine] = None):
        self.settings = settings
        self.engine = engine or build_engine(settings)
    
    async def execute(self, statement: Executable, operation: str = "executar comando") -> StatementResult:
        """
        Run one statement and return its rows and row count.
        
        Raises:
            StoreError: connection failure or statement rejected by the store
        """
        try:
            # begin() commits on success and rolls back on error
            async with self.engine.begin() as connection:
                result = await connection.execute(statement)
                rows = [dict(row) for row in result.mappings()] if result.returns_rows else []
                row_count = result.rowcount if result.rowcount >= 0 else len(rows)
        except (SQLAlchemyError, OSError) as e:
            raise StoreError(detail=str(e), operation=operation) from e
        
        return StatementResult(rows=rows, row_count=row_count)
    
    async def check_connection(self) -> bool:
        """
        Check if database connection is working.
        
        Returns:
            bool: True if connection successful, False otherwise
        """
        try:
            async with self.engine.connect() as connection:
                await connection.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Database connection failed: {e}")
            return False
        logger.info("Database connection successful")
        return True
    
    async def create_tables(self) -> None:
        """
        Create the alunos table if missing.
        
        Development convenience only; this is not a migration tool.
        """
        # Register the models on Base.metadata
        from alunos_api.models import aluno  # noqa: F401
        
        logger.info("Creating database tables...")
        async with self.engine.begin() as connection:
            await connection.run_sync(Base.metadata.create_all)
        logger.info("Database tables created")
    
    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self.engine.dispose()
        logger.info("Database pool disposed")
