import logging
from abc import ABC, abstractmethod
from typing import Optional

from fastapi import Request

from siglon.shared.config import Settings
from siglon.shared.errors import ConfigurationError

logger = logging.getLogger(__name__)

REPORTS = "reports"
EVENTS = "events"
NEWS = "news"
KNOWLEDGE = "knowledge"


class Store(ABC):
    """
    Data access for reports, official events and content.

    Implementations translate rows through siglon.shared.adapters and raise
    WriteFailure when the backend rejects a write. Lookups return None for
    missing ids; deciding whether that is an error is up to the caller.
    """

    async def open(self):
        """Acquire backend resources. Called once at startup."""

    async def close(self):
        """Release backend resources. Called once at shutdown."""

    @abstractmethod
    async def count(self, collection: str) -> int: ...

    # Reports
    @abstractmethod
    async def get_report(self, report_id: int): ...

    @abstractmethod
    async def list_reports(self, status: Optional[str] = None) -> list: ...

    @abstractmethod
    async def insert_report(self, report, report_id: Optional[int] = None): ...

    @abstractmethod
    async def update_report_status(self, report_id: int, status: str): ...

    # Official events
    @abstractmethod
    async def get_event(self, event_id: int): ...

    @abstractmethod
    async def list_events(self, limit: Optional[int] = None) -> list: ...

    @abstractmethod
    async def insert_event(self, event, event_id: Optional[int] = None): ...

    @abstractmethod
    async def delete_event(self, event_id: int) -> bool: ...

    # News
    @abstractmethod
    async def list_news(self, limit: Optional[int] = None) -> list: ...

    @abstractmethod
    async def insert_news(self, article): ...

    @abstractmethod
    async def delete_news(self, news_id: int) -> bool: ...

    # Knowledge base
    @abstractmethod
    async def list_knowledge(self, category: Optional[str] = None) -> list: ...

    @abstractmethod
    async def insert_knowledge(self, article): ...

    @abstractmethod
    async def delete_knowledge(self, article_id: int) -> bool: ...


def create_store(settings: Settings) -> Store:
    """Build the store selected by STORE_BACKEND. The caller opens it."""
    if settings.store_backend == "postgres":
        from siglon.shared.db import Database
        from siglon.shared.postgres_store import PostgresStore

        if not settings.database_url:
            raise ConfigurationError("STORE_BACKEND is 'postgres' but DATABASE_URL is not set.")
        logger.info("Using PostgreSQL store")
        return PostgresStore(Database(settings.database_url))
    if settings.store_backend == "local":
        from siglon.shared.local_store import LocalStore

        logger.info(f"Using local store at {settings.local_store_path or '<memory>'}")
        return LocalStore(settings.local_store_path or None)
    raise ConfigurationError(f"Unknown STORE_BACKEND: {settings.store_backend!r}")


def get_store(request: Request) -> Store:
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise ConfigurationError("Data store is not initialized.")
    return store
