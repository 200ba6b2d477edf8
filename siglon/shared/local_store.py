import asyncio
import json
import logging
from pathlib import Path
from typing import Optional

from siglon.shared.adapters import LocalDocumentAdapter as docs
from siglon.shared.errors import WriteFailure
from siglon.shared.store import Store, REPORTS, EVENTS, NEWS, KNOWLEDGE
from siglon.reports.models import Report
from siglon.events.models import OfficialEvent
from siglon.news.models import NewsArticle
from siglon.knowledge.models import KnowledgeArticle

logger = logging.getLogger(__name__)

# Document keys, kept from the browser database this store stands in for.
COLLECTIONS = {
    REPORTS: "user_reports",
    EVENTS: "official_landslides",
    NEWS: "berita",
    KNOWLEDGE: "materi",
}


def _next_id(ids) -> int:
    ids = list(ids)
    return max(ids) + 1 if ids else 1


class LocalStore(Store):
    """
    Fallback key-value store used when no remote database is configured.

    All collections live in one JSON document. With no path the data stays
    in memory. Mutations build the new document first and only replace the
    in-memory copy after it was written, so a failed save changes nothing.
    """

    def __init__(self, storage_path=None):
        self._path = Path(storage_path) if storage_path else None
        self._data = {}
        self._lock = asyncio.Lock()
        self._load()

    # ------------------------------------------------------------------
    # Internal helpers
    def _load(self):
        if self._path and self._path.exists():
            try:
                self._data = json.loads(self._path.read_text(encoding="utf-8"))
            except json.JSONDecodeError:
                logger.warning(f"Local store {self._path} is not valid JSON; starting empty")
                self._data = {}
        if not isinstance(self._data, dict):
            self._data = {}
        for key in COLLECTIONS.values():
            self._data.setdefault(key, [])

    def _save(self, data):
        if self._path is None:
            return
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            payload = json.dumps(data, indent=2, sort_keys=True)
            self._path.write_text(payload, encoding="utf-8")
        except OSError as e:
            logger.exception(f"Failed to write local store {self._path}")
            raise WriteFailure(f"Failed to write local store: {e}") from e

    def _commit(self, collection, items):
        data = dict(self._data)
        data[COLLECTIONS[collection]] = items
        self._save(data)
        self._data = data

    def _items(self, collection) -> list:
        return list(self._data[COLLECTIONS[collection]])

    def _delete(self, collection, item_id, key) -> bool:
        items = self._items(collection)
        kept = [item for item in items if key(item) != item_id]
        if len(kept) == len(items):
            return False
        self._commit(collection, kept)
        return True

    async def count(self, collection: str) -> int:
        return len(self._data[COLLECTIONS[collection]])

    # ------------------------------------------------------------------
    # Reports
    async def get_report(self, report_id: int):
        for doc in self._data[COLLECTIONS[REPORTS]]:
            if doc["id"] == report_id:
                return docs.report_from_document(doc)
        return None

    async def list_reports(self, status: Optional[str] = None) -> list:
        reports = [docs.report_from_document(d) for d in self._data[COLLECTIONS[REPORTS]]]
        if status:
            reports = [r for r in reports if r.status == status]
        return reports

    async def insert_report(self, report, report_id: Optional[int] = None):
        async with self._lock:
            items = self._items(REPORTS)
            if report_id is None:
                report_id = _next_id(d["id"] for d in items)
            elif any(d["id"] == report_id for d in items):
                raise WriteFailure(f"Report {report_id} already exists")
            created = Report(**{**report.model_dump(), "id": report_id})
            items.append(docs.report_to_document(created))
            self._commit(REPORTS, items)
            return created

    async def update_report_status(self, report_id: int, status: str):
        async with self._lock:
            items = self._items(REPORTS)
            for idx, doc in enumerate(items):
                if doc["id"] == report_id:
                    items[idx] = {**doc, "status": status}
                    self._commit(REPORTS, items)
                    return docs.report_from_document(items[idx])
            return None

    # ------------------------------------------------------------------
    # Official events
    async def get_event(self, event_id: int):
        for feature in self._data[COLLECTIONS[EVENTS]]:
            if feature["properties"]["id"] == event_id:
                return docs.event_from_feature(feature)
        return None

    async def list_events(self, limit: Optional[int] = None) -> list:
        events = [docs.event_from_feature(f) for f in self._data[COLLECTIONS[EVENTS]]]
        events.sort(key=lambda e: (e.event_date, e.id), reverse=True)
        return events if limit is None else events[:limit]

    async def insert_event(self, event, event_id: Optional[int] = None):
        async with self._lock:
            items = self._items(EVENTS)
            if event_id is None:
                event_id = _next_id(f["properties"]["id"] for f in items)
            elif any(f["properties"]["id"] == event_id for f in items):
                raise WriteFailure(f"Official event {event_id} already exists")
            created = OfficialEvent(**{**event.model_dump(), "id": event_id})
            items.append(docs.event_to_feature(created))
            self._commit(EVENTS, items)
            return created

    async def delete_event(self, event_id: int) -> bool:
        async with self._lock:
            return self._delete(EVENTS, event_id, lambda f: f["properties"]["id"])

    # ------------------------------------------------------------------
    # News
    async def list_news(self, limit: Optional[int] = None) -> list:
        articles = [docs.news_from_document(d) for d in self._data[COLLECTIONS[NEWS]]]
        articles.sort(key=lambda a: (a.date, a.id), reverse=True)
        return articles if limit is None else articles[:limit]

    async def insert_news(self, article):
        async with self._lock:
            items = self._items(NEWS)
            created = NewsArticle(**{**article.model_dump(), "id": _next_id(d["id"] for d in items)})
            items.append(docs.news_to_document(created))
            self._commit(NEWS, items)
            return created

    async def delete_news(self, news_id: int) -> bool:
        async with self._lock:
            return self._delete(NEWS, news_id, lambda d: d["id"])

    # ------------------------------------------------------------------
    # Knowledge base
    async def list_knowledge(self, category: Optional[str] = None) -> list:
        articles = [docs.knowledge_from_document(d) for d in self._data[COLLECTIONS[KNOWLEDGE]]]
        if category:
            articles = [a for a in articles if a.category == category]
        return articles

    async def insert_knowledge(self, article):
        async with self._lock:
            items = self._items(KNOWLEDGE)
            created = KnowledgeArticle(**{**article.model_dump(), "id": _next_id(d["id"] for d in items)})
            items.append(docs.knowledge_to_document(created))
            self._commit(KNOWLEDGE, items)
            return created

    async def delete_knowledge(self, article_id: int) -> bool:
        async with self._lock:
            return self._delete(KNOWLEDGE, article_id, lambda d: d["id"])
