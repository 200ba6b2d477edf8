import logging
from typing import Optional

from siglon.shared.adapters import PostgresRowAdapter as rows
from siglon.shared.errors import ConfigurationError, WriteFailure
from siglon.shared.schema import create_tables
from siglon.shared.store import Store, REPORTS, EVENTS, NEWS, KNOWLEDGE

logger = logging.getLogger(__name__)

TABLES = {
    REPORTS: "user_reports",
    EVENTS: "official_landslides",
    NEWS: "berita",
    KNOWLEDGE: "materi",
}


def _insert_sql(table: str, values: dict) -> tuple[str, tuple]:
    columns = list(values)
    placeholders = ", ".join(f"${i}" for i in range(1, len(columns) + 1))
    sql = f"""
        INSERT INTO {table} ({", ".join(columns)})
        VALUES ({placeholders})
        RETURNING *
    """
    return sql, tuple(values[c] for c in columns)


class PostgresStore(Store):
    """Store backed by the remote PostgreSQL database."""

    def __init__(self, db):
        self.db = db

    async def open(self):
        await self.db.connect()
        await create_tables(self.db)

    async def close(self):
        await self.db.close()

    async def _read(self, sql, params=None, fetch_one=False, action="read"):
        try:
            return await self.db.execute_query(sql, params, fetch_one=fetch_one)
        except Exception:
            logger.exception(f"Database read failed while trying to {action}")
            raise

    async def _write(self, sql, params, action):
        try:
            return await self.db.execute_query(sql, params, fetch_one=True)
        except ConfigurationError:
            raise
        except Exception as e:
            logger.exception(f"Database write failed while trying to {action}")
            raise WriteFailure(f"Failed to {action}: {e}") from e

    async def _sync_sequence(self, table):
        # Explicit ids (seed data) do not advance the SERIAL sequence.
        await self._write(
            f"SELECT setval(pg_get_serial_sequence('{table}', 'id'), (SELECT MAX(id) FROM {table}))",
            None,
            f"sync the id sequence of {table}",
        )

    async def count(self, collection: str) -> int:
        table = TABLES[collection]
        result = await self._read(
            f"SELECT COUNT(*) AS count FROM {table}", fetch_one=True, action=f"count {table}"
        )
        return result["count"]

    async def get_report(self, report_id: int):
        row = await self._read(
            "SELECT * FROM user_reports WHERE id = $1", (report_id,), fetch_one=True,
            action=f"load report {report_id}",
        )
        return rows.report_from_row(row) if row else None

    async def list_reports(self, status: Optional[str] = None) -> list:
        if status:
            result = await self._read(
                "SELECT * FROM user_reports WHERE status = $1 ORDER BY id", (status,),
                action=f"list {status} reports",
            )
        else:
            result = await self._read(
                "SELECT * FROM user_reports ORDER BY created_at DESC", action="list reports"
            )
        return [rows.report_from_row(r) for r in result]

    async def insert_report(self, report, report_id: Optional[int] = None):
        values = rows.report_to_row(report)
        if report_id is not None:
            values = {"id": report_id, **values}
        sql, params = _insert_sql("user_reports", values)
        row = await self._write(sql, params, "insert report")
        if report_id is not None:
            await self._sync_sequence("user_reports")
        return rows.report_from_row(row)

    async def update_report_status(self, report_id: int, status: str):
        row = await self._write(
            """
            UPDATE user_reports
            SET status = $1, processed_at = NOW()
            WHERE id = $2
            RETURNING *
            """,
            (status, report_id),
            f"update status of report {report_id}",
        )
        return rows.report_from_row(row) if row else None

    async def get_event(self, event_id: int):
        row = await self._read(
            "SELECT * FROM official_landslides WHERE id = $1", (event_id,), fetch_one=True,
            action=f"load official event {event_id}",
        )
        return rows.event_from_row(row) if row else None

    async def list_events(self, limit: Optional[int] = None) -> list:
        query = "SELECT * FROM official_landslides ORDER BY tanggal DESC, id DESC"
        params = ()
        if limit is not None:
            query += " LIMIT $1"
            params = (limit,)
        result = await self._read(query, params, action="list official events")
        return [rows.event_from_row(r) for r in result]

    async def insert_event(self, event, event_id: Optional[int] = None):
        values = rows.event_to_row(event)
        if event_id is not None:
            values = {"id": event_id, **values}
        sql, params = _insert_sql("official_landslides", values)
        row = await self._write(sql, params, "insert official event")
        if event_id is not None:
            await self._sync_sequence("official_landslides")
        return rows.event_from_row(row)

    async def delete_event(self, event_id: int) -> bool:
        row = await self._write(
            "DELETE FROM official_landslides WHERE id = $1 RETURNING id",
            (event_id,),
            f"delete official event {event_id}",
        )
        return row is not None

    async def list_news(self, limit: Optional[int] = None) -> list:
        query = "SELECT * FROM berita ORDER BY tanggal DESC, id DESC"
        params = ()
        if limit is not None:
            query += " LIMIT $1"
            params = (limit,)
        result = await self._read(query, params, action="list news")
        return [rows.news_from_row(r) for r in result]

    async def insert_news(self, article):
        sql, params = _insert_sql("berita", rows.news_to_row(article))
        row = await self._write(sql, params, "insert news article")
        return rows.news_from_row(row)

    async def delete_news(self, news_id: int) -> bool:
        row = await self._write(
            "DELETE FROM berita WHERE id = $1 RETURNING id", (news_id,), f"delete news {news_id}"
        )
        return row is not None

    async def list_knowledge(self, category: Optional[str] = None) -> list:
        if category:
            result = await self._read(
                "SELECT * FROM materi WHERE kategori = $1 ORDER BY id", (category,),
                action=f"list {category} knowledge articles",
            )
        else:
            result = await self._read("SELECT * FROM materi ORDER BY id", action="list knowledge articles")
        return [rows.knowledge_from_row(r) for r in result]

    async def insert_knowledge(self, article):
        sql, params = _insert_sql("materi", rows.knowledge_to_row(article))
        row = await self._write(sql, params, "insert knowledge article")
        return rows.knowledge_from_row(row)

    async def delete_knowledge(self, article_id: int) -> bool:
        row = await self._write(
            "DELETE FROM materi WHERE id = $1 RETURNING id",
            (article_id,),
            f"delete knowledge article {article_id}",
        )
        return row is not None
