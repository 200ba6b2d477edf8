import asyncio
from datetime import date

import pytest

from siglon.shared.adapters import PostgresRowAdapter
from siglon.shared.errors import ConfigurationError, WriteFailure
from siglon.shared.postgres_store import PostgresStore, _insert_sql
from siglon.shared.schema import SCHEMA_SQL
from siglon.shared.store import REPORTS
from siglon.events.models import OfficialEventCreate
from siglon.news.models import NewsCreate
from siglon.reports.models import ReportSubmit


class FakeDatabase:
    """Stands in for shared.db.Database; records queries and replays canned results."""

    def __init__(self, results=None, fail_with=None):
        self.results = list(results or [])
        self.fail_with = fail_with
        self.calls = []
        self.scripts = []
        self.connected = False

    async def connect(self):
        self.connected = True

    async def close(self):
        self.connected = False

    async def execute_script(self, sql):
        self.scripts.append(sql)

    async def execute_query(self, sql, params=None, fetch_one=False):
        self.calls.append((" ".join(sql.split()), params, fetch_one))
        if self.fail_with is not None:
            raise self.fail_with
        if self.results:
            return self.results.pop(0)
        return None if fetch_one else []


def run(coro):
    return asyncio.run(coro)


def bogor():
    return OfficialEventCreate(
        location_name="Kab. Bogor, Jawa Barat", event_date=date(2023, 3, 15), latitude=-6.59, longitude=106.8,
        deaths=5, injuries=3, damaged_homes=12, source="BNPB", province="Jawa Barat",
    )


def event_row(event_id):
    return {**PostgresRowAdapter.event_to_row(bogor()), "id": event_id}


def test_insert_sql_numbers_placeholders():
    sql, params = _insert_sql("berita", {"judul": "Waspada", "isi": "Musim hujan", "tanggal": date(2024, 7, 15)})
    assert " ".join(sql.split()) == "INSERT INTO berita (judul, isi, tanggal) VALUES ($1, $2, $3) RETURNING *"
    assert params == ("Waspada", "Musim hujan", date(2024, 7, 15))


def test_open_connects_and_creates_tables():
    db = FakeDatabase()
    store = PostgresStore(db)
    run(store.open())
    assert db.connected
    assert db.scripts == [SCHEMA_SQL]
    run(store.close())
    assert not db.connected


def test_insert_event_with_explicit_id_syncs_sequence():
    db = FakeDatabase(results=[event_row(3)])
    event = run(PostgresStore(db).insert_event(bogor(), event_id=3))

    assert event.id == 3
    assert event.damaged_homes == 12
    insert_sql, params, _ = db.calls[0]
    assert insert_sql.startswith("INSERT INTO official_landslides (id, lokasi, tanggal")
    assert params[0] == 3
    assert "setval(pg_get_serial_sequence('official_landslides', 'id')" in db.calls[1][0]


def test_insert_event_without_id_leaves_sequence_alone():
    db = FakeDatabase(results=[event_row(8)])
    assert run(PostgresStore(db).insert_event(bogor())).id == 8
    assert len(db.calls) == 1
    assert "(lokasi, tanggal" in db.calls[0][0]


def test_insert_report_with_explicit_id_syncs_sequence():
    submit = ReportSubmit(reporter_name="Budi Santoso", description="retak", latitude=-6.9, longitude=107.6)
    row = {**PostgresRowAdapter.report_to_row(submit), "id": 101, "status": "pending"}
    db = FakeDatabase(results=[row])

    report = run(PostgresStore(db).insert_report(submit, report_id=101))
    assert report.id == 101
    assert report.is_pending
    assert "pg_get_serial_sequence('user_reports', 'id')" in db.calls[1][0]


def test_driver_errors_become_write_failures():
    store = PostgresStore(FakeDatabase(fail_with=ConnectionResetError("connection reset")))
    with pytest.raises(WriteFailure):
        run(store.insert_news(NewsCreate(title="Waspada", content="Musim hujan", date=date(2024, 7, 15))))
    with pytest.raises(WriteFailure):
        run(store.update_report_status(101, "approved"))


def test_configuration_errors_pass_through_writes():
    store = PostgresStore(FakeDatabase(fail_with=ConfigurationError("pool is not initialized")))
    with pytest.raises(ConfigurationError):
        run(store.delete_event(1))


def test_read_errors_propagate_unchanged():
    store = PostgresStore(FakeDatabase(fail_with=ConnectionResetError("connection reset")))
    with pytest.raises(ConnectionResetError):
        run(store.get_event(1))


def test_missing_rows():
    store = PostgresStore(FakeDatabase())
    assert run(store.update_report_status(404, "approved")) is None
    assert run(store.get_report(404)) is None
    assert run(store.delete_event(404)) is False
    assert run(store.delete_news(404)) is False
    assert run(store.delete_knowledge(404)) is False


def test_update_report_status_params():
    db = FakeDatabase()
    run(PostgresStore(db).update_report_status(101, "rejected"))
    sql, params, fetch_one = db.calls[0]
    assert sql.startswith("UPDATE user_reports SET status = $1")
    assert params == ("rejected", 101)
    assert fetch_one


def test_list_events_limit_only_when_given():
    db = FakeDatabase(results=[[event_row(2), event_row(1)], [event_row(2)]])
    store = PostgresStore(db)

    assert [e.id for e in run(store.list_events())] == [2, 1]
    assert db.calls[0][0].endswith("ORDER BY tanggal DESC, id DESC")
    assert db.calls[0][1] == ()

    assert [e.id for e in run(store.list_events(limit=1))] == [2]
    assert db.calls[1][0].endswith("LIMIT $1")
    assert db.calls[1][1] == (1,)


def test_count_and_pending_filter():
    db = FakeDatabase(results=[{"count": 2}])
    store = PostgresStore(db)
    assert run(store.count(REPORTS)) == 2
    assert db.calls[0][0] == "SELECT COUNT(*) AS count FROM user_reports"

    assert run(store.list_reports(status="pending")) == []
    assert db.calls[1][1] == ("pending",)
