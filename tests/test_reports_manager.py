import asyncio
from datetime import date

import pytest

from siglon.shared.errors import NotFound, InvalidState, WriteFailure
from siglon.shared.local_store import LocalStore
from siglon.shared.store import EVENTS
from siglon.reports.models import ReportSubmit
from siglon.reports.manager import approve_report, reject_report, list_pending_reports, submit_report
from siglon.reports.utils import build_event_from_report


class FlakyStore(LocalStore):
    """LocalStore whose writes can be made to fail."""

    def __init__(self, fail_event_insert=False, fail_status_update=False):
        super().__init__()
        self.fail_event_insert = fail_event_insert
        self.fail_status_update = fail_status_update

    async def insert_event(self, event, event_id=None):
        if self.fail_event_insert:
            raise WriteFailure("insert rejected")
        return await super().insert_event(event, event_id)

    async def update_report_status(self, report_id, status):
        if self.fail_status_update:
            raise WriteFailure("update rejected")
        return await super().update_report_status(report_id, status)


def budi(**overrides):
    values = dict(reporter_name="Budi", description="Retakan tanah", latitude=-6.90, longitude=107.60,
                  deaths=0, injuries=0, damaged_homes=0)
    values.update(overrides)
    return ReportSubmit(**values)


def run(coro):
    return asyncio.run(coro)


def test_approve_creates_one_event_and_marks_report():
    async def scenario():
        store = LocalStore()
        report = await submit_report(store, budi())
        event = await approve_report(store, report.id)
        return store, report, event

    store, report, event = run(scenario())
    assert (event.latitude, event.longitude) == (-6.90, 107.60)
    assert "Budi" in event.source
    assert event.source == "Community Report (Budi)"
    assert event.location_name == "Report from Budi at -6.9, 107.6"
    assert event.province == "N/A"
    assert event.event_date == date.today()
    assert run(store.count(EVENTS)) == 1
    assert run(store.get_report(report.id)).status == "approved"


def test_approve_copies_counts_and_defaults_missing_ones():
    async def scenario():
        store = LocalStore()
        report = await submit_report(store, budi(deaths=2, injuries=None, damaged_homes=None))
        return await approve_report(store, report.id)

    event = run(scenario())
    assert (event.deaths, event.injuries, event.damaged_homes) == (2, 0, 0)


def test_approve_missing_report_is_not_found():
    with pytest.raises(NotFound):
        run(approve_report(LocalStore(), 999))


@pytest.mark.parametrize("first", [approve_report, reject_report])
def test_processed_report_cannot_be_processed_again(first):
    async def scenario():
        store = LocalStore()
        report = await submit_report(store, budi())
        await first(store, report.id)
        events_before = await store.count(EVENTS)
        for action in (approve_report, reject_report):
            with pytest.raises(InvalidState):
                await action(store, report.id)
        return store, report, events_before

    store, report, events_before = run(scenario())
    assert run(store.count(EVENTS)) == events_before
    assert run(store.get_report(report.id)).status in ("approved", "rejected")


def test_reject_twice_fails_without_side_effects():
    async def scenario():
        store = LocalStore()
        report = await submit_report(store, budi())
        rejected = await reject_report(store, report.id)
        with pytest.raises(InvalidState):
            await reject_report(store, report.id)
        return store, rejected

    store, rejected = run(scenario())
    assert rejected.status == "rejected"
    assert run(store.count(EVENTS)) == 0


def test_reject_missing_report_is_not_found():
    with pytest.raises(NotFound):
        run(reject_report(LocalStore(), 42))


def test_failed_event_insert_leaves_report_pending():
    async def scenario():
        store = FlakyStore(fail_event_insert=True)
        report = await submit_report(store, budi())
        with pytest.raises(WriteFailure):
            await approve_report(store, report.id)
        return store, report

    store, report = run(scenario())
    assert run(store.get_report(report.id)).status == "pending"
    assert run(store.count(EVENTS)) == 0

    # Retry succeeds once the store accepts writes again
    store.fail_event_insert = False
    event = run(approve_report(store, report.id))
    assert event.id == 1
    assert run(store.get_report(report.id)).status == "approved"


def test_failed_status_update_surfaces_write_failure_and_keeps_event():
    async def scenario():
        store = FlakyStore(fail_status_update=True)
        report = await submit_report(store, budi())
        with pytest.raises(WriteFailure):
            await approve_report(store, report.id)
        return store, report

    store, report = run(scenario())
    assert run(store.count(EVENTS)) == 1
    assert run(store.get_report(report.id)).status == "pending"


def test_pending_list_excludes_processed_reports():
    async def scenario():
        store = LocalStore()
        a = await submit_report(store, budi(reporter_name="A"))
        b = await submit_report(store, budi(reporter_name="B"))
        c = await submit_report(store, budi(reporter_name="C"))
        await approve_report(store, a.id)
        await reject_report(store, b.id)
        return c, await list_pending_reports(store)

    c, pending = run(scenario())
    assert [r.id for r in pending] == [c.id]
    assert all(r.status == "pending" for r in pending)


def test_build_event_from_report_uses_given_day():
    async def scenario():
        store = LocalStore()
        return await submit_report(store, budi(photo="foto.jpg", description="Tebing longsor"))

    report = run(scenario())
    event = build_event_from_report(report, today=date(2024, 7, 1))
    assert event.event_date == date(2024, 7, 1)
    assert event.description == "Tebing longsor"
    assert event.source == "Community Report (Budi)"
