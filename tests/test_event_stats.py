from datetime import date

from siglon.events.manager import summarize_events
from siglon.events.models import OfficialEvent


def make(event_id, province, day, deaths=0):
    return OfficialEvent(
        id=event_id, location_name=f"Lokasi {event_id}", event_date=day, latitude=-6.0, longitude=106.0,
        deaths=deaths, source="BNPB", province=province,
    )


def test_provinces_beyond_top_five_fold_into_other():
    events = [make(i, f"Provinsi {i}", date(2024, 1, 1)) for i in range(1, 8)]
    events += [make(8, "Provinsi 1", date(2024, 2, 1)), make(9, "N/A", date(2024, 2, 1))]

    stats = summarize_events(events, 2024)
    names = [p.name for p in stats.provinces]
    assert names[0] == "Provinsi 1"
    assert len(names) == 6
    assert stats.provinces[-1].name == "Other"
    # two leftover provinces plus the unknown one
    assert stats.provinces[-1].value == 3
    assert stats.affected_provinces == 7


def test_monthly_counts_only_requested_year():
    events = [make(1, "Jawa Barat", date(2023, 12, 5), deaths=2), make(2, "Jawa Barat", date(2024, 12, 5), deaths=1)]
    stats = summarize_events(events, 2024)
    assert stats.monthly[11].name == "Dec"
    assert stats.monthly[11].count == 1
    assert sum(m.count for m in stats.monthly) == 1
    assert stats.total_deaths == 3


def test_empty_events():
    stats = summarize_events([], 2024)
    assert stats.total_events == 0
    assert stats.provinces == []
    assert stats.affected_provinces == 0
    assert len(stats.monthly) == 12


def test_affected_provinces_ignore_unknown():
    events = [
        make(1, "Jawa Barat", date(2024, 1, 1)),
        make(2, "Jawa Barat", date(2024, 2, 1)),
        make(3, "N/A", date(2024, 3, 1)),
        make(4, "Sumatera Barat", date(2024, 4, 1)),
    ]
    assert summarize_events(events, 2024).affected_provinces == 2
