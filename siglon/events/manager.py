import logging
from collections import Counter
from datetime import date
from typing import Optional

from .models import OfficialEventSubmit, OfficialEventCreate, OfficialEvent, EventStats, MonthlyStat, ProvinceStat, ADMIN_SOURCE
from .utils import derive_province, UNKNOWN_PROVINCE
from siglon.shared.errors import NotFound
from siglon.notifications.manager import notify_broadcast

logger = logging.getLogger("events.manager")

MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
TOP_PROVINCES = 5
OTHER_PROVINCES = "Other"


async def add_official_event(store, data: OfficialEventSubmit) -> OfficialEvent:
    """Insert an event entered directly by the administrator"""
    logger.info(f"Admin is adding an official event at '{data.location_name}' ({data.latitude}, {data.longitude})")
    event = await store.insert_event(OfficialEventCreate(
        location_name=data.location_name,
        event_date=data.event_date,
        latitude=data.latitude,
        longitude=data.longitude,
        deaths=data.deaths,
        injuries=data.injuries,
        damaged_homes=data.damaged_homes,
        description=data.description,
        source=ADMIN_SOURCE,
        province=derive_province(data.location_name),
    ))
    logger.info(f"Official event {event.id} added successfully")
    await notify_broadcast("event.created", event)
    return event


async def list_official_events(store, limit: Optional[int] = None) -> list[OfficialEvent]:
    return await store.list_events(limit=limit)


async def get_official_event(store, event_id: int) -> OfficialEvent:
    event = await store.get_event(event_id)
    if event is None:
        logger.warning(f"Official event {event_id} not found")
        raise NotFound(f"Official event {event_id} not found")
    return event


async def delete_official_event(store, event_id: int) -> None:
    logger.info(f"Deleting official event {event_id}")
    if not await store.delete_event(event_id):
        logger.warning(f"Official event {event_id} not found for deletion")
        raise NotFound(f"Official event {event_id} not found")
    await notify_broadcast("event.deleted", {"id": event_id})


def summarize_events(events: list[OfficialEvent], year: int) -> EventStats:
    monthly = [0] * 12
    for event in events:
        if event.event_date.year == year:
            monthly[event.event_date.month - 1] += 1

    by_province = Counter(e.province for e in events if e.province != UNKNOWN_PROVINCE)
    ranked = sorted(by_province.items(), key=lambda item: (-item[1], item[0]))
    provinces = [ProvinceStat(name=name, value=count) for name, count in ranked[:TOP_PROVINCES]]
    other = sum(count for _, count in ranked[TOP_PROVINCES:])
    other += sum(1 for e in events if e.province == UNKNOWN_PROVINCE)
    if other:
        provinces.append(ProvinceStat(name=OTHER_PROVINCES, value=other))

    return EventStats(
        total_events=len(events),
        total_deaths=sum(e.deaths for e in events),
        total_injuries=sum(e.injuries for e in events),
        total_damaged_homes=sum(e.damaged_homes for e in events),
        affected_provinces=len(by_province),
        year=year,
        monthly=[MonthlyStat(name=MONTHS[i], count=c) for i, c in enumerate(monthly)],
        provinces=provinces,
    )


async def get_event_stats(store, year: Optional[int] = None) -> EventStats:
    events = await store.list_events()
    return summarize_events(events, year or date.today().year)
