from datetime import date
from typing import Optional

from siglon.events.models import OfficialEventCreate
from siglon.events.utils import UNKNOWN_PROVINCE
from .models import Report


def community_source(reporter_name: str) -> str:
    return f"Community Report ({reporter_name})"


def build_event_from_report(report: Report, today: Optional[date] = None) -> OfficialEventCreate:
    """Derive the official event published when a report is approved"""
    # Province is not derived from the point.
    return OfficialEventCreate(
        location_name=f"Report from {report.reporter_name} at {report.location}",
        event_date=today or date.today(),
        latitude=report.latitude,
        longitude=report.longitude,
        deaths=report.deaths or 0,
        injuries=report.injuries or 0,
        damaged_homes=report.damaged_homes or 0,
        description=report.description,
        source=community_source(report.reporter_name),
        province=UNKNOWN_PROVINCE,
    )
