import logging

from siglon.reports.models import PENDING

logger = logging.getLogger(__name__)


def _point(latitude, longitude):
    return {"type": "Point", "coordinates": [longitude, latitude]}


async def get_map_features(store):
    """
    Combine official events and pending reports into a GeoJSON FeatureCollection.
    Each feature carries kind "official" or "report"; coordinates are [lng, lat].
    """
    events = await store.list_events()
    reports = await store.list_reports(status=PENDING)

    features = []
    for event in events:
        features.append({
            "type": "Feature",
            "geometry": _point(event.latitude, event.longitude),
            "properties": {
                "kind": "official",
                "id": event.id,
                "location_name": event.location_name,
                "event_date": event.event_date.isoformat(),
                "deaths": event.deaths,
                "injuries": event.injuries,
                "damaged_homes": event.damaged_homes,
                "source": event.source,
                "province": event.province,
                "description": event.description,
            },
        })
    for report in reports:
        features.append({
            "type": "Feature",
            "geometry": _point(report.latitude, report.longitude),
            "properties": {
                "kind": "report",
                "id": report.id,
                "reporter_name": report.reporter_name,
                "description": report.description,
                "photo": report.photo,
            },
        })

    logger.info(f"Map feed built with {len(events)} official events and {len(reports)} pending reports")
    return {"type": "FeatureCollection", "features": features}
