"""
Field-name translation between the canonical models and each backend's row shape.

The PostgreSQL tables use snake_case Indonesian column names
(korban_meninggal, kerusakan_rumah, ...). The local JSON store keeps the
browser-era documents: events as GeoJSON Features with [lng, lat]
coordinates, reports with camelCase counts (korbanMeninggal, ...) and a
[lat, lng] pair. Nothing outside this module should know either shape.
"""
import datetime

from siglon.reports.models import Report, ReportSubmit
from siglon.events.models import OfficialEvent, OfficialEventCreate
from siglon.events.utils import UNKNOWN_PROVINCE
from siglon.news.models import NewsArticle, NewsCreate
from siglon.knowledge.models import KnowledgeArticle, KnowledgeCreate


def _as_date(value):
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    return datetime.date.fromisoformat(str(value)[:10])


def _as_int(value, default=0):
    return default if value is None else int(value)


class PostgresRowAdapter:
    """Maps canonical models to and from asyncpg records / column dicts."""

    @staticmethod
    def report_from_row(row) -> Report:
        row = dict(row)
        return Report(
            id=row["id"],
            reporter_name=row["nama"],
            description=row["deskripsi"],
            latitude=float(row["latitude"]),
            longitude=float(row["longitude"]),
            deaths=row.get("korban_meninggal"),
            injuries=row.get("korban_luka"),
            damaged_homes=row.get("rumah_rusak"),
            photo=row.get("foto"),
            status=row["status"],
        )

    @staticmethod
    def report_to_row(report: ReportSubmit) -> dict:
        return {
            "nama": report.reporter_name,
            "deskripsi": report.description,
            "latitude": report.latitude,
            "longitude": report.longitude,
            "korban_meninggal": report.deaths,
            "korban_luka": report.injuries,
            "rumah_rusak": report.damaged_homes,
            "foto": report.photo,
        }

    @staticmethod
    def event_from_row(row) -> OfficialEvent:
        row = dict(row)
        return OfficialEvent(
            id=row["id"],
            location_name=row["lokasi"],
            event_date=_as_date(row["tanggal"]),
            latitude=float(row["latitude"]),
            longitude=float(row["longitude"]),
            deaths=_as_int(row.get("korban_meninggal")),
            injuries=_as_int(row.get("korban_luka")),
            damaged_homes=_as_int(row.get("kerusakan_rumah")),
            description=row.get("deskripsi"),
            source=row["sumber"],
            province=row.get("provinsi") or UNKNOWN_PROVINCE,
        )

    @staticmethod
    def event_to_row(event: OfficialEventCreate) -> dict:
        return {
            "lokasi": event.location_name,
            "tanggal": event.event_date,
            "korban_meninggal": event.deaths,
            "korban_luka": event.injuries,
            "kerusakan_rumah": event.damaged_homes,
            "sumber": event.source,
            "deskripsi": event.description,
            "provinsi": event.province,
            "latitude": event.latitude,
            "longitude": event.longitude,
        }

    @staticmethod
    def news_from_row(row) -> NewsArticle:
        row = dict(row)
        return NewsArticle(
            id=row["id"],
            title=row["judul"],
            content=row["isi"],
            summary=row.get("ringkasan"),
            category=row.get("kategori") or "Berita",
            image=row.get("gambar"),
            source_url=row.get("sumber_url"),
            date=_as_date(row["tanggal"]),
        )

    @staticmethod
    def news_to_row(article: NewsCreate) -> dict:
        return {
            "judul": article.title,
            "isi": article.content,
            "ringkasan": article.summary,
            "kategori": article.category,
            "gambar": article.image,
            "sumber_url": article.source_url,
            "tanggal": article.date,
        }

    @staticmethod
    def knowledge_from_row(row) -> KnowledgeArticle:
        row = dict(row)
        return KnowledgeArticle(
            id=row["id"],
            category=row["kategori"],
            title=row["judul"],
            content=row["isi"],
            image=row.get("gambar"),
        )

    @staticmethod
    def knowledge_to_row(article: KnowledgeCreate) -> dict:
        return {
            "kategori": article.category,
            "judul": article.title,
            "isi": article.content,
            "gambar": article.image,
        }


class LocalDocumentAdapter:
    """Maps canonical models to and from the JSON documents of the local store."""

    @staticmethod
    def report_from_document(doc: dict) -> Report:
        lat, lng = doc["latlng"]
        return Report(
            id=doc["id"],
            reporter_name=doc["name"],
            description=doc["description"],
            latitude=lat,
            longitude=lng,
            deaths=doc.get("korbanMeninggal"),
            injuries=doc.get("korbanLuka"),
            damaged_homes=doc.get("rumahRusak"),
            photo=doc.get("photo"),
            status=doc.get("status", "pending"),
        )

    @staticmethod
    def report_to_document(report: Report) -> dict:
        doc = {
            "id": report.id,
            "latlng": [report.latitude, report.longitude],
            "name": report.reporter_name,
            "description": report.description,
            "status": report.status,
        }
        optional = {
            "photo": report.photo,
            "korbanMeninggal": report.deaths,
            "korbanLuka": report.injuries,
            "rumahRusak": report.damaged_homes,
        }
        doc.update({k: v for k, v in optional.items() if v is not None})
        return doc

    @staticmethod
    def event_from_feature(feature: dict) -> OfficialEvent:
        props = feature["properties"]
        lng, lat = feature["geometry"]["coordinates"]
        return OfficialEvent(
            id=props["id"],
            location_name=props["lokasi"],
            event_date=_as_date(props["tanggal"]),
            latitude=lat,
            longitude=lng,
            deaths=_as_int(props.get("korban_meninggal")),
            injuries=_as_int(props.get("korban_luka")),
            damaged_homes=_as_int(props.get("kerusakan_rumah")),
            description=props.get("deskripsi"),
            source=props["sumber"],
            province=props.get("provinsi") or UNKNOWN_PROVINCE,
        )

    @staticmethod
    def event_to_feature(event: OfficialEvent) -> dict:
        props = {
            "id": event.id,
            "lokasi": event.location_name,
            "tanggal": event.event_date.isoformat(),
            "korban_meninggal": event.deaths,
            "korban_luka": event.injuries,
            "kerusakan_rumah": event.damaged_homes,
            "sumber": event.source,
            "provinsi": event.province,
        }
        if event.description is not None:
            props["deskripsi"] = event.description
        return {
            "type": "Feature",
            "properties": props,
            "geometry": {"type": "Point", "coordinates": [event.longitude, event.latitude]},
        }

    @staticmethod
    def news_from_document(doc: dict) -> NewsArticle:
        doc = dict(doc)
        source_url = doc.pop("sourceUrl", None)
        return NewsArticle(**{**doc, "date": _as_date(doc["date"]), "source_url": source_url})

    @staticmethod
    def news_to_document(article: NewsArticle) -> dict:
        doc = article.model_dump(exclude={"source_url"})
        doc["date"] = article.date.isoformat()
        if article.source_url is not None:
            doc["sourceUrl"] = article.source_url
        return doc

    @staticmethod
    def knowledge_from_document(doc: dict) -> KnowledgeArticle:
        return KnowledgeArticle(**doc)

    @staticmethod
    def knowledge_to_document(article: KnowledgeArticle) -> dict:
        return article.model_dump()
