import logging
from datetime import date

from siglon.shared.store import REPORTS, EVENTS, NEWS, KNOWLEDGE
from siglon.reports.models import ReportSubmit
from siglon.events.models import OfficialEventCreate
from siglon.events.utils import derive_province
from siglon.news.models import NewsCreate
from siglon.knowledge.models import KnowledgeCreate

logger = logging.getLogger(__name__)

OFFICIAL_EVENTS = [
    (1, "Kab. Bogor, Jawa Barat", date(2023, 3, 15), -6.59, 106.8, 5, 3, 12),
    (2, "Kab. Banjarnegara, Jawa Tengah", date(2023, 4, 20), -7.4, 109.69, 2, 8, 25),
    (3, "Kab. Tana Toraja, Sulawesi Selatan", date(2023, 5, 1), -3.05, 119.86, 0, 1, 5),
    (4, "Kab. Agam, Sumatera Barat", date(2024, 1, 10), -0.32, 100.16, 1, 4, 9),
    (5, "Kab. Cianjur, Jawa Barat", date(2024, 2, 22), -6.82, 107.14, 3, 10, 30),
]

PENDING_REPORTS = [
    (101, "Budi Santoso", "Terlihat retakan tanah di tebing dekat pemukiman setelah hujan lebat semalam.", -6.90, 107.60),
    (102, "Siti Aminah", "Ada suara gemuruh dari bukit di belakang desa, air sungai juga menjadi keruh.", -7.79, 110.36),
]

NEWS_ARTICLES = [
    NewsCreate(
        title="BNPB: Waspada Potensi Longsor di Musim Hujan",
        summary="BNPB mengimbau masyarakat untuk meningkatkan kewaspadaan menjelang puncak musim hujan.",
        content="Seluruh BPBD di daerah rawan diminta mengaktifkan posko siaga dan menyosialisasikan langkah mitigasi: "
                "memeriksa kondisi lereng, membersihkan saluran drainase, dan mengenali retakan tanah serta mata air baru.",
        date=date(2024, 7, 15),
        category="Peringatan Dini",
    ),
    NewsCreate(
        title="Teknologi Pemetaan Laser (LiDAR) untuk Mitigasi Longsor",
        summary="Pemanfaatan LiDAR dinilai efektif untuk memetakan area rawan longsor dengan akurasi tinggi.",
        content="LiDAR menghasilkan model topografi tiga dimensi beresolusi tinggi untuk menganalisis kestabilan lereng "
                "dan mensimulasikan jalur aliran longsor.",
        date=date(2024, 7, 12),
        category="Teknologi",
    ),
    NewsCreate(
        title="Relawan Lokal Jadi Ujung Tombak Penanganan Longsor",
        summary="Peran relawan lokal sangat krusial dalam respons cepat dan penanganan awal.",
        content="Program Desa Tangguh Bencana membekali relawan dengan pertolongan pertama, manajemen posko, dan asesmen cepat.",
        date=date(2024, 7, 10),
        category="Komunitas",
    ),
]

KNOWLEDGE_ARTICLES = [
    KnowledgeCreate(
        category="Mitigasi",
        title="Mengenali Tanda-Tanda Awal Longsor",
        content="Retakan tanah di lereng, pohon atau tiang yang miring, mata air baru, dan air sungai yang tiba-tiba keruh.",
    ),
    KnowledgeCreate(
        category="Mitigasi",
        title="Vegetasi Vetiver untuk Mencegah Erosi",
        content="Akar rumput vetiver mencapai 3-4 meter dan mengikat partikel tanah sehingga lereng lebih tahan erosi.",
    ),
    KnowledgeCreate(
        category="Evakuasi",
        title="Langkah Saat Terjadi Longsor",
        content="Segera menjauh dari jalur longsoran menuju tempat yang lebih tinggi dan stabil, lalu ikuti arahan petugas.",
    ),
]


async def seed_data(store):
    """Seed initial data into each collection that is still empty"""
    logger.info("Starting database seeding process.")

    if await store.count(EVENTS) == 0:
        for event_id, lokasi, tanggal, lat, lng, deaths, injuries, homes in OFFICIAL_EVENTS:
            await store.insert_event(
                OfficialEventCreate(
                    location_name=lokasi,
                    event_date=tanggal,
                    latitude=lat,
                    longitude=lng,
                    deaths=deaths,
                    injuries=injuries,
                    damaged_homes=homes,
                    source="BNPB",
                    province=derive_province(lokasi),
                ),
                event_id=event_id,
            )
        logger.info(f"Seeded {len(OFFICIAL_EVENTS)} official events")
    else:
        logger.info("Official events are not empty. Skipping event seeding.")

    if await store.count(REPORTS) == 0:
        for report_id, name, description, lat, lng in PENDING_REPORTS:
            await store.insert_report(
                ReportSubmit(reporter_name=name, description=description, latitude=lat, longitude=lng),
                report_id=report_id,
            )
        logger.info(f"Seeded {len(PENDING_REPORTS)} pending reports")
    else:
        logger.info("Reports are not empty. Skipping report seeding.")

    if await store.count(NEWS) == 0:
        for article in NEWS_ARTICLES:
            await store.insert_news(article)
        logger.info(f"Seeded {len(NEWS_ARTICLES)} news articles")

    if await store.count(KNOWLEDGE) == 0:
        for article in KNOWLEDGE_ARTICLES:
            await store.insert_knowledge(article)
        logger.info(f"Seeded {len(KNOWLEDGE_ARTICLES)} knowledge articles")

    logger.info("Database seeding completed.")
