import logging

logger = logging.getLogger(__name__)

SCHEMA_SQL = """
    -- Official landslide events shown on the public map and stats pages
    CREATE TABLE IF NOT EXISTS official_landslides (
        id SERIAL PRIMARY KEY,
        lokasi TEXT NOT NULL,
        tanggal DATE NOT NULL,
        korban_meninggal INTEGER NOT NULL DEFAULT 0 CHECK (korban_meninggal >= 0),
        korban_luka INTEGER NOT NULL DEFAULT 0 CHECK (korban_luka >= 0),
        kerusakan_rumah INTEGER NOT NULL DEFAULT 0 CHECK (kerusakan_rumah >= 0),
        sumber TEXT NOT NULL,
        deskripsi TEXT,
        provinsi TEXT NOT NULL DEFAULT 'N/A',
        latitude DOUBLE PRECISION NOT NULL,
        longitude DOUBLE PRECISION NOT NULL,
        created_at TIMESTAMP WITH TIME ZONE DEFAULT NOW()
    );

    -- Citizen-submitted reports awaiting review
    CREATE TABLE IF NOT EXISTS user_reports (
        id BIGSERIAL PRIMARY KEY,
        nama TEXT NOT NULL,
        deskripsi TEXT NOT NULL,
        latitude DOUBLE PRECISION NOT NULL,
        longitude DOUBLE PRECISION NOT NULL,
        korban_meninggal INTEGER,
        korban_luka INTEGER,
        rumah_rusak INTEGER,
        foto TEXT,
        status VARCHAR(20) NOT NULL CHECK (status IN ('pending', 'approved', 'rejected')) DEFAULT 'pending',
        created_at TIMESTAMP WITH TIME ZONE DEFAULT NOW(),
        processed_at TIMESTAMP WITH TIME ZONE
    );

    CREATE TABLE IF NOT EXISTS berita (
        id SERIAL PRIMARY KEY,
        judul TEXT NOT NULL,
        isi TEXT NOT NULL,
        ringkasan TEXT,
        kategori TEXT NOT NULL DEFAULT 'Berita',
        gambar TEXT,
        sumber_url TEXT,
        tanggal DATE NOT NULL
    );
    ALTER TABLE berita ADD COLUMN IF NOT EXISTS sumber_url TEXT;

    CREATE TABLE IF NOT EXISTS materi (
        id SERIAL PRIMARY KEY,
        kategori TEXT NOT NULL,
        judul TEXT NOT NULL,
        isi TEXT NOT NULL,
        gambar TEXT
    );

    CREATE INDEX IF NOT EXISTS idx_user_reports_status ON user_reports (status);
    CREATE INDEX IF NOT EXISTS idx_official_landslides_tanggal ON official_landslides (tanggal DESC);
"""


async def create_tables(db):
    """Create the SIGLON tables and indexes if they do not exist"""
    try:
        await db.execute_script(SCHEMA_SQL)
        logger.info("Database tables and indexes created successfully.")
    except Exception as e:
        logger.error(f"Error creating tables: {str(e)}")
        raise
