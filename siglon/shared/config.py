import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_LOCAL_STORE_PATH = os.path.join("data", "siglon_db.json")


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Runtime configuration read from the environment."""

    def __init__(self):
        self.database_url = os.getenv("DATABASE_URL")
        self.store_backend = os.getenv(
            "STORE_BACKEND", "postgres" if self.database_url else "local"
        ).strip().lower()
        self.local_store_path = os.getenv("LOCAL_STORE_PATH", DEFAULT_LOCAL_STORE_PATH)
        self.admin_password = os.getenv("ADMIN_PASSWORD", "admin123")
        self.jwt_secret = os.getenv("JWT_SECRET", "siglon-dev-secret")
        self.cors_origins = [
            o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()
        ]
        self.seed_data = _as_bool(os.getenv("SEED_DATA", "true"))
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()

    def __repr__(self):
        return (
            f"Settings(store_backend={self.store_backend!r}, "
            f"local_store_path={self.local_store_path!r}, seed_data={self.seed_data})"
        )
