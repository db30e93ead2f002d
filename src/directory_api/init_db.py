"""Database initialization script."""

from pathlib import Path

from directory_api.config import settings
from directory_api.database import Base, engine
from directory_api.models import Company, Representative, company_representatives  # noqa: F401
from directory_api.utils.logger import get_logger

logger = get_logger(__name__)


def init_database() -> None:
    """
    Initialize the database by creating all tables.

    Creates the data root first when the database is a SQLite file under it.
    Safe to run multiple times as it won't recreate existing tables.
    """
    if settings.is_sqlite:
        Path(settings.data_root).mkdir(parents=True, exist_ok=True)

    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=engine)
    logger.info(f"Tables ready: {', '.join(Base.metadata.tables.keys())}")


if __name__ == "__main__":
    init_database()
