# jobs-api\jobs_api\db\checkdb.py

import logging
import sys

from sqlalchemy import text
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from jobs_api.core.config import settings
from jobs_api.db.database import build_engine

logger = logging.getLogger(__name__)


def mask_database_url(db_url: str) -> str:
    """Hides the password in a user:password@host URL."""
    if "@" not in db_url:
        return db_url
    credentials_part = db_url.split("@", 1)[0].split("://")[-1]
    if ":" not in credentials_part:
        return db_url
    password = credentials_part.split(":", 1)[1]
    return db_url.replace(f":{password}@", ":****@", 1)


def verify_database_connection(db_url: str | None = None) -> bool:
    """
    Connects to the database and runs SELECT 1.
    Returns True when the database answered, False otherwise (the cause is logged).
    """
    db_url = db_url or settings.DATABASE_URL
    logger.info(f"Checking database connection: {mask_database_url(db_url)}")

    engine = None
    try:
        engine = build_engine(db_url)
        # The 'with' statement closes the connection automatically
        with engine.connect() as connection:
            connection.execute(text("SELECT 1")).scalar()
        logger.info("Database connection successful.")
        return True

    except ImportError as import_e:
        # Missing DBAPI driver, e.g. psycopg2 for postgresql URLs
        logger.error(f"Missing database driver: {import_e}")
        return False

    except OperationalError as op_e:
        # Server down, wrong host/port, database does not exist
        logger.error(f"Could not connect to the database: {op_e}")
        return False

    except SQLAlchemyError as e:
        # Bad credentials or a malformed URL
        logger.error(f"Database error during connection check: {e}")
        return False

    finally:
        if engine is not None:
            engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL)
    sys.exit(0 if verify_database_connection() else 1)
