"""
Document store connection management.
"""
import logging
from functools import lru_cache
from pymongo import ASCENDING, MongoClient
from pymongo.database import Database
from app.core.config import settings

logger = logging.getLogger(__name__)

USERS = "users"
TRIPS = "trips"


@lru_cache
def get_client() -> MongoClient:
    """Process-wide client; pymongo connects lazily and pools internally."""
    return MongoClient(settings.MONGO_URI, tz_aware=True)


def get_database() -> Database:
    return get_client()[settings.MONGO_DB_NAME]


def get_db() -> Database:
    """Dependency for getting the database handle."""
    return get_database()


def init_db(db: Database) -> None:
    """Create the indexes the stores rely on."""
    db[USERS].create_index([("email", ASCENDING)], unique=True)
    db[TRIPS].create_index([("user", ASCENDING)])
    logger.info(f"Indexes ensured on database '{db.name}'")


def close_client() -> None:
    if get_client.cache_info().currsize:
        get_client().close()
        get_client.cache_clear()
