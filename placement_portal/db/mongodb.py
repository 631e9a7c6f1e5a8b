"""
MongoDB Connection Utility

MongoDB stores:
- companies: recruiters visiting the campus (name, location, positions, eligibility)
- admins: placement-cell accounts allowed to sign in
"""
import logging

from pymongo import ASCENDING, MongoClient
from pymongo.database import Database
from pymongo.collection import Collection
from pymongo.errors import PyMongoError
from placement_portal.core.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()

# Global client (connection pooling handled internally by pymongo)
_client: MongoClient = None
_db: Database = None


def get_mongo_client() -> MongoClient:
    """Get or create MongoDB client (singleton pattern)"""
    global _client
    if _client is None:
        _client = MongoClient(settings.mongodb_uri)
    return _client


def get_mongo_db() -> Database:
    """Get the configured placement database"""
    global _db
    if _db is None:
        client = get_mongo_client()
        _db = client[settings.mongodb_db]
    return _db


def get_collection(name: str) -> Collection:
    """Get a specific collection by name (see COLLECTIONS)."""
    db = get_mongo_db()
    return db[name]


def close_mongo_client() -> None:
    """Close the shared client; the next call to get_mongo_client reconnects."""
    global _client, _db
    if _client is not None:
        _client.close()
    _client = None
    _db = None


def test_mongo_connection() -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        client = get_mongo_client()
        # ping command checks connection
        client.admin.command('ping')
        return True
    except PyMongoError as e:
        logger.warning("MongoDB connection failed: %s", e)
        return False


# Collection name constants (avoid typos)
COLLECTIONS = {
    "companies": "companies",
    "admins": "admins",
}


def init_mongo_indexes(db: Database = None):
    """
    Create indexes backing the uniqueness rules.
    Call this once during app startup.
    """
    db = db if db is not None else get_mongo_db()

    # Company names are checked before insert; the index catches concurrent duplicates
    db[COLLECTIONS["companies"]].create_index([("name", ASCENDING)], unique=True)

    # One admin account per e-mail
    db[COLLECTIONS["admins"]].create_index([("email", ASCENDING)], unique=True)

    logger.info("MongoDB indexes created successfully")
