from pymongo import MongoClient
from pymongo.database import Database

from app import settings

_client: MongoClient | None = None


def get_client() -> MongoClient:
    global _client
    if _client is None:
        _client = MongoClient(settings.mongodb_uri, tz_aware=True)
    return _client


def get_database() -> Database:
    return get_client()[settings.database_name]
