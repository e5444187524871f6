"""MongoDB client construction."""

from __future__ import annotations

from pymongo import MongoClient
from pymongo.collection import Collection

from ..config import MONGODB_DATABASE, REPORTS_COLLECTION


def create_mongo_client(uri: str | None) -> MongoClient:
    """Return a :class:`pymongo.MongoClient` that reads dates back as aware UTC."""
    if not uri:
        raise EnvironmentError("MONGODB_URI is not set in environment variables")
    return MongoClient(uri, tz_aware=True)


def get_reports_collection(
    client: MongoClient,
    database: str = MONGODB_DATABASE,
    collection: str = REPORTS_COLLECTION,
) -> Collection:
    return client[database][collection]


__all__ = ["create_mongo_client", "get_reports_collection"]
