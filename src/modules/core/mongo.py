"""MongoDB client access.

One ``MongoClient`` per process, created lazily from settings.  The client
pools connections and is safe to share between request threads.
"""

from __future__ import annotations

from functools import lru_cache

import structlog
from django.conf import settings
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

logger = structlog.get_logger(__name__)


@lru_cache(maxsize=1)
def get_client() -> MongoClient:
    """Return the process-wide client (no I/O until first command)."""
    logger.info("mongo.client_created", database=settings.MONGODB_DATABASE)
    return MongoClient(
        settings.MONGODB_URI,
        serverSelectionTimeoutMS=settings.MONGODB_TIMEOUT_MS,
        tz_aware=False,
    )


def get_database() -> Database:
    return get_client()[settings.MONGODB_DATABASE]


def get_collection(name: str) -> Collection:
    return get_database()[name]


def ping() -> None:
    """Round-trip to the server; raises ``PyMongoError`` when unreachable."""
    get_client().admin.command("ping")
