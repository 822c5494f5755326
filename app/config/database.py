# app/config/database.py
import logging

from fastapi import FastAPI, Request
from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

from .settings import settings

logger = logging.getLogger(__name__)

# Collection names
PARCELS = "parcels"
PAYMENTS = "payments"
RIDERS = "riders"
USERS = "users"


def create_client() -> AsyncMongoClient:
    """Create the process-wide client pinned to Stable API v1"""
    return AsyncMongoClient(
        settings.mongodb_uri,
        server_api=ServerApi("1", strict=True, deprecation_errors=True),
        serverSelectionTimeoutMS=settings.mongodb_timeout_ms,
    )


async def connect(app: FastAPI) -> None:
    client = create_client()
    app.state.mongo_client = client
    app.state.db = client[settings.mongodb_db]

    if not settings.mongodb_ping_on_startup:
        return

    try:
        await client.admin.command("ping")
        logger.info(f"✅ Pinged MongoDB deployment at {settings.mongodb_host}")
    except PyMongoError as e:
        # Startup continues; store calls fail per request
        logger.warning(f"⚠️ MongoDB ping failed ({settings.mongodb_host}): {e}")


async def disconnect(app: FastAPI) -> None:
    client = getattr(app.state, "mongo_client", None)
    if client is not None:
        await client.close()
        logger.info("MongoDB client closed")


# Database dependency
def get_db(request: Request) -> AsyncDatabase:
    """Database dependency for FastAPI"""
    return request.app.state.db
