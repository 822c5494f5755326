# app/modules/riders/service.py
import logging

from fastapi import HTTPException
from pymongo.asynchronous.database import AsyncDatabase

from .repository import RidersRepository
from .schemas import RiderApplicationRequest
from app.shared.schemas.common import InsertOneResponse

logger = logging.getLogger(__name__)


class RidersService:
    def __init__(self, db: AsyncDatabase):
        self.db = db
        self.repository = RidersRepository(db)

    async def create_rider(self, rider: RiderApplicationRequest, submitted_by: str) -> InsertOneResponse:
        try:
            result = await self.repository.create_rider(rider.to_document())
        except Exception as e:
            logger.error(f"❌ Error storing rider application from {submitted_by}: {e}")
            raise HTTPException(status_code=500, detail="Failed to submit rider application")

        logger.info(f"🛵 Rider application {result.inserted_id} submitted by {submitted_by}")
        return InsertOneResponse.from_result(result)
