# app/modules/users/service.py
import logging

from fastapi import HTTPException
from pymongo.asynchronous.database import AsyncDatabase

from .repository import UsersRepository
from .schemas import UserProfileRequest
from app.shared.schemas.common import InsertOneResponse

logger = logging.getLogger(__name__)


class UsersService:
    def __init__(self, db: AsyncDatabase):
        self.db = db
        self.repository = UsersRepository(db)

    async def create_user(self, user: UserProfileRequest) -> InsertOneResponse:
        try:
            result = await self.repository.create_user(user.to_document())
        except Exception as e:
            logger.error(f"❌ Error creating user profile: {e}")
            raise HTTPException(status_code=500, detail="Failed to create user")

        logger.info(f"👤 User profile created: {result.inserted_id}")
        return InsertOneResponse.from_result(result)
