# app/modules/users/repository.py
from typing import Any, Dict

from pymongo.asynchronous.database import AsyncDatabase
from pymongo.results import InsertOneResult

from app.config.database import USERS


class UsersRepository:
    def __init__(self, db: AsyncDatabase):
        self.collection = db[USERS]

    async def create_user(self, user_data: Dict[str, Any]) -> InsertOneResult:
        return await self.collection.insert_one(user_data)
