# app/modules/riders/repository.py
from typing import Any, Dict

from pymongo.asynchronous.database import AsyncDatabase
from pymongo.results import InsertOneResult

from app.config.database import RIDERS


class RidersRepository:
    def __init__(self, db: AsyncDatabase):
        self.collection = db[RIDERS]

    async def create_rider(self, rider_data: Dict[str, Any]) -> InsertOneResult:
        return await self.collection.insert_one(rider_data)
