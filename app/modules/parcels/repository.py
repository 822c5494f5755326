# app/modules/parcels/repository.py
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo import DESCENDING
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from app.config.database import PARCELS


class ParcelsRepository:
    def __init__(self, db: AsyncDatabase):
        self.collection = db[PARCELS]

    async def create_parcel(self, parcel_data: Dict[str, Any]) -> InsertOneResult:
        return await self.collection.insert_one(parcel_data)

    async def get_parcels(self, created_by: Optional[str] = None) -> List[Dict[str, Any]]:
        """Parcels newest first, optionally only those created by one email"""
        query = {"created_by": created_by} if created_by else {}
        cursor = self.collection.find(query).sort("createdAt", DESCENDING)
        return await cursor.to_list(length=None)

    async def get_parcel(self, parcel_id: ObjectId) -> Optional[Dict[str, Any]]:
        return await self.collection.find_one({"_id": parcel_id})

    async def delete_parcel(self, parcel_id: ObjectId) -> DeleteResult:
        return await self.collection.delete_one({"_id": parcel_id})

    async def mark_paid(self, parcel_id: ObjectId) -> UpdateResult:
        """Set payment_status to paid without checking the current status"""
        return await self.collection.update_one(
            {"_id": parcel_id},
            {"$set": {"payment_status": "paid"}}
        )
