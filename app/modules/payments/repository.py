# app/modules/payments/repository.py
from typing import Any, Dict, List, Optional

from pymongo import DESCENDING
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.results import InsertOneResult

from app.config.database import PAYMENTS


class PaymentsRepository:
    def __init__(self, db: AsyncDatabase):
        self.collection = db[PAYMENTS]

    async def create_payment(self, payment_data: Dict[str, Any]) -> InsertOneResult:
        return await self.collection.insert_one(payment_data)

    async def get_payments(self, email: Optional[str] = None) -> List[Dict[str, Any]]:
        """Payments newest paid_at first, optionally for one payer"""
        query = {"email": email} if email else {}
        cursor = self.collection.find(query).sort("paid_at", DESCENDING)
        return await cursor.to_list(length=None)
