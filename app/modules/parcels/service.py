# app/modules/parcels/service.py
from typing import Any, Dict, List, Optional
import logging

from fastapi import HTTPException, status
from pymongo.asynchronous.database import AsyncDatabase

from .repository import ParcelsRepository
from .schemas import ParcelCreateRequest
from app.shared.database.documents import require_object_id, serialize_document, serialize_documents
from app.shared.schemas.common import DeleteOneResponse, InsertOneResponse

logger = logging.getLogger(__name__)


class ParcelsService:
    def __init__(self, db: AsyncDatabase):
        self.db = db
        self.repository = ParcelsRepository(db)

    async def create_parcel(self, parcel: ParcelCreateRequest) -> InsertOneResponse:
        try:
            result = await self.repository.create_parcel(parcel.to_document())
        except Exception as e:
            logger.error(f"❌ Error creating parcel: {e}")
            raise HTTPException(status_code=500, detail="Failed to create parcel")

        logger.info(f"📦 Parcel created: {result.inserted_id}")
        return InsertOneResponse.from_result(result)

    async def list_parcels(self, email: Optional[str] = None) -> List[Dict[str, Any]]:
        try:
            parcels = await self.repository.get_parcels(created_by=email)
        except Exception as e:
            logger.error(f"❌ Error listing parcels (email={email}): {e}")
            raise HTTPException(status_code=500, detail="Failed to fetch parcels")

        return serialize_documents(parcels)

    async def get_parcel(self, parcel_id: str) -> Dict[str, Any]:
        object_id = require_object_id(parcel_id, "parcel id")
        try:
            parcel = await self.repository.get_parcel(object_id)
        except Exception as e:
            logger.error(f"❌ Error fetching parcel {parcel_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to fetch parcel")

        if parcel is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Parcel not found"
            )
        return serialize_document(parcel)

    async def delete_parcel(self, parcel_id: str) -> DeleteOneResponse:
        """Delete by id; a missing parcel reports deletedCount 0"""
        object_id = require_object_id(parcel_id, "parcel id")
        try:
            result = await self.repository.delete_parcel(object_id)
        except Exception as e:
            logger.error(f"❌ Error deleting parcel {parcel_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to delete parcel")

        logger.info(f"🗑️ Parcel delete {parcel_id}: {result.deleted_count} removed")
        return DeleteOneResponse.from_result(result)
