# app/modules/parcels/router.py
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query, status
from pymongo.asynchronous.database import AsyncDatabase

from app.config.database import get_db
from app.core.auth.dependencies import get_current_user
from app.core.auth.schemas import AuthenticatedUser
from app.shared.schemas.common import DeleteOneResponse, InsertOneResponse, MessageResponse
from .service import ParcelsService
from .schemas import ParcelCreateRequest

router = APIRouter()


@router.post("", response_model=InsertOneResponse, status_code=status.HTTP_201_CREATED)
async def create_parcel(
    parcel: ParcelCreateRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
    db: AsyncDatabase = Depends(get_db)
):
    """Book a new parcel"""
    return await ParcelsService(db).create_parcel(parcel)


@router.get("", response_model=List[Dict[str, Any]])
async def list_parcels(
    email: Optional[str] = Query(None, description="Only parcels created by this email"),
    current_user: AuthenticatedUser = Depends(get_current_user),
    db: AsyncDatabase = Depends(get_db)
):
    """
    List parcels, newest first

    **Filters:**
    - **email**: matches `created_by`
    """
    return await ParcelsService(db).list_parcels(email)


@router.get("/{parcel_id}", responses={404: {"model": MessageResponse}})
async def get_parcel(
    parcel_id: str,
    current_user: AuthenticatedUser = Depends(get_current_user),
    db: AsyncDatabase = Depends(get_db)
):
    return await ParcelsService(db).get_parcel(parcel_id)


@router.delete("/{parcel_id}", response_model=DeleteOneResponse)
async def delete_parcel(
    parcel_id: str,
    current_user: AuthenticatedUser = Depends(get_current_user),
    db: AsyncDatabase = Depends(get_db)
):
    return await ParcelsService(db).delete_parcel(parcel_id)
