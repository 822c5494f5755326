# app/modules/riders/router.py
from fastapi import APIRouter, Depends, status
from pymongo.asynchronous.database import AsyncDatabase

from app.config.database import get_db
from app.core.auth.dependencies import get_current_user
from app.core.auth.schemas import AuthenticatedUser
from app.shared.schemas.common import InsertOneResponse
from .service import RidersService
from .schemas import RiderApplicationRequest

router = APIRouter()


@router.post("", response_model=InsertOneResponse, status_code=status.HTTP_201_CREATED)
async def create_rider(
    rider: RiderApplicationRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
    db: AsyncDatabase = Depends(get_db)
):
    """Submit a delivery-rider application"""
    return await RidersService(db).create_rider(rider, submitted_by=current_user.email or current_user.uid)
