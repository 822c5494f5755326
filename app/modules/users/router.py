# app/modules/users/router.py
from fastapi import APIRouter, Depends, status
from pymongo.asynchronous.database import AsyncDatabase

from app.config.database import get_db
from app.shared.schemas.common import InsertOneResponse
from .service import UsersService
from .schemas import UserProfileRequest

router = APIRouter()


@router.post("", response_model=InsertOneResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    user: UserProfileRequest,
    db: AsyncDatabase = Depends(get_db)
):
    """Store a user profile, typically right after sign-up with the identity provider"""
    return await UsersService(db).create_user(user)
