# app/api/router.py
from fastapi import APIRouter

from app.modules.parcels.router import router as parcels_router
from app.modules.payments.router import router as payments_router, intent_router
from app.modules.riders.router import router as riders_router
from app.modules.users.router import router as users_router
from app.modules.uploads.router import router as uploads_router

api_router = APIRouter()

api_router.include_router(
    users_router,
    prefix="/users",
    tags=["Users"]
)

api_router.include_router(
    parcels_router,
    prefix="/parcels",
    tags=["Parcels"]
)

api_router.include_router(
    riders_router,
    prefix="/riders",
    tags=["Riders"]
)

api_router.include_router(
    intent_router,
    tags=["Payments"]
)

api_router.include_router(
    payments_router,
    prefix="/payments",
    tags=["Payments"]
)

api_router.include_router(
    uploads_router,
    tags=["Uploads"]
)
