# app/modules/payments/router.py
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query, status
from pymongo.asynchronous.database import AsyncDatabase

from app.config.database import get_db
from app.core.auth.dependencies import get_current_user
from app.core.auth.schemas import AuthenticatedUser
from app.shared.schemas.common import ErrorResponse, MessageResponse
from app.shared.services.stripe_service import StripeService, get_payment_gateway
from .service import PaymentsService
from .schemas import (
    PaymentCreateRequest, PaymentIntentRequest, PaymentIntentResponse, PaymentRecordedResponse
)

router = APIRouter()
intent_router = APIRouter()


@intent_router.post(
    "/create-payment-intent",
    response_model=PaymentIntentResponse,
    responses={500: {"model": ErrorResponse}}
)
async def create_payment_intent(
    payload: PaymentIntentRequest,
    gateway: StripeService = Depends(get_payment_gateway)
):
    """
    Create a Stripe PaymentIntent for a card payment

    Not auth-gated. Returns the client secret used to confirm the card on the client.
    """
    client_secret = await gateway.create_payment_intent(payload.amountInCents)
    return PaymentIntentResponse(clientSecret=client_secret)


@router.post(
    "",
    response_model=PaymentRecordedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={404: {"model": MessageResponse}, 500: {"model": MessageResponse}}
)
async def record_payment(
    payment: PaymentCreateRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
    db: AsyncDatabase = Depends(get_db)
):
    """
    Record a confirmed payment and mark its parcel as paid

    **Returns:**
    - 201 with the inserted payment id
    - 404 when the parcel is missing or already paid
    - 500 when the store fails
    """
    return await PaymentsService(db).record_payment(payment)


@router.get("", response_model=List[Dict[str, Any]])
async def list_payments(
    email: Optional[str] = Query(None, description="Payer email"),
    current_user: AuthenticatedUser = Depends(get_current_user),
    db: AsyncDatabase = Depends(get_db)
):
    """Payment history, most recent first"""
    return await PaymentsService(db).list_payments(email)
