# app/shared/services/stripe_service.py

import logging
from typing import Optional

import stripe
from fastapi import HTTPException
from starlette.concurrency import run_in_threadpool

from app.config.settings import settings

logger = logging.getLogger(__name__)


class StripeService:
    """Payment gateway client. Card capture happens client-side with the returned secret."""

    def __init__(self, secret_key: Optional[str] = None, stripe_client=stripe):
        self._stripe = stripe_client
        self._secret_key = secret_key
        self.configured = bool(secret_key)

        if not self.configured:
            logger.warning("⚠️ Stripe secret key missing, payment intents disabled")

    async def create_payment_intent(self, amount_in_cents: int) -> str:
        """
        Create a card-payable PaymentIntent and return its client secret.

        The amount is forwarded as-is; the gateway is the authority on bounds.
        """
        if not self.configured:
            raise HTTPException(status_code=500, detail={"error": "Payment gateway is not configured"})

        try:
            intent = await run_in_threadpool(
                self._stripe.PaymentIntent.create,
                amount=amount_in_cents,
                currency=settings.stripe_currency,
                payment_method_types=["card"],
                api_key=self._secret_key,
            )
        except Exception as e:
            logger.error(f"❌ Stripe PaymentIntent creation failed ({amount_in_cents}): {e}")
            raise HTTPException(status_code=500, detail={"error": str(e)})

        logger.info(f"💳 PaymentIntent created: {intent.id} ({amount_in_cents} {settings.stripe_currency})")
        return intent.client_secret


# ==================== SERVICE INSTANCE ====================

stripe_service = StripeService(settings.stripe_secret_key)


def get_payment_gateway() -> StripeService:
    return stripe_service
