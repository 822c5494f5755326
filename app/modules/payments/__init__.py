# app/modules/payments/__init__.py
"""
Payments module - Stripe payment intents and payment confirmation

Confirming a payment is two sequential writes: the parcel is marked paid,
then the payment record is inserted. There is no transaction around them.

Architecture:
- router.py: Payment endpoints (intent creation is not auth-gated)
- service.py: Payment workflow
- repository.py: Data access over the payments collection
- schemas.py: Request/response models
"""

from .router import router, intent_router
from .service import PaymentsService
from .repository import PaymentsRepository

__all__ = [
    "router",
    "intent_router",
    "PaymentsService",
    "PaymentsRepository"
]
