# app/modules/payments/service.py
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
import logging

from fastapi import HTTPException, status
from pymongo.asynchronous.database import AsyncDatabase

from .repository import PaymentsRepository
from .schemas import PaymentCreateRequest, PaymentRecordedResponse
from app.modules.parcels.repository import ParcelsRepository
from app.shared.database.documents import serialize_documents, to_object_id

logger = logging.getLogger(__name__)


def _iso_timestamp(moment: datetime) -> str:
    """UTC timestamp with millisecond precision and a Z suffix"""
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class PaymentsService:
    def __init__(self, db: AsyncDatabase):
        self.db = db
        self.repository = PaymentsRepository(db)
        self.parcels = ParcelsRepository(db)

    async def record_payment(self, payment: PaymentCreateRequest) -> PaymentRecordedResponse:
        """
        Mark the parcel paid, then store the payment record

        **Failure modes:**
        - Parcel missing: 404 "Parcel not found", nothing written
        - Parcel already paid: 404 "Parcel already paid", nothing written
        - Store fault: 500 "Failed to record payment". If the fault happens
          after the parcel was marked, the parcel stays paid with no record.
        """
        parcel_id = to_object_id(payment.parcelId)
        if parcel_id is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Parcel not found")

        parcel_marked = False
        try:
            update_result = await self.parcels.mark_paid(parcel_id)

            if update_result.modified_count == 0:
                if update_result.matched_count == 0:
                    detail = "Parcel not found"
                else:
                    detail = "Parcel already paid"
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)

            parcel_marked = True
            paid_at = datetime.now(timezone.utc)

            payment_doc = {
                "parcelId": parcel_id,
                "email": payment.email,
                "amount": payment.amount,
                "paymentMethod": payment.paymentMethod,
                "transactionId": payment.transactionId,
                "paid_at_string": _iso_timestamp(paid_at),
                "paid_at": paid_at,
            }

            result = await self.repository.create_payment(payment_doc)

        except HTTPException:
            raise
        except Exception as e:
            if parcel_marked:
                logger.error(
                    f"❌ Parcel {parcel_id} marked paid but payment record was not stored "
                    f"(transaction {payment.transactionId}): {e}"
                )
            else:
                logger.error(f"❌ Error recording payment for parcel {parcel_id}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to record payment"
            )

        logger.info(f"✅ Payment {result.inserted_id} recorded for parcel {parcel_id}")

        return PaymentRecordedResponse(
            message="Payment recorded and parcel marked as paid",
            insertedId=str(result.inserted_id)
        )

    async def list_payments(self, email: Optional[str] = None) -> List[Dict[str, Any]]:
        try:
            payments = await self.repository.get_payments(email)
        except Exception as e:
            logger.error(f"❌ Error listing payments (email={email}): {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to fetch payments"
            )

        return serialize_documents(payments)
