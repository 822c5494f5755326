# app/modules/payments/schemas.py
from pydantic import BaseModel, Field
from typing import List, Union


class PaymentIntentRequest(BaseModel):
    amountInCents: int = Field(..., description="Amount in minor currency units")


class PaymentIntentResponse(BaseModel):
    clientSecret: str


class PaymentCreateRequest(BaseModel):
    # Nothing here proves the transaction belongs to this parcel or amount
    parcelId: str
    email: str
    amount: Union[int, float]
    paymentMethod: Union[str, List[str]]
    transactionId: str


class PaymentRecordedResponse(BaseModel):
    message: str
    insertedId: str
