# app/modules/parcels/schemas.py
from typing import Any, Optional

from app.shared.schemas.common import OpenDocument


class ParcelCreateRequest(OpenDocument):
    """Parcel booking; any extra client fields are stored untouched"""
    created_by: Optional[str] = None
    createdAt: Optional[Any] = None
    payment_status: Optional[str] = None
