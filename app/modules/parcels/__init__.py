# app/modules/parcels/__init__.py
"""
Parcels module - shipment bookings owned by their creator's email

Architecture:
- router.py: Parcel endpoints
- service.py: Parcel use cases
- repository.py: Data access over the parcels collection
- schemas.py: Request/response models
"""

from .router import router
from .service import ParcelsService
from .repository import ParcelsRepository

__all__ = [
    "router",
    "ParcelsService",
    "ParcelsRepository"
]
